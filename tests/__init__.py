"""
Address book unit tests
"""

import unittest
from .test_api import APITests
from .test_cli import StandaloneCLITests
from .test_load import LoadTests
from .test_settings import LoggerTests, SettingsTests
from .test_store import AddressBookTests


TEST_CLASSES = [
    AddressBookTests,
    APITests,
    LoadTests,
    LoggerTests,
    SettingsTests,
    StandaloneCLITests,
]


def get_suite() -> unittest.TestSuite:
    suite = unittest.TestSuite()
    for cls in TEST_CLASSES:
        for fixture in filter(lambda f: f.startswith("test_"), dir(cls)):
            suite.addTest(cls(fixture))
    return suite
