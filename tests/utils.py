"""
Helper functions to make writing unit tests for the address book easier
"""

import os
import random
import secrets
import unittest
import threading
from typing import Iterable, List, Mapping, Optional, Tuple, Type, Union

import pydantic
import requests
import uvicorn

from addressbook import settings as _settings
from addressbook.api.api import create_app
from addressbook.persistence import models
from addressbook.persistence.store import AddressBook

from . import conf


class BaseTest(unittest.TestCase):
    """
    A base class for unit tests which introduces simple setup and teardown of unit tests

    If a subclass needs special setup or teardown functionality, it **MUST**
    call the superclasses setup and teardown methods: the superclass setup
    method at the beginning of the subclass setup method, the superclass
    teardown method at the end of the subclass teardown method.
    """

    config_file: Optional[str] = None
    _old_config_paths: Optional[List[str]] = None

    def setUp(self) -> None:
        self.config_file = f"config_{os.getpid()}_{secrets.token_hex(8)}.json"
        self._old_config_paths = _settings.CONFIG_PATHS
        _settings.CONFIG_PATHS = [self.config_file]

    def tearDown(self) -> None:
        _settings.CONFIG_PATHS = self._old_config_paths
        if self.config_file and os.path.exists(self.config_file):
            os.remove(self.config_file)

    @staticmethod
    def get_sample_people(*names: str) -> List[models.Person]:
        return [models.Person(id=i + 1, name=name) for i, name in enumerate(names)]


class BaseAPITests(BaseTest):
    """
    A base class for unit tests that need a running API server

    The server is started by ``launch_server`` in a background thread of the
    test process, so that the test can inspect the address book it injected.
    """

    server_port: Optional[int] = None
    server: Optional[uvicorn.Server] = None
    server_thread: Optional[threading.Thread] = None
    address_book: Optional[AddressBook] = None

    @property
    def server_uri(self) -> str:
        return f"http://{conf.SERVER_HOST}:{self.server_port}/"

    def launch_server(
            self,
            address_book: Optional[AddressBook] = None,
            settings: Optional[_settings.Settings] = None
    ) -> AddressBook:
        """
        Start the API server serving the given address book

        Without an address book, the application creates a new one holding
        the contacts of the settings, which is returned as well.
        """

        app = create_app(settings or _settings.Settings(), address_book, configure_logging=False)
        self.address_book = app.state.address_book

        for i in range(conf.MAX_SERVER_START_RETRIES):
            self.server_port = random.randint(10000, 30000)
            self.server = uvicorn.Server(uvicorn.Config(
                app,
                host=conf.SERVER_HOST,
                port=self.server_port,
                log_config=None,
                log_level=conf.SERVER_LOG_LEVEL,
                access_log=False
            ))
            self.server_thread = threading.Thread(target=self.server.run, daemon=True)
            self.server_thread.start()

            for j in range(conf.MAX_SERVER_WAIT_RETRIES):
                if self.server.started:
                    return self.address_book
                if not self.server_thread.is_alive():
                    break
                self.server_thread.join(conf.SERVER_START_WAIT_TIMEOUT)
            self._quit_server()

        self.fail(f"Failed to successfully start the API server after {conf.MAX_SERVER_START_RETRIES} tries.")

    def _quit_server(self):
        if self.server is None:
            return
        self.server.should_exit = True
        if self.server_thread is not None:
            self.server_thread.join(conf.SERVER_STOP_TIMEOUT)
        self.server = None
        self.server_thread = None

    def tearDown(self) -> None:
        self._quit_server()
        super().tearDown()

    def assertQuery(
            self,
            endpoint: Tuple[str, str],
            status_code: Union[int, Iterable[int]] = 200,
            json: Optional[Union[dict, pydantic.BaseModel]] = None,
            r_none: bool = False,
            r_is_json: bool = True,
            r_headers: Optional[Union[Mapping, Iterable]] = None,
            r_schema: Optional[Union[pydantic.BaseModel, Type[pydantic.BaseModel]]] = None,
            **kwargs
    ) -> requests.Response:
        """
        Do a query to the specified endpoint and return the response

        Besides also carrying the optional JSON data and other keyword arguments,
        this function asserts that the response has the specified status code.
        Furthermore, the optional asserted response headers and asserted response
        schema can be used, where the headers are either an iterable to only
        assert certain keys or a mapping to also assert values, and the schema is
        either a schema class or an instance thereof (in the later case, the
        values will be compared to the response, too).

        :param endpoint: tuple of the method and the path of the endpoint
        :param status_code: asserted status code(s) of the final server's response
        :param json: optional dictionary or model holding the request data
        :param r_none: switch to expect no (=empty) result and skip all other response content checks
        :param r_is_json: switch to check that the response contains JSON data
        :param r_headers optional set of headers which are asserted in the response
        :param r_schema: optional class or instance of a response schema to be asserted
        :param kwargs: dict of any further keyword arguments, passed to ``requests.request``
        :return: response to the requested resource
        """

        method, path = endpoint
        if path.startswith("/"):
            path = path[1:]
        if isinstance(json, pydantic.BaseModel):
            json = json.model_dump(by_alias=True)

        response = requests.request(method.upper(), self.server_uri + path, json=json, **kwargs)

        if isinstance(status_code, int):
            self.assertEqual(status_code, response.status_code, response.text)
        else:
            self.assertIn(response.status_code, status_code, response.text)

        if r_headers is not None:
            for k in (r_headers.keys() if isinstance(r_headers, Mapping) else r_headers):
                self.assertIsNotNone(response.headers.get(k), response.headers)
                if isinstance(r_headers, Mapping):
                    self.assertEqual(r_headers[k], response.headers.get(k), response.headers)

        if r_none:
            self.assertEqual("", response.text)

        else:
            if r_is_json:
                self.assertEqual("application/json", response.headers.get("Content-Type"))
                try:
                    self.assertIsNotNone(response.json())
                except ValueError:
                    self.fail(("No JSON content detected", response.headers, response.text))

            if r_schema and isinstance(r_schema, pydantic.BaseModel):
                self.assertEqual(r_schema, type(r_schema)(**response.json()), response.json())
            elif r_schema and isinstance(r_schema, type) and issubclass(r_schema, pydantic.BaseModel):
                self.assertTrue(r_schema(**response.json()), response.json())

        return response
