"""
Address book API dependency library
"""

import fastapi.datastructures
from fastapi import Request, Response

from ..persistence.store import AddressBook
from ..settings import Settings


class LocalRequestData:
    """
    Collection of core dependencies used by all path operations

    The address book and the settings are bound to the application
    by ``create_app``; this class only hands over the references of
    the application serving the current request, it never copies them.
    """

    def __init__(self, request: Request, response: Response):
        self.request = request
        self.response = response
        self.headers: fastapi.datastructures.Headers = request.headers

    @property
    def address_book(self) -> AddressBook:
        return self.request.app.state.address_book

    @property
    def config(self) -> Settings:
        return self.request.app.state.settings
