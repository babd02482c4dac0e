"""
Address book REST API definition

The API manages a single address book of people. It always returns
JSON-encoded data to any kind of request which needs a response body,
which is not the case for redirects or deleted resources, for example.
Error responses use the schema of the `APIError`, although clients
should only depend on the status code of those responses:

1. The `400` (Bad Request) error response is returned whenever the request
   body can't be read as a person or when an update names a person that
   doesn't exist. Updates never create new people.
2. The `404` (Not Found) error response is returned whenever a person's
   ID can't be found for reading or deleting it.

Reading the address book or a person is safe and idempotent. Creating a
person is neither safe nor idempotent, every request adds another entry.
Updating a person is idempotent but not safe. Deleting a person is not safe;
whether deleting it again succeeds depends on the server configuration.
"""

import logging.config
from contextlib import asynccontextmanager
from typing import Any, Callable, Dict, Optional, Type, Union

import fastapi
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import base
from .routers import router
from .. import schemas, __version__
from ..persistence import models
from ..persistence.store import AddressBook
from ..settings import Settings


DEFAULT_EXCEPTION_HANDLERS = {
    StarletteHTTPException: base.APIException.handle,
    RequestValidationError: base.handle_request_validation_error,
    Exception: base.handle_generic_exception
}


def _make_app(
        title: str,
        version: str,
        description: str,
        exception_handlers: Optional[Dict[Any, Callable]] = None,
        root_redirect: bool = True,
        responses: Optional[Dict[Union[int, str], Dict[str, Any]]] = None,
        api_class: Optional[Type[fastapi.FastAPI]] = None,
        **kwargs
) -> fastapi.FastAPI:
    if api_class is None:
        api_class = fastapi.FastAPI
    app = api_class(
        title=title,
        version=version,
        description=description,
        responses=responses or {400: {"model": schemas.APIError}},
        **kwargs
    )

    handlers = exception_handlers or DEFAULT_EXCEPTION_HANDLERS
    for exc in handlers:
        app.add_exception_handler(exc, handlers[exc])

    if root_redirect:
        @app.get("/", include_in_schema=False)
        async def redirect_root():
            return fastapi.responses.RedirectResponse("./docs")

    return app


def seed_address_book(settings: Settings, logger: Optional[logging.Logger] = None) -> AddressBook:
    """
    Create a new address book holding the contacts of the settings (in order, with IDs from 1)
    """

    book = AddressBook(logger=logger)
    for contact in settings.contacts:
        book.add_new(lambda person_id: models.Person(id=person_id, name=contact.name))
    return book


def create_app(
        settings: Optional[Settings] = None,
        address_book: Optional[AddressBook] = None,
        configure_logging: bool = True
) -> fastapi.FastAPI:
    """
    Create a new ``FastAPI`` instance using the specified settings and address book

    This function is conveniently used to allow overwriting the settings
    before launching the application as well as to allow multiple ``FastAPI``
    instances with their own address books in one program, which in turn makes
    unit testing much easier. The address book is bound to the application and
    handed to each request, there's no global instance.

    :param settings: optional Settings instance (would be created if not present)
    :param address_book: optional address book (would be created and seeded
        with the contacts from the settings if not present)
    :param configure_logging: switch whether to configure logging
    :return: new ``FastAPI`` instance
    """

    @asynccontextmanager
    async def lifespan(_: fastapi.FastAPI):
        logger.info(f"Starting API with {len(address_book)} people in the address book...")
        yield
        logger.info("Shutting down...")

    if settings is None:
        settings = Settings()

    if configure_logging:
        logging.config.dictConfig(settings.logging.model_dump())
    logger = logging.getLogger(__name__)
    logger.debug("Starting application...")

    if address_book is None:
        address_book = seed_address_book(settings, logging.getLogger("addressbook.persistence"))

    app = _make_app(
        title="Address book REST API",
        version=__version__,
        description=__doc__,
        lifespan=lifespan,
        api_class=base.APIWithoutValidationError
    )
    app.state.settings = settings
    app.state.address_book = address_book
    app.include_router(router)
    return app


class APIWrapper:
    """
    Wrapper class around the FastAPI main object, accessible via the ``app`` property

    There should be only one global instance of this object, which should only
    export its functionality to hold the ``app`` property. This wrapper can be
    used to allow easy command-line usage via ``uvicorn`` calls. Example:

    .. code-block::

        uvicorn addressbook.api.api:api.app
    """

    def __init__(self):
        self._app: Optional[fastapi.FastAPI] = None

    @property
    def app(self) -> fastapi.FastAPI:
        """
        Return the ``app`` instance (or create it with default settings if it doesn't exist)
        """

        if self._app is None:
            self._app = create_app()
        return self._app


api = APIWrapper()
