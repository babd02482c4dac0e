"""
Generic helper library for the address book REST API
"""

import logging
from typing import Optional

from fastapi.responses import Response

from .base import NotFound
from .dependency import LocalRequestData
from ..persistence import models
from ..misc.logger import enforce_logger


PERSON_ROUTE_NAME = "get_person_by_id"


def person_href(person_id: int, local: LocalRequestData) -> str:
    """
    Return the canonical absolute URI of the person identified by its ID

    The URI is built from the base URI of the current request, unless the
    server has been configured with a public base URL (e.g. behind proxies).

    :param person_id: unique identifier of the person
    :param local: contextual local data
    :return: absolute URI of the ``GET`` operation for that person
    """

    base_url = local.config.server.public_base_url or local.request.base_url
    path = local.request.app.url_path_for(PERSON_ROUTE_NAME, person_id=person_id)
    return str(path.make_absolute_url(str(base_url)))


async def return_one(person_id: int, local: LocalRequestData) -> models.Person:
    """
    Return the person identified by its ID

    :param person_id: unique identifier of the person
    :param local: contextual local data
    :return: copy of the stored person
    :raises NotFound: when the specified ID returned no result
    """

    person = local.address_book.find_by_id(person_id)
    if person is None:
        raise NotFound(f"Person with ID {person_id!r}")
    return person


async def delete_one(
        person_id: int,
        local: LocalRequestData,
        logger: Optional[logging.Logger] = None
) -> Response:
    """
    Delete the identified person from the address book

    With the ``idempotent_delete`` setting, deleting a person that has
    already been deleted before succeeds again instead of failing.

    :param person_id: unique identifier of the person to be deleted
    :param local: contextual local data
    :param logger: optional logger that should be used for INFO and DEBUG messages
    :raises NotFound: when the specified ID can't be found
    """

    logger = enforce_logger(logger)
    if local.address_book.remove_by_id(person_id):
        logger.info(f"Deleted person {person_id}")
    elif local.config.general.idempotent_delete and local.address_book.was_removed(person_id):
        logger.debug(f"Person {person_id} has already been deleted")
    else:
        raise NotFound(f"Person with ID {person_id!r}")
    return Response(status_code=204)
