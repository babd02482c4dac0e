"""
Address book router module for /contacts requests
"""

import logging

from fastapi import APIRouter, Depends

from ..base import UpdateTargetMissing
from ..dependency import LocalRequestData
from .. import helpers
from ...persistence import models
from ... import schemas


logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/contacts",
    tags=["Contacts"]
)


async def get_address_book(local: LocalRequestData = Depends(LocalRequestData)):
    """
    Return the whole address book.

    This operation is safe and idempotent.
    """

    return local.address_book.schema


async def create_new_person(
        person: schemas.PersonCreation,
        local: LocalRequestData = Depends(LocalRequestData)
):
    """
    Add a new person to the address book.

    The new entry gets a fresh ID and will be available at the URI given in the
    `Location` header (and `href` field). Any `id` or `href` of the payload is
    ignored. This operation is neither safe nor idempotent: repeating it adds
    another person with another ID.
    """

    created = local.address_book.add_new(
        lambda person_id: models.Person(id=person_id, name=person.name, href=helpers.person_href(person_id, local))
    )
    logger.info(f"Created {created!r}")
    local.response.headers["Location"] = created.href
    return created.schema


async def get_person_by_id(
        person_id: int,
        local: LocalRequestData = Depends(LocalRequestData)
):
    """
    Return the person with a specific ID.

    A 404 error will be returned in case the ID is unknown.
    """

    return (await helpers.return_one(person_id, local)).schema


async def update_existing_person(
        person_id: int,
        person: schemas.PersonUpdate,
        local: LocalRequestData = Depends(LocalRequestData)
):
    """
    Replace the person with a specific ID.

    The ID and the `href` of the stored entry are kept. This operation is
    idempotent but not safe. People are never created by this operation,
    so a 400 error will be returned in case the ID is unknown.
    """

    updated = models.Person(id=person_id, name=person.name, href=helpers.person_href(person_id, local))
    if not local.address_book.replace_by_id(person_id, updated):
        logger.debug(f"Rejected update of unknown person {person_id}")
        raise UpdateTargetMissing(f"Person with ID {person_id!r}")
    logger.info(f"Updated {updated!r}")
    return updated.schema


async def delete_existing_person(
        person_id: int,
        local: LocalRequestData = Depends(LocalRequestData)
):
    """
    Delete the person with a specific ID.

    A 404 error will be returned in case the ID is unknown. Deleting the same
    ID again answers 404, too, unless the server is configured to remember
    deleted IDs (`general.idempotent_delete`), in which case it answers 204.
    """

    return await helpers.delete_one(person_id, local, logger)


ROUTES = (
    ("GET", "", get_address_book, {
        "response_model": schemas.AddressBook,
        "summary": "List all people"
    }),
    ("POST", "", create_new_person, {
        "status_code": 201,
        "response_model": schemas.Person,
        "summary": "Save a person"
    }),
    ("GET", "/person/{person_id}", get_person_by_id, {
        "name": helpers.PERSON_ROUTE_NAME,
        "response_model": schemas.Person,
        "responses": {404: {"model": schemas.APIError}},
        "summary": "Find a person"
    }),
    ("PUT", "/person/{person_id}", update_existing_person, {
        "response_model": schemas.Person,
        "summary": "Update a person"
    }),
    ("DELETE", "/person/{person_id}", delete_existing_person, {
        "status_code": 204,
        "responses": {404: {"model": schemas.APIError}},
        "summary": "Delete a person"
    }),
)

for _method, _path, _endpoint, _options in ROUTES:
    router.add_api_route(_path, _endpoint, methods=[_method], **_options)
