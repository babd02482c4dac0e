"""
Address book schemas for people and the address book itself
"""

from typing import List, Optional

import pydantic


__all__ = ["AddressBook", "Person", "PersonCreation", "PersonUpdate"]


class Person(pydantic.BaseModel):
    id: pydantic.NonNegativeInt = 0
    name: str
    href: Optional[str] = None


class PersonCreation(pydantic.BaseModel):
    """
    Payload of a new person; any given `id` or `href` is ignored
    """

    name: str


class PersonUpdate(pydantic.BaseModel):
    """
    Payload replacing a stored person; `id` and `href` are taken from the request path
    """

    name: str


class AddressBook(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(populate_by_name=True)

    person_list: List[Person] = pydantic.Field(default_factory=list, alias="personList")
