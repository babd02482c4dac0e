"""
Address book in-memory store

The store owns the ordered list of people together with the id counter.
All operations are serialized by one re-entrant lock, so that concurrent
request handlers can share a single instance safely.
"""

import copy
import logging
import threading
from typing import Callable, Iterable, List, Optional, Set

from . import models
from .. import schemas
from ..misc.logger import enforce_logger


class AddressBook:
    """
    Ordered collection of people with a monotonic id counter

    Ids are never reused, even after deletion: the counter is always
    greater than every id that was ever issued or added to the book.
    The people returned by any accessor are copies, so that modifying
    them never changes the state of the book behind its lock.
    """

    def __init__(self, people: Optional[Iterable[models.Person]] = None, logger: Optional[logging.Logger] = None):
        self._lock = threading.RLock()
        self._people: List[models.Person] = []
        self._next_id: int = 1
        self._removed: Set[int] = set()
        self.logger = enforce_logger(logger)
        for person in people or []:
            self.add(person)

    def __len__(self) -> int:
        with self._lock:
            return len(self._people)

    @property
    def schema(self) -> schemas.AddressBook:
        return schemas.AddressBook(person_list=[p.schema for p in self.all_people()])

    def all_people(self) -> List[models.Person]:
        with self._lock:
            return [copy.copy(p) for p in self._people]

    def next_id(self) -> int:
        with self._lock:
            value = self._next_id
            self._next_id += 1
            return value

    def find_by_id(self, person_id: int) -> Optional[models.Person]:
        with self._lock:
            index = self._index_of(person_id)
            if index is None:
                return None
            return copy.copy(self._people[index])

    def add(self, person: models.Person):
        """
        Append a person which already carries a unique, non-zero id

        :param person: the new entry (stored as a copy)
        :raises ValueError: when the id is unassigned, taken or has been removed before
        """

        if person.id <= 0:
            raise ValueError(f"Person {person!r} has no assigned id")
        with self._lock:
            if self._index_of(person.id) is not None or person.id in self._removed:
                raise ValueError(f"Id {person.id} has already been used in the address book")
            self._people.append(copy.copy(person))
            self._next_id = max(self._next_id, person.id + 1)
            self.logger.debug(f"Added {person!r}")

    def add_new(self, make: Callable[[int], models.Person]) -> models.Person:
        """
        Draw a fresh id, build the person for it and append it in one step

        :param make: callable receiving the new id and returning the person to store
        :return: a copy of the stored person
        """

        with self._lock:
            person = make(self.next_id())
            self.add(person)
            return copy.copy(person)

    def replace_by_id(self, person_id: int, person: models.Person) -> bool:
        if person.id != person_id:
            raise ValueError(f"Replacement {person!r} must keep the id {person_id}")
        with self._lock:
            index = self._index_of(person_id)
            if index is None:
                return False
            self._people[index] = copy.copy(person)
            self.logger.debug(f"Replaced person {person_id} by {person!r}")
            return True

    def remove_by_id(self, person_id: int) -> bool:
        with self._lock:
            index = self._index_of(person_id)
            if index is None:
                return False
            del self._people[index]
            self._removed.add(person_id)
            self.logger.debug(f"Removed person {person_id}")
            return True

    def was_removed(self, person_id: int) -> bool:
        with self._lock:
            return person_id in self._removed

    def _index_of(self, person_id: int) -> Optional[int]:
        for index, person in enumerate(self._people):
            if person.id == person_id:
                return index
        return None
