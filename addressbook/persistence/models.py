"""
Address book record models
"""

import dataclasses
from typing import Optional

from .. import schemas


@dataclasses.dataclass
class Person:
    id: int = 0
    name: str = ""
    href: Optional[str] = None

    @property
    def schema(self) -> schemas.Person:
        return schemas.Person(id=self.id, name=self.name, href=self.href)

    def __repr__(self) -> str:
        return f"Person(id={self.id}, name={self.name!r})"
