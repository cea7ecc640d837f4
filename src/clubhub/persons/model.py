from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..common.validators import require_no_delimiter, require_non_empty


@dataclass(frozen=True)
class Name:
    """Display name of a club member; trimmed and compared exactly."""

    value: str

    def __post_init__(self):
        value = require_non_empty(self.value, "Name")
        require_no_delimiter(value, "Name")
        object.__setattr__(self, "value", value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Person:
    """Domain entity: a club member. Identity is the name."""

    name: Name
    phone: Optional[str] = None
    email: Optional[str] = None
    tags: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, "tags", frozenset(self.tags))

    def is_same_person(self, other: "Person") -> bool:
        return other is not None and other.name == self.name
