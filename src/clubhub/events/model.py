from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from ..common.money import Money
from ..common.validators import require_no_delimiter, require_no_whitespace, require_non_empty


@dataclass(frozen=True)
class EventId:
    value: str

    def __post_init__(self):
        value = require_non_empty(self.value, "Event ID")
        require_no_whitespace(value, "Event ID")
        require_no_delimiter(value, "Event ID")
        object.__setattr__(self, "value", value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Event:
    """Domain entity: a club event. Identity is the event id."""

    event_id: EventId
    description: str
    date: date
    expense: Money = field(default_factory=Money.zero)

    def __post_init__(self):
        object.__setattr__(self, "description", require_non_empty(self.description, "Description"))

    def is_same_event(self, other: "Event") -> bool:
        return other is not None and other.event_id == self.event_id

    def falls_within(self, start: date, end: date) -> bool:
        return start <= self.date <= end
