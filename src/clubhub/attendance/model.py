from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Sequence

from ..events.model import Event, EventId
from ..persons.model import Name


@dataclass(frozen=True)
class Attendance:
    """Domain entity: one member on one event's attendance list.

    Keyed by ``(event_id, member_name)``. Marking produces a new value.
    """

    event_id: EventId
    member_name: Name
    attended: bool = False

    @property
    def key(self) -> tuple[EventId, Name]:
        return (self.event_id, self.member_name)

    def is_same_attendance(self, other: "Attendance") -> bool:
        return other is not None and other.key == self.key

    def mark_attended(self) -> "Attendance":
        return replace(self, attended=True)


def _freeze(names: Sequence[Name]) -> tuple[Name, ...]:
    return tuple(names)


@dataclass(frozen=True)
class AddAttendanceResult:
    event: Event
    added_members: tuple[Name, ...]
    duplicate_members: tuple[Name, ...]

    def __post_init__(self):
        object.__setattr__(self, "added_members", _freeze(self.added_members))
        object.__setattr__(self, "duplicate_members", _freeze(self.duplicate_members))


@dataclass(frozen=True)
class MarkAttendanceResult:
    event: Event
    newly_marked_members: tuple[Name, ...]
    already_marked_members: tuple[Name, ...]

    def __post_init__(self):
        object.__setattr__(self, "newly_marked_members", _freeze(self.newly_marked_members))
        object.__setattr__(self, "already_marked_members", _freeze(self.already_marked_members))


@dataclass(frozen=True)
class AttendanceSummary:
    """Read-model for one event's attendance, split by the attended flag."""

    event: Event
    attended: tuple[Name, ...]
    absent: tuple[Name, ...]

    def __post_init__(self):
        object.__setattr__(self, "attended", _freeze(self.attended))
        object.__setattr__(self, "absent", _freeze(self.absent))

    @property
    def attended_count(self) -> int:
        return len(self.attended)

    @property
    def absent_count(self) -> int:
        return len(self.absent)
