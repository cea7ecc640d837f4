from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..events.model import Event, EventId
from ..persons.model import Name
from .model import Attendance


class AttendanceRepository(Protocol):
    """What the attendance engine needs from the dataset it works on."""

    def get_event_by_event_id(self, event_id: EventId) -> Optional[Event]:
        raise NotImplementedError

    def has_person_named(self, name: Name) -> bool:
        raise NotImplementedError

    def has_attendance(self, attendance: Attendance) -> bool:
        raise NotImplementedError

    def add_attendance(self, attendance: Attendance) -> None:
        raise NotImplementedError

    def set_attendance(self, target: Attendance, edited: Attendance) -> None:
        raise NotImplementedError

    def get_attendance_list(self) -> Sequence[Attendance]:
        raise NotImplementedError
