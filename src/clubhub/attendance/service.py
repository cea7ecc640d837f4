from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from ..core.exceptions import EventNotFoundError, MemberNotFoundError, MemberNotInAttendanceError
from ..events.model import Event, EventId
from ..persons.model import Name
from .model import AddAttendanceResult, Attendance, AttendanceSummary, MarkAttendanceResult
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def deduplicate_preserving_order(names: Iterable[Name]) -> list[Name]:
    return list(dict.fromkeys(names))


class AttendanceService:
    """Bulk add/mark of attendance rows on top of an attendance repository.

    Both bulk operations fail fast: the first unknown name aborts the call, and
    rows already changed earlier in the same call are left as they are. The
    caller decides whether the whole call counts as one undoable step.
    """

    def __init__(self, repository: AttendanceRepository, *, log: Optional[logging.Logger] = None):
        self._repo = repository
        self._log = log or logger

    def _require_event(self, event_id: EventId) -> Event:
        event = self._repo.get_event_by_event_id(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def _index_by_member(self, event_id: EventId) -> dict[Name, Attendance]:
        index: dict[Name, Attendance] = {}
        for attendance in self._repo.get_attendance_list():
            if attendance.event_id != event_id:
                continue
            assert attendance.member_name not in index, "duplicate attendance rows for one member of an event"
            index[attendance.member_name] = attendance
        return index

    def add_attendance(self, event_id: EventId, member_names: Sequence[Name]) -> AddAttendanceResult:
        event = self._require_event(event_id)

        added: list[Name] = []
        duplicates: list[Name] = []
        for name in deduplicate_preserving_order(member_names):
            if not self._repo.has_person_named(name):
                raise MemberNotFoundError(name)

            attendance = Attendance(event_id, name)
            if self._repo.has_attendance(attendance):
                duplicates.append(name)
                continue

            self._repo.add_attendance(attendance)
            added.append(name)

        self._log.debug(
            "Added %d attendance records (skipped %d duplicates) for event %s",
            len(added),
            len(duplicates),
            event_id,
        )
        return AddAttendanceResult(event, added, duplicates)

    def mark_attendance(self, event_id: EventId, member_names: Sequence[Name]) -> MarkAttendanceResult:
        event = self._require_event(event_id)
        by_member = self._index_by_member(event_id)

        newly_marked: list[Name] = []
        already_marked: list[Name] = []
        for name in deduplicate_preserving_order(member_names):
            attendance = by_member.get(name)
            if attendance is None:
                raise MemberNotInAttendanceError(name)

            if attendance.attended:
                already_marked.append(name)
                continue

            self._repo.set_attendance(attendance, attendance.mark_attended())
            newly_marked.append(name)

        self._log.debug(
            "Marked attendance for %d members (skipped %d already marked) in event %s",
            len(newly_marked),
            len(already_marked),
            event_id,
        )
        return MarkAttendanceResult(event, newly_marked, already_marked)

    def show_attendance(self, event_id: EventId) -> AttendanceSummary:
        event = self._require_event(event_id)
        rows = [a for a in self._repo.get_attendance_list() if a.event_id == event_id]
        return AttendanceSummary(
            event,
            attended=[a.member_name for a in rows if a.attended],
            absent=[a.member_name for a in rows if not a.attended],
        )
