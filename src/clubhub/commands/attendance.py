from __future__ import annotations

from dataclasses import dataclass

from ..addressbook.manager import ModelManager
from ..core.exceptions import AttendanceOperationError, CommandError
from ..events.model import EventId
from ..persons.model import Name
from .base import Command, CommandResult
from .formatting import format_add_attendance, format_attendance_summary, format_mark_attendance


@dataclass(frozen=True)
class AddAttendanceCommand(Command):
    """Adds members to an event's attendance list."""

    event_id: EventId
    member_names: tuple[Name, ...]

    def __post_init__(self):
        object.__setattr__(self, "member_names", tuple(self.member_names))

    def execute(self, model: ModelManager) -> CommandResult:
        try:
            result = model.add_attendance(self.event_id, self.member_names)
        except AttendanceOperationError as e:
            raise CommandError(str(e)) from e
        return CommandResult(format_add_attendance(result), result)


@dataclass(frozen=True)
class MarkAttendanceCommand(Command):
    """Marks members on an event's attendance list as attended."""

    event_id: EventId
    member_names: tuple[Name, ...]

    def __post_init__(self):
        object.__setattr__(self, "member_names", tuple(self.member_names))

    def execute(self, model: ModelManager) -> CommandResult:
        try:
            result = model.mark_attendance(self.event_id, self.member_names)
        except AttendanceOperationError as e:
            raise CommandError(str(e)) from e
        return CommandResult(format_mark_attendance(result), result)


@dataclass(frozen=True)
class ShowAttendanceCommand(Command):
    event_id: EventId

    undoable = False

    def execute(self, model: ModelManager) -> CommandResult:
        try:
            summary = model.show_attendance(self.event_id)
        except AttendanceOperationError as e:
            raise CommandError(str(e)) from e
        return CommandResult(format_attendance_summary(summary), summary)
