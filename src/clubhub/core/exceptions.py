from .constants import MESSAGE_EVENT_NOT_FOUND, MESSAGE_MEMBER_NOT_FOUND, MESSAGE_MEMBER_NOT_IN_ATTENDANCE


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class DuplicateEntityError(DomainError):
    """Raised when adding an entity that collides with an existing one."""


class EntityNotFoundError(DomainError):
    """Raised when removing or replacing an entity that is not stored."""


class AttendanceOperationError(DomainError):
    """Raised when an attendance operation could not be completed."""


class EventNotFoundError(AttendanceOperationError):
    def __init__(self, event_id=None):
        super().__init__(MESSAGE_EVENT_NOT_FOUND)
        self.event_id = event_id


class MemberNotFoundError(AttendanceOperationError):
    """A named member is not a known person."""

    def __init__(self, name):
        super().__init__(MESSAGE_MEMBER_NOT_FOUND.format(name=name))
        self.name = name


class MemberNotInAttendanceError(AttendanceOperationError):
    """A named member has no attendance row for the event."""

    def __init__(self, name):
        super().__init__(MESSAGE_MEMBER_NOT_IN_ATTENDANCE.format(name=name))
        self.name = name


class CommandError(DomainError):
    """Raised by the command layer; the message is shown to the user."""
