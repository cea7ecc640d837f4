from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Optional, Sequence

from ..attendance.model import AddAttendanceResult, Attendance, AttendanceSummary, MarkAttendanceResult
from ..attendance.service import AttendanceService
from ..budget.model import Budget
from ..common.money import Money
from ..events.model import Event, EventId
from ..persons.model import Name, Person
from ..tasks.model import Task
from .address_book import AddressBook
from .versioned import VersionedAddressBook

logger = logging.getLogger(__name__)


def show_all(_item) -> bool:
    return True


class ModelManager:
    """In-memory model of the club's data.

    All mutations go straight to the versioned address book's current state.
    Undo history is only recorded when the caller calls ``commit()``.
    """

    def __init__(self, address_book: Optional[AddressBook] = None, *, log: Optional[logging.Logger] = None):
        self._log = log or logger
        self._log.debug("Initializing with address book: %r", address_book)

        self._book = VersionedAddressBook(address_book)
        self._attendance = AttendanceService(self._book, log=self._log)
        self._person_filter: Callable[[Person], bool] = show_all
        self._event_filter: Callable[[Event], bool] = show_all
        self._task_filter: Callable[[Task], bool] = show_all

    # =========== AddressBook ===========

    @property
    def address_book(self) -> AddressBook:
        """Read-only copy of the current state."""

        return self._book.snapshot()

    def set_address_book(self, address_book: AddressBook) -> None:
        self._book.reset_data(address_book)

    def has_person(self, person: Person) -> bool:
        return self._book.has_person(person)

    def add_person(self, person: Person) -> None:
        self._log.info("Adding person: %s", person.name)
        self._book.add_person(person)
        self.update_filtered_person_list(show_all)

    def set_person(self, target: Person, edited: Person) -> None:
        self._log.info("Editing person: %s -> %s", target.name, edited.name)
        self._book.set_person(target, edited)

    def delete_person(self, target: Person) -> None:
        self._log.info("Deleting person: %s", target.name)
        self._book.remove_person(target)

    def has_event(self, event: Event) -> bool:
        return self._book.has_event(event)

    def add_event(self, event: Event) -> None:
        self._book.add_event(event)
        self.update_filtered_event_list(show_all)

    def set_event(self, target: Event, edited: Event) -> None:
        self._book.set_event(target, edited)

    def delete_event(self, target: Event) -> None:
        self._book.remove_event(target)

    def get_event_by_event_id(self, event_id: EventId) -> Optional[Event]:
        return self._book.get_event_by_event_id(event_id)

    def has_task(self, task: Task) -> bool:
        return self._book.has_task(task)

    def add_task(self, task: Task) -> None:
        self._book.add_task(task)
        self.update_filtered_task_list(show_all)

    def set_task(self, target: Task, edited: Task) -> None:
        self._book.set_task(target, edited)

    def delete_task(self, target: Task) -> None:
        self._book.remove_task(target)

    # =========== Attendance ===========

    def has_attendance(self, attendance: Attendance) -> bool:
        return self._book.has_attendance(attendance)

    def add_attendance_record(self, attendance: Attendance) -> None:
        self._book.add_attendance(attendance)

    def set_attendance(self, target: Attendance, edited: Attendance) -> None:
        self._book.set_attendance(target, edited)

    def delete_attendance(self, target: Attendance) -> None:
        self._book.remove_attendance(target)

    def get_attendance_list(self) -> list[Attendance]:
        return self._book.get_attendance_list()

    def add_attendance(self, event_id: EventId, member_names: Sequence[Name]) -> AddAttendanceResult:
        return self._attendance.add_attendance(event_id, member_names)

    def mark_attendance(self, event_id: EventId, member_names: Sequence[Name]) -> MarkAttendanceResult:
        return self._attendance.mark_attendance(event_id, member_names)

    def show_attendance(self, event_id: EventId) -> AttendanceSummary:
        return self._attendance.show_attendance(event_id)

    # =========== Filtered views ===========

    def filtered_persons(self) -> list[Person]:
        return [p for p in self._book.get_person_list() if self._person_filter(p)]

    def update_filtered_person_list(self, predicate: Callable[[Person], bool]) -> None:
        self._person_filter = predicate

    def filtered_events(self) -> list[Event]:
        return [e for e in self._book.get_event_list() if self._event_filter(e)]

    def update_filtered_event_list(self, predicate: Callable[[Event], bool]) -> None:
        self._event_filter = predicate

    def filtered_tasks(self) -> list[Task]:
        return [t for t in self._book.get_task_list() if self._task_filter(t)]

    def update_filtered_task_list(self, predicate: Callable[[Task], bool]) -> None:
        self._task_filter = predicate

    def _show_everything(self) -> None:
        self.update_filtered_person_list(show_all)
        self.update_filtered_event_list(show_all)
        self.update_filtered_task_list(show_all)

    # =========== Undo/Redo ===========

    def commit(self) -> None:
        self._book.commit()
        self._log.debug("State committed. Undo history size: %d", self._book.undo_count)

    def undo(self) -> bool:
        if not self._book.undo():
            self._log.warning("Undo failed - no operations to undo")
            return False
        self._show_everything()
        self._log.info("Undo successful. Remaining undo operations: %d", self._book.undo_count)
        return True

    def redo(self) -> bool:
        if not self._book.redo():
            self._log.warning("Redo failed - no operations to redo")
            return False
        self._show_everything()
        self._log.info("Redo successful. Remaining redo operations: %d", self._book.redo_count)
        return True

    def can_undo(self) -> bool:
        return self._book.can_undo()

    def can_redo(self) -> bool:
        return self._book.can_redo()

    def rollback_last_commit(self) -> None:
        self._book.rollback_last_commit()
        self._log.debug("Dropped last commit. Undo history size: %d", self._book.undo_count)

    def revert_to_last_commit(self) -> None:
        self._book.revert_to_last_commit()
        self._show_everything()
        self._log.info("Reverted to last commit. Undo history size: %d", self._book.undo_count)

    def has_uncommitted_changes(self) -> bool:
        return self._book.has_uncommitted_changes()

    # =========== Budget ===========

    @property
    def budget(self) -> Optional[Budget]:
        return self._book.budget

    def set_budget(self, budget: Budget) -> None:
        self._book.set_budget(budget)

    def clear_budget(self) -> None:
        self._book.clear_budget()

    def get_events_within(self, start: date, end: date) -> list[Event]:
        return [e for e in self._book.get_event_list() if e.falls_within(start, end)]

    def compute_total_expenses_within(self, start: date, end: date) -> Money:
        total = Money.zero()
        for event in self.get_events_within(start, end):
            total = total.plus(event.expense)
        return total

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModelManager):
            return NotImplemented
        return (
            self._book == other._book
            and self.filtered_persons() == other.filtered_persons()
            and self.filtered_events() == other.filtered_events()
        )
