from __future__ import annotations

from typing import Iterable, Optional

from ..attendance.model import Attendance
from ..budget.model import Budget
from ..common.unique_list import UniqueList
from ..events.model import Event, EventId
from ..persons.model import Name, Person
from ..tasks.model import Task


class AddressBook:
    """The whole dataset: persons, events, tasks, attendance and a budget.

    Each collection keeps insertion order and rejects duplicates by the
    entity's own identity rule. Attendance rows are unique per
    ``(event_id, member_name)``.
    """

    def __init__(
        self,
        *,
        persons: Iterable[Person] = (),
        events: Iterable[Event] = (),
        tasks: Iterable[Task] = (),
        attendance: Iterable[Attendance] = (),
        budget: Optional[Budget] = None,
    ):
        self._persons: UniqueList[Person] = UniqueList(Person.is_same_person, persons, label="person")
        self._events: UniqueList[Event] = UniqueList(Event.is_same_event, events, label="event")
        self._tasks: UniqueList[Task] = UniqueList(Task.is_same_task, tasks, label="task")
        self._attendance: UniqueList[Attendance] = UniqueList(
            Attendance.is_same_attendance, attendance, label="attendance"
        )
        self._budget = budget

    # persons

    def has_person(self, person: Person) -> bool:
        return self._persons.contains(person)

    def has_person_named(self, name: Name) -> bool:
        return self._persons.find(lambda p: p.name == name) is not None

    def add_person(self, person: Person) -> None:
        self._persons.add(person)

    def set_person(self, target: Person, edited: Person) -> None:
        self._persons.set(target, edited)

    def remove_person(self, person: Person) -> None:
        self._persons.remove(person)

    def get_person_list(self) -> list[Person]:
        return self._persons.as_list()

    # events

    def has_event(self, event: Event) -> bool:
        return self._events.contains(event)

    def add_event(self, event: Event) -> None:
        self._events.add(event)

    def set_event(self, target: Event, edited: Event) -> None:
        self._events.set(target, edited)

    def remove_event(self, event: Event) -> None:
        self._events.remove(event)

    def get_event_by_event_id(self, event_id: EventId) -> Optional[Event]:
        return self._events.find(lambda e: e.event_id == event_id)

    def get_event_list(self) -> list[Event]:
        return self._events.as_list()

    # tasks

    def has_task(self, task: Task) -> bool:
        return self._tasks.contains(task)

    def add_task(self, task: Task) -> None:
        self._tasks.add(task)

    def set_task(self, target: Task, edited: Task) -> None:
        self._tasks.set(target, edited)

    def remove_task(self, task: Task) -> None:
        self._tasks.remove(task)

    def get_task_list(self) -> list[Task]:
        return self._tasks.as_list()

    # attendance

    def has_attendance(self, attendance: Attendance) -> bool:
        return self._attendance.contains(attendance)

    def add_attendance(self, attendance: Attendance) -> None:
        self._attendance.add(attendance)

    def set_attendance(self, target: Attendance, edited: Attendance) -> None:
        self._attendance.set(target, edited)

    def remove_attendance(self, attendance: Attendance) -> None:
        self._attendance.remove(attendance)

    def get_attendance_list(self) -> list[Attendance]:
        return self._attendance.as_list()

    # budget

    @property
    def budget(self) -> Optional[Budget]:
        return self._budget

    def set_budget(self, budget: Budget) -> None:
        self._budget = budget

    def clear_budget(self) -> None:
        self._budget = None

    # whole dataset

    def copy(self) -> "AddressBook":
        clone = AddressBook(budget=self._budget)
        clone._persons = self._persons.copy()
        clone._events = self._events.copy()
        clone._tasks = self._tasks.copy()
        clone._attendance = self._attendance.copy()
        return clone

    def reset_data(self, other: "AddressBook") -> None:
        self._persons = other._persons.copy()
        self._events = other._events.copy()
        self._tasks = other._tasks.copy()
        self._attendance = other._attendance.copy()
        self._budget = other._budget

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddressBook):
            return NotImplemented
        return (
            self._persons == other._persons
            and self._events == other._events
            and self._tasks == other._tasks
            and self._attendance == other._attendance
            and self._budget == other._budget
        )

    def __repr__(self) -> str:
        return (
            f"AddressBook(persons={len(self._persons)}, events={len(self._events)}, "
            f"tasks={len(self._tasks)}, attendance={len(self._attendance)}, budget={self._budget!r})"
        )
