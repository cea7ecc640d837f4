from __future__ import annotations

from datetime import date
from typing import Optional

import pytest

from clubhub.attendance.model import Attendance
from clubhub.attendance.service import AttendanceService, deduplicate_preserving_order
from clubhub.common.money import Money
from clubhub.core.exceptions import (
    AttendanceOperationError,
    EventNotFoundError,
    MemberNotFoundError,
    MemberNotInAttendanceError,
)
from clubhub.events.model import Event, EventId
from clubhub.persons.model import Name


class InMemoryAttendanceRepo:
    """Minimal fake of the attendance repository, keyed by composite key."""

    def __init__(self, events: list[Event], members: list[Name], rows: Optional[list[Attendance]] = None):
        self._events = {e.event_id: e for e in events}
        self._members = set(members)
        self._rows: dict[tuple[EventId, Name], Attendance] = {r.key: r for r in rows or []}
        self.writes = 0

    def get_event_by_event_id(self, event_id: EventId) -> Optional[Event]:
        return self._events.get(event_id)

    def has_person_named(self, name: Name) -> bool:
        return name in self._members

    def has_attendance(self, attendance: Attendance) -> bool:
        return attendance.key in self._rows

    def add_attendance(self, attendance: Attendance) -> None:
        assert attendance.key not in self._rows
        self._rows[attendance.key] = attendance
        self.writes += 1

    def set_attendance(self, target: Attendance, edited: Attendance) -> None:
        self._rows[target.key] = edited
        self.writes += 1

    def get_attendance_list(self):
        return list(self._rows.values())


@pytest.fixture
def repo(event, alice, bob, carol):
    return InMemoryAttendanceRepo([event], [alice, bob, carol])


@pytest.fixture
def svc(repo):
    return AttendanceService(repo)


def test_deduplicate_preserves_first_occurrence(alice, bob):
    assert deduplicate_preserving_order([alice, bob, alice, bob]) == [alice, bob]


def test_add_reports_each_name_once_in_first_occurrence_order(svc, repo, event_id, alice, bob):
    result = svc.add_attendance(event_id, [alice, bob, alice])

    assert result.added_members == (alice, bob)
    assert result.duplicate_members == ()
    assert repo.get_attendance_list() == [Attendance(event_id, alice), Attendance(event_id, bob)]


def test_second_add_reports_duplicate_and_never_stores_twice(svc, repo, event_id, alice, bob):
    svc.add_attendance(event_id, [alice])
    result = svc.add_attendance(event_id, [alice, bob])

    assert result.added_members == (bob,)
    assert result.duplicate_members == (alice,)
    assert [r.member_name for r in repo.get_attendance_list()] == [alice, bob]


def test_add_returns_resolved_event(svc, event, event_id, alice):
    assert svc.add_attendance(event_id, [alice]).event == event


def test_add_unknown_event_fails(svc, alice):
    with pytest.raises(EventNotFoundError) as exc:
        svc.add_attendance(EventId("Nope"), [alice])
    assert str(exc.value) == "Event not found"


def test_add_unknown_member_fails_fast_keeping_earlier_rows(svc, repo, event_id, alice, carol):
    ghost = Name("Ghost")

    with pytest.raises(MemberNotFoundError) as exc:
        svc.add_attendance(event_id, [alice, ghost, carol])

    assert exc.value.name == ghost
    assert str(exc.value) == "Member not found: Ghost"
    # Rows before the failing name stay; nothing after it is touched.
    assert repo.get_attendance_list() == [Attendance(event_id, alice)]


def test_mark_before_add_fails_even_for_known_person(svc, event_id, alice):
    with pytest.raises(MemberNotInAttendanceError) as exc:
        svc.mark_attendance(event_id, [alice])
    assert str(exc.value) == "Member not found in attendance list: Alice Pauline"
    assert isinstance(exc.value, AttendanceOperationError)


def test_mark_sets_attended_and_reports_newly_marked(svc, repo, event_id, alice, bob):
    svc.add_attendance(event_id, [alice, bob])

    result = svc.mark_attendance(event_id, [bob, bob])

    assert result.newly_marked_members == (bob,)
    assert result.already_marked_members == ()
    assert repo.get_attendance_list() == [Attendance(event_id, alice), Attendance(event_id, bob, attended=True)]


def test_mark_twice_reports_already_marked_without_writing(svc, repo, event_id, alice):
    svc.add_attendance(event_id, [alice])
    svc.mark_attendance(event_id, [alice])
    stored = repo.get_attendance_list()[0]
    writes = repo.writes

    result = svc.mark_attendance(event_id, [alice])

    assert result.newly_marked_members == ()
    assert result.already_marked_members == (alice,)
    assert repo.writes == writes
    assert repo.get_attendance_list()[0] is stored


def test_mark_fails_fast_keeping_earlier_marks(svc, repo, event_id, alice, carol):
    svc.add_attendance(event_id, [alice])

    with pytest.raises(MemberNotInAttendanceError):
        svc.mark_attendance(event_id, [alice, carol])

    assert repo.get_attendance_list() == [Attendance(event_id, alice, attended=True)]


def test_mark_ignores_rows_of_other_events(event, alice):
    other = Event(EventId("Other"), "Other event", date(2024, 1, 1), Money.zero())
    repo = InMemoryAttendanceRepo([event, other], [alice], [Attendance(other.event_id, alice)])

    with pytest.raises(MemberNotInAttendanceError):
        AttendanceService(repo).mark_attendance(event.event_id, [alice])


def test_show_partitions_by_attended_flag(event, event_id, alice, bob, carol):
    repo = InMemoryAttendanceRepo(
        [event],
        [alice, bob, carol],
        [Attendance(event_id, alice, attended=True), Attendance(event_id, bob), Attendance(event_id, carol, True)],
    )

    summary = AttendanceService(repo).show_attendance(event_id)

    assert summary.attended == (alice, carol)
    assert summary.absent == (bob,)
    assert (summary.attended_count, summary.absent_count) == (2, 1)


def test_show_unknown_event_fails(svc):
    with pytest.raises(EventNotFoundError):
        svc.show_attendance(EventId("Nope"))


def test_results_are_immutable(svc, event_id, alice):
    result = svc.add_attendance(event_id, [alice])
    with pytest.raises(AttributeError):
        result.added_members = ()


def test_engine_works_on_address_book(book, event_id, alice, bob):
    svc = AttendanceService(book)
    svc.add_attendance(event_id, [alice, bob])
    svc.mark_attendance(event_id, [alice])

    summary = svc.show_attendance(event_id)

    assert summary.attended == (alice,)
    assert summary.absent == (bob,)
    assert len(book.get_attendance_list()) == 2


def test_duplicate_rows_for_one_member_trip_the_invariant(event, event_id, alice):
    repo = InMemoryAttendanceRepo([event], [alice])
    repo.get_attendance_list = lambda: [Attendance(event_id, alice), Attendance(event_id, alice, attended=True)]

    with pytest.raises(AssertionError):
        AttendanceService(repo).mark_attendance(event_id, [alice])
