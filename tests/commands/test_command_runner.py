from __future__ import annotations

from datetime import date

import pytest

from clubhub.attendance.model import Attendance
from clubhub.budget.model import Budget
from clubhub.commands.attendance import AddAttendanceCommand, MarkAttendanceCommand, ShowAttendanceCommand
from clubhub.commands.base import Command
from clubhub.commands.entities import (
    AddPersonCommand,
    AddTaskCommand,
    BudgetCommand,
    ClearBudgetCommand,
    SetBudgetCommand,
)
from clubhub.commands.history import RedoCommand, UndoCommand
from clubhub.common.money import Money
from clubhub.core.exceptions import CommandError
from clubhub.persons.model import Name, Person
from clubhub.tasks.model import Task


def test_failed_add_restores_pre_call_state(runner, model, event_id, alice):
    before = model.address_book

    with pytest.raises(CommandError, match="Ghost"):
        runner.run(AddAttendanceCommand(event_id, [alice, Name("Ghost")]))

    assert model.address_book == before
    assert not model.can_undo()


def test_failed_mark_restores_pre_call_state(runner, model, event_id, alice, bob):
    runner.run(AddAttendanceCommand(event_id, [alice]))
    before = model.address_book

    with pytest.raises(CommandError):
        runner.run(MarkAttendanceCommand(event_id, [alice, bob]))

    assert model.address_book == before


def test_successful_command_is_one_undo_step(runner, model, event_id, alice, bob):
    before = model.address_book
    runner.run(AddAttendanceCommand(event_id, [alice, bob]))
    after = model.address_book

    runner.run(UndoCommand())
    assert model.address_book == before

    runner.run(RedoCommand())
    assert model.address_book == after


def test_command_without_changes_leaves_no_history(runner, model, event_id, alice):
    runner.run(AddAttendanceCommand(event_id, [alice]))
    runner.run(UndoCommand())
    runner.run(RedoCommand())
    could_undo = model.can_undo()

    runner.run(AddAttendanceCommand(event_id, [alice]))

    assert model.can_undo() == could_undo
    assert model.can_redo() is False
    runner.run(UndoCommand())
    assert model.get_attendance_list() == []


def test_read_only_commands_do_not_touch_history(runner, model, event_id):
    runner.run(ShowAttendanceCommand(event_id))
    assert not model.can_undo()


def test_undo_with_empty_history_fails(runner):
    with pytest.raises(CommandError, match="No more commands to undo"):
        runner.run(UndoCommand())
    with pytest.raises(CommandError, match="No more commands to redo"):
        runner.run(RedoCommand())


def test_duplicate_person_and_task_are_rejected(runner, alice):
    with pytest.raises(CommandError):
        runner.run(AddPersonCommand(Person(alice)))

    runner.run(AddTaskCommand(Task("Book venue")))
    with pytest.raises(CommandError):
        runner.run(AddTaskCommand(Task("Book venue", done=True)))


def test_budget_commands_are_undoable(runner, model):
    budget = Budget(Money.parse("500"), date(2024, 8, 1), date(2024, 8, 31))
    runner.run(SetBudgetCommand(budget))
    assert "Remaining: 379.50" in runner.run(BudgetCommand()).feedback

    runner.run(ClearBudgetCommand())
    assert model.budget is None

    runner.run(UndoCommand())
    assert model.budget == budget

    runner.run(RedoCommand())
    with pytest.raises(CommandError, match="No budget to clear"):
        runner.run(ClearBudgetCommand())


def test_failed_command_keeps_redo_history(runner, model, event_id, alice):
    runner.run(AddAttendanceCommand(event_id, [alice]))
    runner.run(UndoCommand())

    with pytest.raises(CommandError):
        runner.run(MarkAttendanceCommand(event_id, [Name("Ghost")]))

    assert model.can_redo()
    runner.run(RedoCommand())
    assert model.get_attendance_list() == [Attendance(event_id, alice)]


def test_no_op_command_keeps_redo_history(runner, model, event_id, alice, bob):
    runner.run(AddAttendanceCommand(event_id, [alice]))
    runner.run(AddAttendanceCommand(event_id, [bob]))
    runner.run(UndoCommand())

    runner.run(AddAttendanceCommand(event_id, [alice]))

    assert model.can_redo()
    runner.run(RedoCommand())
    assert [a.member_name for a in model.get_attendance_list()] == [alice, bob]


class ExplodingCommand(Command):
    def __init__(self, task: Task):
        self.task = task

    def execute(self, model):
        model.add_task(self.task)
        raise RuntimeError("boom")


def test_unexpected_error_restores_state_and_history(runner, model):
    before = model.address_book

    with pytest.raises(RuntimeError):
        runner.run(ExplodingCommand(Task("Half done")))

    assert model.address_book == before
    assert not model.can_undo()
