from __future__ import annotations

from dataclasses import dataclass

from ..addressbook.manager import ModelManager
from ..budget.model import Budget
from ..budget.service import BudgetService
from ..core.exceptions import CommandError
from ..events.model import Event
from ..persons.model import Person
from ..tasks.model import Task
from .base import Command, CommandResult
from .formatting import format_budget_summary

MESSAGE_DUPLICATE_PERSON = "This person already exists in the address book"
MESSAGE_DUPLICATE_EVENT = "An event with this ID already exists"
MESSAGE_DUPLICATE_TASK = "This task already exists in the task list"


@dataclass(frozen=True)
class AddPersonCommand(Command):
    person: Person

    def execute(self, model: ModelManager) -> CommandResult:
        if model.has_person(self.person):
            raise CommandError(MESSAGE_DUPLICATE_PERSON)
        model.add_person(self.person)
        return CommandResult(f"New person added: {self.person.name}", self.person)


@dataclass(frozen=True)
class AddEventCommand(Command):
    event: Event

    def execute(self, model: ModelManager) -> CommandResult:
        if model.has_event(self.event):
            raise CommandError(MESSAGE_DUPLICATE_EVENT)
        model.add_event(self.event)
        return CommandResult(f"New event added: {self.event.event_id} ({self.event.description})", self.event)


@dataclass(frozen=True)
class AddTaskCommand(Command):
    task: Task

    def execute(self, model: ModelManager) -> CommandResult:
        if model.has_task(self.task):
            raise CommandError(MESSAGE_DUPLICATE_TASK)
        model.add_task(self.task)
        return CommandResult(f"New task added: {self.task.title}", self.task)


@dataclass(frozen=True)
class SetBudgetCommand(Command):
    budget: Budget

    def execute(self, model: ModelManager) -> CommandResult:
        model.set_budget(self.budget)
        b = self.budget
        return CommandResult(f"Budget set: {b.amount} from {b.start_date:%Y-%m-%d} to {b.end_date:%Y-%m-%d}", b)


@dataclass(frozen=True)
class ClearBudgetCommand(Command):
    def execute(self, model: ModelManager) -> CommandResult:
        if model.budget is None:
            raise CommandError("No budget to clear")
        model.clear_budget()
        return CommandResult("Budget cleared")


@dataclass(frozen=True)
class BudgetCommand(Command):
    """Shows how spending in the budget period compares to the budget."""

    undoable = False

    def execute(self, model: ModelManager) -> CommandResult:
        summary = BudgetService(model).summarize()
        return CommandResult(format_budget_summary(summary), summary)
