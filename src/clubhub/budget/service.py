from __future__ import annotations

from typing import Protocol

from ..common.money import Money
from ..core.exceptions import ValidationError
from .model import Budget, BudgetSummary


class ExpenseSource(Protocol):
    @property
    def budget(self) -> Budget | None:
        raise NotImplementedError

    def get_events_within(self, start, end) -> list:
        raise NotImplementedError


class BudgetService:
    """Use case: compare event expenses in the budget period to the budget."""

    def __init__(self, source: ExpenseSource):
        self._source = source

    def summarize(self) -> BudgetSummary:
        budget = self._source.budget
        if budget is None:
            raise ValidationError("No budget has been set")

        events = self._source.get_events_within(budget.start_date, budget.end_date)
        spent = Money.zero()
        for event in events:
            spent = spent + event.expense

        if spent > budget.amount:
            remaining, overspent = Money.zero(), spent.minus(budget.amount)
        else:
            remaining, overspent = budget.amount.minus(spent), Money.zero()

        return BudgetSummary(
            budget=budget,
            spent=spent,
            remaining=remaining,
            overspent=overspent,
            event_count=len(events),
        )
