from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..common.money import Money
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class Budget:
    """Spending limit for a date range (inclusive on both ends)."""

    amount: Money
    start_date: date
    end_date: date

    def __post_init__(self):
        if self.end_date < self.start_date:
            raise ValidationError("Budget end date must be on or after the start date")


@dataclass(frozen=True)
class BudgetSummary:
    """Read-model: how the events in a budget period compare to the budget."""

    budget: Budget
    spent: Money
    remaining: Money
    overspent: Money
    event_count: int

    @property
    def is_over_budget(self) -> bool:
        return not self.overspent.is_zero()
