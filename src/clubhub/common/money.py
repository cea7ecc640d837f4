from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from functools import total_ordering
from typing import Union

from ..core.constants import MONEY_PLACES
from ..core.exceptions import ValidationError

_QUANT = Decimal(1).scaleb(-MONEY_PLACES)


@total_ordering
@dataclass(frozen=True)
class Money:
    """Non-negative amount with two decimal places."""

    amount: Decimal

    def __post_init__(self):
        try:
            value = Decimal(self.amount).quantize(_QUANT, rounding=ROUND_HALF_UP)
        except (InvalidOperation, TypeError, ValueError):
            raise ValidationError(f"Invalid amount: {self.amount!r}")
        if not value.is_finite() or value < 0:
            raise ValidationError("Amount must be a non-negative number")
        object.__setattr__(self, "amount", value)

    @classmethod
    def zero(cls) -> "Money":
        return cls(Decimal(0))

    @classmethod
    def parse(cls, value: Union[str, int, Decimal, "Money"]) -> "Money":
        if isinstance(value, Money):
            return value
        if isinstance(value, float):
            value = str(value)
        if isinstance(value, str):
            value = value.strip().lstrip("$")
        return cls(value)

    def plus(self, other: "Money") -> "Money":
        return Money(self.amount + other.amount)

    def minus(self, other: "Money") -> "Money":
        if other.amount > self.amount:
            raise ValidationError("Resulting amount would be negative")
        return Money(self.amount - other.amount)

    def is_zero(self) -> bool:
        return self.amount == 0

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return self.plus(other)

    def __lt__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.amount < other.amount

    def __str__(self) -> str:
        return f"{self.amount:.{MONEY_PLACES}f}"
