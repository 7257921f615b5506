"""
Budget Policy

A single monthly spending limit. A limit of 0 (the default) means no budget
has been configured; the report hides the budget section in that case.
"""

from decimal import Decimal
from typing import Union

Number = Union[Decimal, int, float, str]


def to_decimal(value: Number) -> Decimal:
    """Coerce a numeric value to Decimal without float artefacts."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class BudgetPolicy:
    """Holds the budget limit and compares expense totals against it."""

    def __init__(self, limit: Number = 0):
        self._limit = to_decimal(limit)

    @property
    def limit(self) -> Decimal:
        return self._limit

    @property
    def is_configured(self) -> bool:
        """False for the 0 sentinel (and for negative limits)."""
        return self._limit > 0

    def set_limit(self, value: Number) -> None:
        """Replace the limit. No sign check: 0 or negative disables the report section."""
        self._limit = to_decimal(value)

    def is_over_budget(self, total_expenses: Number) -> bool:
        return to_decimal(total_expenses) > self._limit

    def __repr__(self) -> str:
        return f"BudgetPolicy(limit={self._limit!r})"
