"""
Ledger Aggregator

Running totals for one session:
- income_total holds the most recent income amount. Only one income entry
  is supported; recording another replaces it rather than adding to it.
- expenses_total is the sum of every expense recorded.

Transactions folded in through ``record`` are also kept in ``history``.
"""

from decimal import Decimal

from finance_tracker.ledger.budget import Number, to_decimal
from finance_tracker.models.transaction import (
    LedgerSnapshot,
    Transaction,
    TransactionKind,
)


class LedgerAggregator:
    """
    Accumulates income and expense totals.

    No validation: negative amounts flow straight into the totals.
    """

    def __init__(self):
        self._income_total = Decimal("0")
        self._expenses_total = Decimal("0")
        self._history: list[Transaction] = []

    @property
    def income_total(self) -> Decimal:
        return self._income_total

    @property
    def expenses_total(self) -> Decimal:
        return self._expenses_total

    @property
    def balance(self) -> Decimal:
        return self._income_total - self._expenses_total

    @property
    def history(self) -> tuple[Transaction, ...]:
        """Transactions recorded via ``record``, oldest first."""
        return tuple(self._history)

    def record_income(self, amount: Number) -> None:
        """Set (overwrite) the income total."""
        self._income_total = to_decimal(amount)

    def record_expense(self, amount: Number) -> None:
        """Add an amount to the running expense total."""
        self._expenses_total += to_decimal(amount)

    def record(self, transaction: Transaction) -> None:
        """Fold a transaction into the bucket matching its kind and keep it."""
        if transaction.kind == TransactionKind.INCOME:
            self.record_income(transaction.amount)
        else:
            self.record_expense(transaction.amount)
        self._history.append(transaction)

    def snapshot(self) -> LedgerSnapshot:
        """Read-only view of the current totals."""
        return LedgerSnapshot(
            income_total=self._income_total,
            expenses_total=self._expenses_total,
        )
