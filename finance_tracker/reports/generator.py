"""
Report Generation

Turns ledger totals into the text shown at the end of a session.

Every method here is a pure formatting function: nothing is mutated and
nothing is printed. The caller decides where the text goes.
"""

from decimal import Decimal
from typing import Optional

from finance_tracker.config import get_settings
from finance_tracker.ledger.budget import BudgetPolicy
from finance_tracker.models.transaction import LedgerSnapshot, format_amount


REPORT_HEADER = "======= Monthly Financial Report ======="
REPORT_FOOTER = "======================================="

OVER_BUDGET_MESSAGE = "You exceeded your budget!"
WITHIN_BUDGET_MESSAGE = "You are within your budget."


class ReportGenerator:
    """Formats totals, balance summaries and the monthly report."""

    def __init__(self, currency_label: Optional[str] = None):
        self.currency_label = currency_label or get_settings().ledger.currency_label

    def _money(self, amount: Decimal) -> str:
        return f"{self.currency_label} {format_amount(amount)}"

    def _total_lines(
        self,
        income_total: Decimal,
        expenses_total: Decimal,
    ) -> list[str]:
        return [
            f"Total Income: {self._money(income_total)}",
            f"Total Expenses: {self._money(expenses_total)}",
            f"Remaining Balance: {self._money(income_total - expenses_total)}",
        ]

    def generate(
        self,
        income_total: Decimal,
        expenses_total: Decimal,
        budget: BudgetPolicy,
    ) -> str:
        """
        Build the monthly report.

        The budget block is included only when a positive limit is set.
        """
        lines = [REPORT_HEADER]
        lines.extend(self._total_lines(income_total, expenses_total))

        if budget.is_configured:
            lines.append(f"Budget Limit: {self._money(budget.limit)}")
            lines.append(
                OVER_BUDGET_MESSAGE
                if budget.is_over_budget(expenses_total)
                else WITHIN_BUDGET_MESSAGE
            )

        lines.append(REPORT_FOOTER)
        return "\n".join(lines)

    def balance_summary(self, snapshot: LedgerSnapshot) -> str:
        """Income, expenses and remaining balance, one per line."""
        return "\n".join(
            self._total_lines(snapshot.income_total, snapshot.expenses_total)
        )

    def snapshot_line(self, snapshot: LedgerSnapshot) -> str:
        """Single-line view of both totals."""
        return (
            f"[Snapshot] Income: {self._money(snapshot.income_total)}, "
            f"Expenses: {self._money(snapshot.expenses_total)}"
        )
