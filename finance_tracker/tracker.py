"""
Finance Tracker Orchestrator

Ties the ledger components together for one session:
1. Budget → set the monthly limit
2. Income → record the salary entry
3. Expenses → resolve category, record, echo
4. Report → totals, balance and budget verdict

DESIGN DECISION: The tracker holds no reference to any input or output
channel. Callers pass values in and get text back; printing is their job.
Every ledger change goes through the audit logger.
"""

from typing import Optional

from finance_tracker.audit import AuditLogger
from finance_tracker.config import get_settings
from finance_tracker.ledger import BudgetPolicy, LedgerAggregator
from finance_tracker.ledger.budget import Number
from finance_tracker.models.transaction import (
    CategoryResolution,
    EntryDate,
    LedgerSnapshot,
    Transaction,
)
from finance_tracker.reports import ReportGenerator
from finance_tracker.validation import CategoryValidator


class FinanceTracker:
    """
    Owns the single ledger and budget of a session.

    Flow:
    1. set_budget_limit (optional, 0 means no budget)
    2. add_income
    3. resolve_category + add_expense, once per expense
    4. balance_summary / snapshot_line / generate_report
    """

    def __init__(
        self,
        ledger: Optional[LedgerAggregator] = None,
        budget: Optional[BudgetPolicy] = None,
        validator: Optional[CategoryValidator] = None,
        reporter: Optional[ReportGenerator] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        settings = get_settings().ledger
        self._ledger = ledger or LedgerAggregator()
        self._budget = budget or BudgetPolicy()
        self._validator = validator or CategoryValidator()
        self._reporter = reporter or ReportGenerator(settings.currency_label)
        self._audit_logger = audit_logger or AuditLogger()
        self._income_description = settings.income_description
        self._income_category = settings.income_category
        self._has_income = False

    @property
    def ledger(self) -> LedgerAggregator:
        return self._ledger

    @property
    def budget(self) -> BudgetPolicy:
        return self._budget

    @property
    def validator(self) -> CategoryValidator:
        return self._validator

    @property
    def audit_logger(self) -> AuditLogger:
        return self._audit_logger

    @property
    def currency_label(self) -> str:
        return self._reporter.currency_label

    @property
    def has_income(self) -> bool:
        """True once an income entry has been recorded, whatever its amount."""
        return self._has_income

    def set_budget_limit(self, limit: Number) -> None:
        self._budget.set_limit(limit)
        self._audit_logger.log_budget_limit_set(self._budget.limit)

    def add_income(
        self,
        amount: Number,
        date: EntryDate,
        description: Optional[str] = None,
        category: Optional[str] = None,
    ) -> Transaction:
        """
        Record the income entry.

        A second call replaces the first amount (only one income is kept);
        the replacement is logged as a warning.
        """
        transaction = Transaction.income(
            amount=amount,
            description=description or self._income_description,
            date=date,
            category=category or self._income_category,
        )

        if self._has_income:
            self._audit_logger.log_income_overwritten(
                previous=self._ledger.income_total,
                amount=transaction.amount,
            )

        self._ledger.record(transaction)
        self._has_income = True
        self._audit_logger.log_income_recorded(
            amount=transaction.amount,
            description=transaction.description,
        )
        return transaction

    def resolve_category(self, candidate: str) -> CategoryResolution:
        """Check a category, logging the fallback when one is applied."""
        resolution = self._validator.resolve(candidate)
        if resolution.was_defaulted:
            self._audit_logger.log_category_defaulted(
                candidate=candidate,
                fallback=resolution.category,
            )
        return resolution

    def add_expense(
        self,
        amount: Number,
        description: str,
        date: EntryDate,
        category: str,
    ) -> Transaction:
        """Record an expense. The category is used as given."""
        transaction = Transaction.expense(
            amount=amount,
            description=description,
            date=date,
            category=category,
        )
        self._ledger.record(transaction)
        self._audit_logger.log_expense_recorded(
            amount=transaction.amount,
            category=transaction.category,
            expenses_total=self._ledger.expenses_total,
        )
        return transaction

    def describe(self, transaction: Transaction) -> str:
        return transaction.describe(self.currency_label)

    def snapshot(self) -> LedgerSnapshot:
        return self._ledger.snapshot()

    def balance_summary(self) -> str:
        return self._reporter.balance_summary(self.snapshot())

    def snapshot_line(self) -> str:
        return self._reporter.snapshot_line(self.snapshot())

    def generate_report(self) -> str:
        income_total = self._ledger.income_total
        expenses_total = self._ledger.expenses_total
        report = self._reporter.generate(income_total, expenses_total, self._budget)

        over_budget: Optional[bool] = None
        if self._budget.is_configured:
            over_budget = self._budget.is_over_budget(expenses_total)
        self._audit_logger.log_report_generated(
            income_total=income_total,
            expenses_total=expenses_total,
            over_budget=over_budget,
        )
        return report


def create_tracker(currency_label: Optional[str] = None) -> FinanceTracker:
    """
    Factory function to create a tracker with fresh components.

    Args:
        currency_label: Overrides the configured currency label.
    """
    reporter = ReportGenerator(currency_label) if currency_label else None
    return FinanceTracker(reporter=reporter)
