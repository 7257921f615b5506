"""Tests for the FinanceTracker orchestrator."""

from decimal import Decimal

from finance_tracker.models import AuditEventType, TransactionKind
from finance_tracker.tracker import FinanceTracker, create_tracker


class TestFinanceTracker:
    """Tests for FinanceTracker flows."""

    def test_add_income_uses_configured_salary_entry(self, tracker, jan_first):
        income = tracker.add_income(amount=Decimal("50000"), date=jan_first)
        assert income.kind == TransactionKind.INCOME
        assert income.description == "Salary"
        assert income.category == "Salary"
        assert tracker.describe(income) == "[INCOME] PKR 50000 - Salary [Salary] (1/1/2024)"

    def test_second_income_overwrites_and_warns(self, tracker, jan_first):
        """Test the one-income limitation is kept and audited."""
        tracker.add_income(amount=Decimal("20000"), date=jan_first)
        tracker.add_income(amount=Decimal("5000"), date=jan_first)

        assert tracker.ledger.income_total == Decimal("5000")
        overwritten = [
            e for e in tracker.audit_logger.events
            if e.event_type == AuditEventType.INCOME_OVERWRITTEN
        ]
        assert len(overwritten) == 1
        assert overwritten[0].details == {"previous": "20000", "amount": "5000"}

    def test_has_income_after_zero_salary(self, tracker, jan_first):
        """Test a zero salary still counts as recorded, so replacing it warns."""
        assert tracker.has_income is False
        tracker.add_income(amount=Decimal("0"), date=jan_first)
        assert tracker.has_income is True

        tracker.add_income(amount=Decimal("100"), date=jan_first)
        assert AuditEventType.INCOME_OVERWRITTEN in [
            e.event_type for e in tracker.audit_logger.events
        ]

    def test_resolve_category_audits_fallback(self, tracker):
        resolution = tracker.resolve_category("Xyz")
        assert resolution.category == "Other"
        assert tracker.audit_logger.events[-1].event_type == AuditEventType.CATEGORY_DEFAULTED

    def test_resolve_valid_category_is_not_audited(self, tracker):
        tracker.resolve_category("Food")
        assert tracker.audit_logger.events == []

    def test_add_expense_uses_category_as_given(self, tracker, jan_first):
        """Test category policy is the caller's job, not the tracker's."""
        expense = tracker.add_expense(
            amount=Decimal("10"),
            description="Mystery",
            date=jan_first,
            category="Unvalidated",
        )
        assert expense.category == "Unvalidated"
        assert tracker.ledger.expenses_total == Decimal("10")

    def test_summaries(self, tracker, jan_first, ten_thousand):
        tracker.set_budget_limit(ten_thousand)
        tracker.add_income(amount=Decimal("20000"), date=jan_first)
        tracker.add_expense(Decimal("3000"), "Lunch", jan_first, "Food")

        assert tracker.snapshot().balance == Decimal("17000")
        assert tracker.balance_summary().splitlines()[-1] == "Remaining Balance: PKR 17000"
        assert tracker.snapshot_line() == "[Snapshot] Income: PKR 20000, Expenses: PKR 3000"

    def test_generate_report_audits_verdict(self, tracker, jan_first):
        tracker.set_budget_limit(Decimal("5000"))
        tracker.add_income(amount=Decimal("20000"), date=jan_first)
        tracker.add_expense(Decimal("6000"), "Electricity", jan_first, "Bills")

        report = tracker.generate_report()

        assert "You exceeded your budget!" in report
        event = tracker.audit_logger.events[-1]
        assert event.event_type == AuditEventType.REPORT_GENERATED
        assert event.details["over_budget"] is True

    def test_report_verdict_is_none_without_budget(self, tracker):
        tracker.generate_report()
        assert tracker.audit_logger.events[-1].details["over_budget"] is None

    def test_create_tracker_with_currency(self, jan_first):
        tracker = create_tracker("USD")
        income = tracker.add_income(amount=Decimal("1"), date=jan_first)
        assert isinstance(tracker, FinanceTracker)
        assert tracker.describe(income).startswith("[INCOME] USD 1")
