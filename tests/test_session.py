"""End-to-end tests for the console session (scripted input)."""

from decimal import Decimal

import pytest

from finance_tracker import session as session_module
from finance_tracker.models import AuditEventType
from finance_tracker.session import ConsoleSession, SessionInputError, main
from finance_tracker.tracker import FinanceTracker


class ScriptedConsole:
    """Feeds canned answers to prompts and records everything written."""

    def __init__(self, answers):
        self._answers = list(answers)
        self.prompts = []
        self.output = []

    def read(self, prompt):
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)

    def write(self, text):
        self.output.append(text)

    @property
    def text(self):
        return "\n".join(self.output)


def run_session(answers):
    console = ScriptedConsole(answers)
    tracker = FinanceTracker()
    report = ConsoleSession(tracker, read=console.read, write=console.write).run()
    return tracker, console, report


class TestConsoleScenarios:
    """The three reference scenarios."""

    def test_no_budget_no_expenses(self):
        """Scenario 1: budget 0, income 50000, no expenses."""
        tracker, console, report = run_session(["0", "50000", "1 1 2024", "0"])

        assert tracker.ledger.income_total == Decimal("50000")
        assert tracker.ledger.expenses_total == Decimal("0")
        assert report.splitlines() == [
            "======= Monthly Financial Report =======",
            "Total Income: PKR 50000",
            "Total Expenses: PKR 0",
            "Remaining Balance: PKR 50000",
            "=======================================",
        ]
        assert "[INCOME] PKR 50000 - Salary [Salary] (1/1/2024)" in console.output

    def test_within_budget_with_category_fallback(self):
        """Scenario 2: invalid category falls back to Other; within budget."""
        tracker, console, report = run_session([
            "10000", "20000", "1 1 2024", "2",
            "Groceries", "3000", "5 1 2024", "Food",
            "Taxi", "4000", "6 1 2024", "Xyz",
        ])

        assert tracker.ledger.expenses_total == Decimal("7000")
        assert tracker.ledger.balance == Decimal("13000")
        assert "Budget Limit: PKR 10000" in report
        assert "You are within your budget." in report

        assert "Invalid category! Setting to 'Other'." in console.output
        assert "[EXPENSE] PKR 3000 - Groceries [Food] (5/1/2024)" in console.output
        assert "[EXPENSE] PKR 4000 - Taxi [Other] (6/1/2024)" in console.output
        assert [t.category for t in tracker.ledger.history] == ["Salary", "Food", "Other"]

    def test_over_budget(self):
        """Scenario 3: a single Bills expense above the limit."""
        tracker, console, report = run_session([
            "5000", "20000", "1 1 2024", "1",
            "Electricity", "6000", "2 1 2024", "Bills",
        ])

        assert tracker.ledger.expenses_total == Decimal("6000")
        assert "You exceeded your budget!" in report


class TestConsoleFlow:
    """Prompt wording and output order."""

    def test_prompts_in_order(self):
        _, console, _ = run_session([
            "0", "100", "1 2 2024", "1",
            "Bus", "50", "3 2 2024", "Transport",
        ])
        assert console.prompts == [
            "Enter your budget limit for the month: ",
            "Enter your monthly salary (in PKR): ",
            "Enter income date (day month year): ",
            "\nHow many expenses do you want to enter? ",
            "\nEnter expense description: ",
            "Enter amount for Bus (in PKR): ",
            "Enter date for Bus (day month year): ",
            "Enter category: ",
        ]

    def test_output_sections(self):
        _, console, report = run_session(["0", "100", "1 2 2024", "0"])
        assert console.output[0] == "******* FINANCE TRACKING SYSTEM *******\n"
        assert console.output[-3] == (
            "\nTotal Income: PKR 100\n"
            "Total Expenses: PKR 0\n"
            "Remaining Balance: PKR 100"
        )
        assert console.output[-2] == "\n[Snapshot] Income: PKR 100, Expenses: PKR 0"
        assert console.output[-1] == "\n" + report

    def test_category_list_shown_before_category_prompt(self):
        _, console, _ = run_session([
            "0", "100", "1 2 2024", "1",
            "Bus", "50", "3 2 2024", "Transport",
        ])
        assert "\nAvailable Categories: Food, Transport, Bills, Shopping, Other" in console.output

    def test_lowercase_category_is_defaulted(self):
        tracker, _, _ = run_session([
            "0", "100", "1 2 2024", "1",
            "Lunch", "20", "3 2 2024", "food",
        ])
        assert tracker.ledger.history[-1].category == "Other"

    def test_negative_count_records_no_expenses(self):
        tracker, _, _ = run_session(["0", "100", "1 2 2024", "-3"])
        assert tracker.ledger.history[-1].description == "Salary"
        assert len(tracker.ledger.history) == 1

    def test_very_large_salary_completes(self):
        """Test a finite amount past 28 digits still produces a report."""
        tracker, console, report = run_session(["0", "1e28", "1 1 2024", "0"])
        assert tracker.ledger.income_total == Decimal("1e28")
        assert "Total Income: PKR 1" + "0" * 28 in report
        assert "[INCOME] PKR 1" + "0" * 28 + " - Salary [Salary] (1/1/2024)" in console.output

    def test_amounts_tolerate_surrounding_whitespace(self):
        tracker, _, _ = run_session([" 0 ", " 1234.50 ", "1 2 2024", " 0 "])
        assert tracker.ledger.income_total == Decimal("1234.50")


class TestConsoleInputErrors:
    """Malformed input stops the session."""

    @pytest.mark.parametrize(
        "answers",
        [
            ["lots"],
            ["0", "NaN"],
            ["0", "100", "1 2"],
            ["0", "100", "a b c"],
            ["0", "100", "1 2 2024", "two"],
            ["0", "100", "1 2 2024", "1", "Bus", "fifty"],
        ],
    )
    def test_malformed_input_raises(self, answers):
        console = ScriptedConsole(answers)
        session = ConsoleSession(FinanceTracker(), read=console.read, write=console.write)
        with pytest.raises(SessionInputError):
            session.run()

    def test_rejection_is_audited(self):
        console = ScriptedConsole(["0", "abc"])
        tracker = FinanceTracker()
        with pytest.raises(SessionInputError) as excinfo:
            ConsoleSession(tracker, read=console.read, write=console.write).run()

        assert excinfo.value.raw_value == "abc"
        assert excinfo.value.prompt == "Enter your monthly salary (in PKR):"
        event = tracker.audit_logger.events[-1]
        assert event.event_type == AuditEventType.INPUT_REJECTED
        assert event.details == {"raw_value": "abc"}

    def test_end_of_input_raises(self):
        console = ScriptedConsole(["0", "100"])
        session = ConsoleSession(FinanceTracker(), read=console.read, write=console.write)
        with pytest.raises(SessionInputError, match="Input ended unexpectedly"):
            session.run()

    def test_session_input_error_is_value_error(self):
        assert issubclass(SessionInputError, ValueError)


class TestMain:
    """Tests for the console entry point."""

    @pytest.fixture(autouse=True)
    def no_logging_reconfiguration(self, monkeypatch):
        monkeypatch.setattr(session_module, "configure_logging", lambda level: None)

    def test_main_returns_zero(self):
        console = ScriptedConsole(["0", "50000", "1 1 2024", "0"])
        assert main(read=console.read, write=console.write) == 0
        assert "Remaining Balance: PKR 50000" in console.text

    def test_main_returns_one_on_bad_input(self, capsys):
        console = ScriptedConsole(["not a number"])
        assert main(read=console.read, write=console.write) == 1
        assert "Expected a number" in capsys.readouterr().err
