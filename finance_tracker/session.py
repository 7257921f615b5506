"""
Console Session

The interactive front end for the tracker. It reads raw values, turns them
into typed arguments and hands them to FinanceTracker; the tracker hands
back text which the session writes out.

DESIGN DECISION: Input and output functions are injected. The default is
the real console (``input`` / ``print``); tests pass scripted readers and
capture the writes.

Malformed numbers or dates stop the session with SessionInputError.
The ledger itself never sees unparsed text.
"""

import sys
from decimal import Decimal, InvalidOperation
from typing import Callable, Optional

from finance_tracker.audit import configure_logging
from finance_tracker.config import get_settings
from finance_tracker.models.transaction import EntryDate
from finance_tracker.tracker import FinanceTracker, create_tracker


BANNER = "******* FINANCE TRACKING SYSTEM *******"


class SessionInputError(ValueError):
    """Raised when console input cannot be parsed."""

    def __init__(self, prompt: str, raw_value: str, reason: str):
        self.prompt = prompt.strip()
        self.raw_value = raw_value
        self.reason = reason
        super().__init__(f"{reason} (got {raw_value!r} for '{self.prompt}')")


class ConsoleSession:
    """
    One run of the tracker: budget, income, N expenses, report.

    Usage:
        session = ConsoleSession(create_tracker())
        report = session.run()
    """

    def __init__(
        self,
        tracker: FinanceTracker,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ):
        self._tracker = tracker
        self._read = read
        self._write = write

    @property
    def tracker(self) -> FinanceTracker:
        return self._tracker

    # -------------------------------------------------------------------------
    # Input parsing
    # -------------------------------------------------------------------------

    def _ask(self, prompt: str) -> str:
        try:
            return self._read(prompt)
        except EOFError:
            raise self._reject(prompt, "", "Input ended unexpectedly") from None

    def _reject(self, prompt: str, raw: str, reason: str) -> SessionInputError:
        self._tracker.audit_logger.log_input_rejected(
            prompt=prompt.strip(),
            raw_value=raw,
            error_message=reason,
        )
        return SessionInputError(prompt, raw, reason)

    def read_decimal(self, prompt: str) -> Decimal:
        raw = self._ask(prompt)
        try:
            value = Decimal(raw.strip())
        except InvalidOperation:
            raise self._reject(prompt, raw, "Expected a number") from None
        if not value.is_finite():
            raise self._reject(prompt, raw, "Expected a finite number")
        return value

    def read_int(self, prompt: str) -> int:
        raw = self._ask(prompt)
        try:
            return int(raw.strip())
        except ValueError:
            raise self._reject(prompt, raw, "Expected a whole number") from None

    def read_date(self, prompt: str) -> EntryDate:
        """Read ``day month year`` as three whole numbers on one line."""
        raw = self._ask(prompt)
        parts = raw.split()
        if len(parts) != 3:
            raise self._reject(prompt, raw, "Expected day, month and year")
        try:
            day, month, year = (int(part) for part in parts)
        except ValueError:
            raise self._reject(prompt, raw, "Date parts must be whole numbers") from None
        return EntryDate(day=day, month=month, year=year)

    # -------------------------------------------------------------------------
    # Flow
    # -------------------------------------------------------------------------

    def _enter_expense(self) -> None:
        tracker = self._tracker
        label = tracker.currency_label

        description = self._ask("\nEnter expense description: ")
        amount = self.read_decimal(f"Enter amount for {description} (in {label}): ")
        date = self.read_date(f"Enter date for {description} (day month year): ")

        self._write("\n" + tracker.validator.get_user_friendly_summary())
        resolution = tracker.resolve_category(self._ask("Enter category: "))
        if resolution.was_defaulted:
            self._write(resolution.issue.message)

        expense = tracker.add_expense(
            amount=amount,
            description=description,
            date=date,
            category=resolution.category,
        )
        self._write(tracker.describe(expense))

    def run(self) -> str:
        """Drive a full session and return the final report text."""
        tracker = self._tracker
        label = tracker.currency_label

        self._write(BANNER + "\n")

        tracker.set_budget_limit(
            self.read_decimal("Enter your budget limit for the month: ")
        )

        salary = self.read_decimal(f"Enter your monthly salary (in {label}): ")
        income_date = self.read_date("Enter income date (day month year): ")
        income = tracker.add_income(amount=salary, date=income_date)
        self._write(tracker.describe(income))

        count = self.read_int("\nHow many expenses do you want to enter? ")
        for _ in range(count):
            self._enter_expense()

        self._write("\n" + tracker.balance_summary())
        self._write("\n" + tracker.snapshot_line())

        report = tracker.generate_report()
        self._write("\n" + report)
        return report


def main(
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
    tracker: Optional[FinanceTracker] = None,
) -> int:
    """
    Console entry point.

    Returns 0 after a completed report, 1 on malformed input.
    """
    configure_logging(get_settings().app.effective_log_level)

    session = ConsoleSession(tracker or create_tracker(), read=read, write=write)
    try:
        session.run()
    except SessionInputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
