"""
Core Data Models for Finance Tracker

These models define the schemas for every value flowing through the ledger.
They are designed to:
1. Be immutable once created (a recorded transaction never changes)
2. Coerce numeric input into Decimal so totals stay exact
3. Stay permissive about business rules (sign, calendar, category)

DESIGN DECISION: The models do NOT validate amounts, dates or categories.
Category policy lives in the validation package and is applied by the caller
before a transaction is built. Negative amounts and impossible dates are
accepted here and propagate into the totals unchanged.
"""

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class TransactionKind(str, Enum):
    """Which side of the ledger a transaction folds into."""
    INCOME = "income"
    EXPENSE = "expense"

    @property
    def label(self) -> str:
        """Display prefix, e.g. ``[INCOME]``."""
        return f"[{self.name}]"


class ExpenseCategory(str, Enum):
    """
    Supported expense categories.

    The values are the exact, case-sensitive strings a user must type.
    Anything else falls back to OTHER.
    """
    FOOD = "Food"
    TRANSPORT = "Transport"
    BILLS = "Bills"
    SHOPPING = "Shopping"
    OTHER = "Other"


# =============================================================================
# FORMATTING
# =============================================================================

def format_amount(amount: Decimal) -> str:
    """
    Render an amount in plain notation without trailing zeros.

    50000 -> "50000", 1234.50 -> "1234.5", -300 -> "-300"
    """
    # No context arithmetic here: amounts of any size render exactly.
    text = format(Decimal(amount), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


# =============================================================================
# CORE LEDGER MODELS
# =============================================================================

class EntryDate(BaseModel):
    """
    Calendar date as entered by the user.

    No range checks: 31/2/2024 or 0/13/2024 are stored as given.
    """
    model_config = ConfigDict(frozen=True)

    day: int
    month: int
    year: int

    def __str__(self) -> str:
        return f"{self.day}/{self.month}/{self.year}"


class Transaction(BaseModel):
    """
    One recorded monetary movement.

    Income and expense share this single shape; ``kind`` decides the display
    prefix and which ledger bucket the amount folds into.
    """
    model_config = ConfigDict(frozen=True)

    kind: TransactionKind = Field(
        ...,
        description="Income or expense"
    )
    amount: Decimal = Field(
        ...,
        description="Amount in the configured currency (sign not checked)"
    )
    description: str = Field(
        default="",
        description="Free-text description"
    )
    date: EntryDate = Field(
        ...,
        description="Date the transaction happened"
    )
    category: str = Field(
        ...,
        description="Category label, pre-validated by the caller"
    )

    @classmethod
    def income(
        cls,
        amount: Decimal,
        description: str,
        date: EntryDate,
        category: str,
    ) -> "Transaction":
        return cls(
            kind=TransactionKind.INCOME,
            amount=amount,
            description=description,
            date=date,
            category=category,
        )

    @classmethod
    def expense(
        cls,
        amount: Decimal,
        description: str,
        date: EntryDate,
        category: str,
    ) -> "Transaction":
        return cls(
            kind=TransactionKind.EXPENSE,
            amount=amount,
            description=description,
            date=date,
            category=category,
        )

    @property
    def is_income(self) -> bool:
        return self.kind == TransactionKind.INCOME

    def describe(self, currency_label: str = "PKR") -> str:
        """
        Human-readable line for this transaction.

        Example: ``[EXPENSE] PKR 3000 - Lunch [Food] (5/1/2024)``
        """
        return (
            f"{self.kind.label} {currency_label} {format_amount(self.amount)}"
            f" - {self.description} [{self.category}] ({self.date})"
        )


class LedgerSnapshot(BaseModel):
    """
    Read-only view of the ledger totals at one point in time.

    Any caller may ask the aggregator for one of these.
    """
    model_config = ConfigDict(frozen=True)

    income_total: Decimal = Field(default=Decimal("0"))
    expenses_total: Decimal = Field(default=Decimal("0"))

    @property
    def balance(self) -> Decimal:
        return self.income_total - self.expenses_total


# =============================================================================
# VALIDATION MODELS
# =============================================================================

class ValidationIssue(BaseModel):
    """A single validation issue found."""

    field: str = Field(
        ...,
        description="Field with the issue"
    )
    issue_type: str = Field(
        ...,
        description="Type of issue (e.g., 'invalid_category')"
    )
    message: str = Field(
        ...,
        description="Human-readable description of the issue"
    )
    severity: str = Field(
        ...,
        pattern="^(error|warning|info)$",
        description="Issue severity"
    )
    suggested_fix: Optional[str] = Field(
        default=None,
        description="Suggested fix if available"
    )


class CategoryResolution(BaseModel):
    """
    Outcome of checking a user-supplied category.

    ``category`` is always usable: either the candidate itself or the default.
    """
    model_config = ConfigDict(frozen=True)

    candidate: str
    category: str
    issue: Optional[ValidationIssue] = None

    @property
    def was_defaulted(self) -> bool:
        return self.issue is not None
