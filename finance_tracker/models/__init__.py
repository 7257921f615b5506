"""
Data Models Package

This package contains all Pydantic models used in the Finance Tracker.
All data flowing through the ledger must conform to these schemas.
"""

from finance_tracker.models.transaction import (
    CategoryResolution,
    EntryDate,
    ExpenseCategory,
    LedgerSnapshot,
    Transaction,
    TransactionKind,
    ValidationIssue,
    format_amount,
)
from finance_tracker.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Ledger models
    "CategoryResolution",
    "EntryDate",
    "ExpenseCategory",
    "LedgerSnapshot",
    "Transaction",
    "TransactionKind",
    "ValidationIssue",
    "format_amount",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
