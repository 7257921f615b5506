"""
Audit Models for Finance Tracker

Every change to the ledger is logged for audit purposes.
This provides:
1. Traceability of how the final report was reached
2. Debugging information when totals look wrong
3. A visible record of silent policy decisions (category fallback,
   income overwrite)

DESIGN DECISION: Audit events are append-only within a session.
Nothing is persisted once the process exits.
"""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Budget
    BUDGET_LIMIT_SET = "budget_limit_set"

    # Ledger changes
    INCOME_RECORDED = "income_recorded"
    INCOME_OVERWRITTEN = "income_overwritten"
    EXPENSE_RECORDED = "expense_recorded"

    # Validation
    CATEGORY_DEFAULTED = "category_defaulted"
    INPUT_REJECTED = "input_rejected"

    # Reporting
    REPORT_GENERATED = "report_generated"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of our audit trail.
    Every ledger mutation creates one of these.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Context
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'transaction', 'budget', 'report')"
    )

    # Correlation - all events from one session share this
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID to correlate events from one session"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    error_message: Optional[str] = None

    is_user_action: bool = Field(
        default=False,
        description="Was this triggered directly by user input?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
            "is_user_action": self.is_user_action,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.budget_limit_set(limit, correlation_id=correlation_id)
        event = AuditEventBuilder.expense_recorded(
            amount, category, expenses_total, correlation_id=correlation_id
        )
    """

    @staticmethod
    def budget_limit_set(
        limit: Decimal,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.BUDGET_LIMIT_SET,
            entity_type="budget",
            correlation_id=correlation_id,
            description=(
                f"Budget limit set to {limit}"
                if limit > 0
                else "Budget limit cleared (no budget enforced)"
            ),
            details={"limit": str(limit)},
            is_user_action=True,
        )

    @staticmethod
    def income_recorded(
        amount: Decimal,
        description: str,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.INCOME_RECORDED,
            entity_type="transaction",
            correlation_id=correlation_id,
            description=f"Income recorded: {description}",
            details={"amount": str(amount), "description": description},
            is_user_action=True,
        )

    @staticmethod
    def income_overwritten(
        previous: Decimal,
        amount: Decimal,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.INCOME_OVERWRITTEN,
            severity=AuditSeverity.WARNING,
            entity_type="transaction",
            correlation_id=correlation_id,
            description="Income replaced: only one income entry is kept per session",
            details={"previous": str(previous), "amount": str(amount)},
        )

    @staticmethod
    def expense_recorded(
        amount: Decimal,
        category: str,
        expenses_total: Decimal,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPENSE_RECORDED,
            entity_type="transaction",
            correlation_id=correlation_id,
            description=f"Expense recorded in {category}",
            details={
                "amount": str(amount),
                "category": category,
                "expenses_total": str(expenses_total),
            },
            is_user_action=True,
        )

    @staticmethod
    def category_defaulted(
        candidate: str,
        fallback: str,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.CATEGORY_DEFAULTED,
            severity=AuditSeverity.WARNING,
            entity_type="transaction",
            correlation_id=correlation_id,
            description=f"Unknown category replaced with {fallback}",
            details={"candidate": candidate, "fallback": fallback},
        )

    @staticmethod
    def input_rejected(
        prompt: str,
        raw_value: str,
        error_message: str,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.INPUT_REJECTED,
            severity=AuditSeverity.ERROR,
            entity_type="input",
            correlation_id=correlation_id,
            description=f"Malformed input for: {prompt}",
            error_message=error_message,
            details={"raw_value": raw_value},
            is_user_action=True,
        )

    @staticmethod
    def report_generated(
        income_total: Decimal,
        expenses_total: Decimal,
        over_budget: Optional[bool],
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.REPORT_GENERATED,
            entity_type="report",
            correlation_id=correlation_id,
            description="Monthly report generated",
            details={
                "income_total": str(income_total),
                "expenses_total": str(expenses_total),
                "over_budget": over_budget,
            },
        )
