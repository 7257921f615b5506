"""
Audit Logger

DESIGN DECISION: Every change to the ledger is logged.
This provides:
1. Traceability from the final report back to each entry
2. Debugging capability
3. A visible warning whenever a policy silently changes user input

The audit logger:
- Is synchronous (the ledger runs one step at a time)
- Keeps the session's events in memory, nothing is persisted
- Supports correlation IDs to tie a session's events together
"""

import logging
import sys
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

import structlog

from finance_tracker.models.audit import AuditEvent, AuditEventBuilder


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


def configure_logging(level: str = "WARNING") -> None:
    """
    Route structured logs to stderr at the given level.

    stdout is reserved for the console session's prompts and report.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.WARNING),
        force=True,
    )


class AuditLogger:
    """
    Central audit logging service.

    Logs events both to:
    1. Structured local log (for debugging)
    2. An in-memory trail for the current session
    """

    def __init__(self, correlation_id: Optional[UUID] = None):
        """
        Initialize audit logger.

        Args:
            correlation_id: Shared ID for every event this logger records.
                            A new one is created if omitted.
        """
        self.correlation_id = correlation_id or create_correlation_id()
        self._events: list[AuditEvent] = []
        self._logger = structlog.get_logger("finance_tracker.audit")

    @property
    def events(self) -> list[AuditEvent]:
        """Events logged so far, oldest first."""
        return list(self._events)

    def log(self, event: AuditEvent) -> AuditEvent:
        """
        Log an audit event.

        Events without a correlation ID inherit the logger's.
        """
        if event.correlation_id is None:
            event = event.model_copy(update={"correlation_id": self.correlation_id})

        self._events.append(event)

        log_dict = event.to_log_dict()

        if event.severity.value in ("error", "critical"):
            self._logger.error("audit_event", **log_dict)
        elif event.severity.value == "warning":
            self._logger.warning("audit_event", **log_dict)
        elif event.severity.value == "debug":
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        return event

    def log_budget_limit_set(self, limit: Decimal) -> None:
        """Log a new budget limit."""
        self.log(AuditEventBuilder.budget_limit_set(
            limit=limit,
            correlation_id=self.correlation_id,
        ))

    def log_income_recorded(self, amount: Decimal, description: str) -> None:
        """Log an income entry."""
        self.log(AuditEventBuilder.income_recorded(
            amount=amount,
            description=description,
            correlation_id=self.correlation_id,
        ))

    def log_income_overwritten(self, previous: Decimal, amount: Decimal) -> None:
        """Log that a second income entry replaced the first."""
        self.log(AuditEventBuilder.income_overwritten(
            previous=previous,
            amount=amount,
            correlation_id=self.correlation_id,
        ))

    def log_expense_recorded(
        self,
        amount: Decimal,
        category: str,
        expenses_total: Decimal,
    ) -> None:
        """Log an expense entry."""
        self.log(AuditEventBuilder.expense_recorded(
            amount=amount,
            category=category,
            expenses_total=expenses_total,
            correlation_id=self.correlation_id,
        ))

    def log_category_defaulted(self, candidate: str, fallback: str) -> None:
        """Log a category fallback."""
        self.log(AuditEventBuilder.category_defaulted(
            candidate=candidate,
            fallback=fallback,
            correlation_id=self.correlation_id,
        ))

    def log_input_rejected(
        self,
        prompt: str,
        raw_value: str,
        error_message: str,
    ) -> None:
        """Log malformed console input."""
        self.log(AuditEventBuilder.input_rejected(
            prompt=prompt,
            raw_value=raw_value,
            error_message=error_message,
            correlation_id=self.correlation_id,
        ))

    def log_report_generated(
        self,
        income_total: Decimal,
        expenses_total: Decimal,
        over_budget: Optional[bool],
    ) -> None:
        """Log report generation."""
        self.log(AuditEventBuilder.report_generated(
            income_total=income_total,
            expenses_total=expenses_total,
            over_budget=over_budget,
            correlation_id=self.correlation_id,
        ))


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    One per session; every event the session logs carries it.
    """
    return uuid4()
