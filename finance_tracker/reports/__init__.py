"""Report generation package."""

from finance_tracker.reports.generator import (
    OVER_BUDGET_MESSAGE,
    WITHIN_BUDGET_MESSAGE,
    ReportGenerator,
)

__all__ = ["OVER_BUDGET_MESSAGE", "WITHIN_BUDGET_MESSAGE", "ReportGenerator"]
