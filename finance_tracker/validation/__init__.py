"""Validation package."""

from finance_tracker.validation.category import CategoryValidator

__all__ = ["CategoryValidator"]
