"""Ledger package: running totals and budget policy."""

from finance_tracker.ledger.aggregator import LedgerAggregator
from finance_tracker.ledger.budget import BudgetPolicy, to_decimal

__all__ = ["BudgetPolicy", "LedgerAggregator", "to_decimal"]
