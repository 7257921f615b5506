"""Shared fixtures."""

from decimal import Decimal

import pytest

from finance_tracker.config import get_settings
from finance_tracker.models import EntryDate
from finance_tracker.tracker import FinanceTracker


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate every test from the caller's environment and cached settings."""
    for name in (
        "FINANCE_LEDGER_CURRENCY_LABEL",
        "FINANCE_LEDGER_INCOME_DESCRIPTION",
        "FINANCE_LEDGER_INCOME_CATEGORY",
        "LOG_LEVEL",
        "DEBUG_MODE",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def jan_first():
    return EntryDate(day=1, month=1, year=2024)


@pytest.fixture
def tracker():
    return FinanceTracker()


@pytest.fixture
def ten_thousand():
    return Decimal("10000")
