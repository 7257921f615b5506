"""
Finance Tracker - Source Package

A small personal finance ledger: one monthly income, any number of
categorised expenses, a running balance and a monthly budget report.

DESIGN PRINCIPLES:
1. The ledger core never touches the console
2. Amounts are Decimal end to end
3. No silent corrections: every fallback is shown and audited
4. Nothing persists beyond the session
"""

__version__ = "1.0.0"
__author__ = "Finance Tracker Team"
