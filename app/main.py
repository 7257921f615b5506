"""
Streamlit Frontend for Finance Tracker

A browser version of the console session. It drives the same
FinanceTracker, so totals and report text are identical.

DESIGN PRINCIPLES:
1. One tracker per browser session (kept in st.session_state)
2. Category fallbacks are shown, never hidden
3. The report is the same text the console prints
"""

from datetime import date

import streamlit as st

from finance_tracker.models import EntryDate, format_amount
from finance_tracker.tracker import FinanceTracker, create_tracker


# Page configuration
st.set_page_config(
    page_title="Finance Tracker",
    page_icon="💰",
    layout="wide",
    initial_sidebar_state="expanded",
)


def get_tracker() -> FinanceTracker:
    """Get or create this browser session's tracker."""
    if "tracker" not in st.session_state:
        st.session_state.tracker = create_tracker()
    return st.session_state.tracker


def to_entry_date(value: date) -> EntryDate:
    return EntryDate(day=value.day, month=value.month, year=value.year)


def render_setup(tracker: FinanceTracker):
    """Budget limit and salary."""
    label = tracker.currency_label
    st.subheader("⚙️ Budget & Salary")

    with st.form("budget_form"):
        limit = st.number_input(
            f"Budget limit for the month ({label}), 0 for no budget",
            value=float(tracker.budget.limit),
            step=100.0,
        )
        if st.form_submit_button("Set Budget"):
            tracker.set_budget_limit(str(limit))
            st.success("Budget updated.")

    with st.form("income_form"):
        salary = st.number_input(f"Monthly salary ({label})", value=0.0, step=100.0)
        income_date = st.date_input("Income date", value=date.today())
        if st.form_submit_button("Record Salary"):
            if tracker.has_income:
                st.warning("Only one income is kept: this replaces the previous salary.")
            income = tracker.add_income(amount=str(salary), date=to_entry_date(income_date))
            st.success(tracker.describe(income))


def render_expense_form(tracker: FinanceTracker):
    """Add one expense."""
    label = tracker.currency_label
    st.subheader("🧾 Add Expense")

    with st.form("expense_form", clear_on_submit=True):
        description = st.text_input("Description")
        amount = st.number_input(f"Amount ({label})", value=0.0, step=10.0)
        expense_date = st.date_input("Date", value=date.today())
        category = st.selectbox(
            "Category",
            tracker.validator.categories(),
            index=len(tracker.validator.categories()) - 1,
        )
        if st.form_submit_button("Add Expense"):
            resolution = tracker.resolve_category(category)
            if resolution.was_defaulted:
                st.warning(resolution.issue.message)
            expense = tracker.add_expense(
                amount=str(amount),
                description=description,
                date=to_entry_date(expense_date),
                category=resolution.category,
            )
            st.success(tracker.describe(expense))


def render_overview(tracker: FinanceTracker):
    """Totals, transactions and the report."""
    label = tracker.currency_label
    snapshot = tracker.snapshot()

    k1, k2, k3 = st.columns(3)
    with k1:
        st.metric("Total Income", f"{label} {format_amount(snapshot.income_total)}")
    with k2:
        st.metric("Total Expenses", f"{label} {format_amount(snapshot.expenses_total)}")
    with k3:
        st.metric("Remaining Balance", f"{label} {format_amount(snapshot.balance)}")

    history = tracker.ledger.history
    if history:
        st.subheader("📋 Transactions")
        for transaction in history:
            st.text(tracker.describe(transaction))
    else:
        st.info("No transactions recorded yet.")

    if st.button("📊 Generate Report", type="primary"):
        st.code(tracker.generate_report(), language=None)


def main():
    """Main application entry point."""
    tracker = get_tracker()

    st.sidebar.title("💰 Finance Tracker")
    st.sidebar.markdown("---")
    page = st.sidebar.radio(
        "Navigate to:",
        ["⚙️ Setup", "🧾 Expenses", "📊 Overview"],
        index=0,
    )
    if st.sidebar.button("Start Over"):
        st.session_state.tracker = create_tracker()
        st.rerun()

    if page == "⚙️ Setup":
        render_setup(tracker)
    elif page == "🧾 Expenses":
        render_expense_form(tracker)
    elif page == "📊 Overview":
        render_overview(tracker)


if __name__ == "__main__":
    main()
