"""
Expense Category Validation

The set of expense categories is fixed. A candidate string is valid only
if it matches one of them exactly (case-sensitive): "food" or " Food" are
NOT valid.

IMPORTANT: An invalid category is not an error. The validator reports it as
a warning-level issue and hands back the default category, so the caller can
tell the user what happened and keep going.
"""

from finance_tracker.models.transaction import (
    CategoryResolution,
    ExpenseCategory,
    ValidationIssue,
)


class CategoryValidator:
    """
    Validates user-supplied expense categories.

    Stateless and side-effect free.
    """

    _ALLOWED = frozenset(category.value for category in ExpenseCategory)

    def is_valid(self, candidate: str) -> bool:
        """True iff candidate is exactly one of the allowed categories."""
        return candidate in self._ALLOWED

    def default_category(self) -> str:
        return ExpenseCategory.OTHER.value

    def categories(self) -> list[str]:
        """Allowed categories in display order."""
        return [category.value for category in ExpenseCategory]

    def resolve(self, candidate: str) -> CategoryResolution:
        """
        Return the category to use for a candidate.

        Valid candidates pass through unchanged; anything else resolves to
        the default category together with a warning issue.
        """
        if self.is_valid(candidate):
            return CategoryResolution(candidate=candidate, category=candidate)

        fallback = self.default_category()
        return CategoryResolution(
            candidate=candidate,
            category=fallback,
            issue=ValidationIssue(
                field="category",
                issue_type="invalid_category",
                message=f"Invalid category! Setting to '{fallback}'.",
                severity="warning",
                suggested_fix=f"Choose one of: {', '.join(self.categories())}",
            ),
        )

    def get_user_friendly_summary(self) -> str:
        """The category prompt shown before asking for input."""
        return f"Available Categories: {', '.join(self.categories())}"
