"""Pure functions for classifying category spending against its budget.

This module contains the functional core for category status:
- No I/O operations
- No side effects
- Total over its numeric domain (zero budgets are guarded, never divided by)
"""

from enum import Enum

from ledgerview.domain.models import Money

# Spending at or below this share of the budget counts as under budget
UNDER_BUDGET_THRESHOLD = 0.8


class CategoryStatus(str, Enum):
    """Spending status of a single category."""

    NO_SPEND = "no-spend"
    UNDER_BUDGET = "under-budget"
    WITHIN_BUDGET = "within-budget"
    OVER_BUDGET = "over-budget"


STATUS_LABELS: dict[CategoryStatus, str] = {
    CategoryStatus.NO_SPEND: "No Spending",
    CategoryStatus.UNDER_BUDGET: "Under Budget",
    CategoryStatus.WITHIN_BUDGET: "Within Budget",
    CategoryStatus.OVER_BUDGET: "Over Budget",
}

STATUS_STYLES: dict[CategoryStatus, str] = {
    CategoryStatus.NO_SPEND: "dim",
    CategoryStatus.UNDER_BUDGET: "green",
    CategoryStatus.WITHIN_BUDGET: "yellow",
    CategoryStatus.OVER_BUDGET: "red",
}


def classify(budgeted: Money, actual: Money) -> CategoryStatus:
    """Classify actual spending against a budgeted amount.

    Rules are evaluated in order and the first match wins. A zero budget with
    any spending falls through to over budget.

    Args:
        budgeted: Budgeted amount.
        actual: Amount actually spent.

    Returns:
        The category status.
    """
    if actual == 0:
        return CategoryStatus.NO_SPEND
    if actual <= budgeted * UNDER_BUDGET_THRESHOLD:
        return CategoryStatus.UNDER_BUDGET
    if actual <= budgeted:
        return CategoryStatus.WITHIN_BUDGET
    return CategoryStatus.OVER_BUDGET


def utilization(budgeted: Money, actual: Money) -> float:
    """Calculate percentage of budget used.

    Args:
        budgeted: Budgeted amount.
        actual: Amount actually spent.

    Returns:
        Percentage of budget used (0-100+), 0 when nothing was budgeted.
    """
    if budgeted == 0:
        return 0.0
    return actual / budgeted * 100


def is_over_budget(budgeted: Money, actual: Money) -> bool:
    """Check if spending exceeds the budget."""
    return actual > budgeted


def status_label(status: CategoryStatus) -> str:
    return STATUS_LABELS[status]
