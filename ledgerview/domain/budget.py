"""Pure functions for budget calculations and logic.

This module contains the functional core for budget operations:
- No I/O operations (no network, no console, no files)
- No side effects
- Pure data transformations
- Easy to test

Snapshots are never mutated; every summary is recomputed from scratch.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Sequence

from ledgerview.dates import month_from_iso
from ledgerview.domain.classifier import UNDER_BUDGET_THRESHOLD, CategoryStatus, classify
from ledgerview.domain.models import CategoryName, Money, Month, amount_for, round_half_up

# Recommendations add this margin on top of average historical spending
RECOMMENDATION_MARGIN = 1.1


@dataclass(frozen=True)
class BudgetSnapshot:
    """Immutable planned vs. actual spending for one month."""

    budget: dict[CategoryName, Money]
    actual_expenses: dict[CategoryName, Money]
    month: Month


@dataclass(frozen=True)
class BudgetSummary:
    """Immutable budget summary derived from a snapshot."""

    total_budget: Money
    total_spent: Money
    remaining: Money
    utilization: float
    over_budget_categories: list[CategoryName]
    under_budget_categories: list[CategoryName]


@dataclass(frozen=True)
class BudgetVsActualRow:
    """Immutable budget-vs-actual data for a single category."""

    category: CategoryName
    budgeted: Money
    actual: Money
    variance: float
    status: CategoryStatus


def _amount_map(raw: Mapping[str, Any] | None) -> dict[CategoryName, Money]:
    if not raw:
        return {}
    return {CategoryName(category): Money(float(amount)) for category, amount in raw.items()}


def parse_budget_snapshot(payload: Mapping[str, Any]) -> BudgetSnapshot:
    """Build a snapshot from a budget API payload.

    Args:
        payload: JSON object with "budget", "actualExpenses" and "month" keys.
            Missing amount maps are read as empty.

    Returns:
        BudgetSnapshot for the payload's month.

    Raises:
        KeyError: If the payload carries no month.
        ValueError: If the month is not an ISO-8601 date.
    """
    return BudgetSnapshot(
        budget=_amount_map(payload.get("budget")),
        actual_expenses=_amount_map(payload.get("actualExpenses")),
        month=month_from_iso(payload["month"]),
    )


def summarize_budget(snapshot: BudgetSnapshot) -> BudgetSummary:
    """Summarize planned vs. actual spending for a month.

    Categories between 80% and 100% of their budget land in neither the
    over-budget nor the under-budget list.

    Args:
        snapshot: Budget snapshot.

    Returns:
        BudgetSummary with totals and partitioned categories in budget order.
    """
    total_budget = Money(sum(snapshot.budget.values(), 0.0))
    total_spent = Money(sum(snapshot.actual_expenses.values(), 0.0))
    remaining = Money(total_budget - total_spent)
    utilization = total_spent / total_budget * 100 if total_budget else 0.0

    over_budget: list[CategoryName] = []
    under_budget: list[CategoryName] = []

    for category, budgeted in snapshot.budget.items():
        actual = amount_for(snapshot.actual_expenses, category)
        if actual > budgeted:
            over_budget.append(category)
        elif actual <= budgeted * UNDER_BUDGET_THRESHOLD:
            under_budget.append(category)

    return BudgetSummary(
        total_budget=total_budget,
        total_spent=total_spent,
        remaining=remaining,
        utilization=utilization,
        over_budget_categories=over_budget,
        under_budget_categories=under_budget,
    )


def recommend_budgets(historical: Mapping[CategoryName, Sequence[Money]]) -> dict[CategoryName, int]:
    """Recommend budgets from historical spending.

    Recommendation is the average spending plus 10%, rounded half up.

    Args:
        historical: Dictionary of category spending histories.

    Returns:
        Dictionary of recommended budgets. Categories with no history are omitted.
    """
    recommendations: dict[CategoryName, int] = {}

    for category, spending in historical.items():
        if not spending:
            continue
        average = sum(spending) / len(spending)
        recommendations[category] = round_half_up(average * RECOMMENDATION_MARGIN)

    return recommendations


def spending_history(snapshots: Iterable[BudgetSnapshot]) -> dict[CategoryName, list[Money]]:
    """Collect actual spending per category across snapshots.

    Args:
        snapshots: Snapshots in the order returned by the history endpoint.

    Returns:
        Dictionary mapping each category to its spending, one value per
        snapshot that recorded spending for it.
    """
    history: dict[CategoryName, list[Money]] = {}
    for snapshot in snapshots:
        for category, actual in snapshot.actual_expenses.items():
            history.setdefault(category, []).append(actual)
    return history


def category_remaining(snapshot: BudgetSnapshot, category: CategoryName) -> Money:
    """Calculate remaining budget for a category (negative when overspent)."""
    return Money(amount_for(snapshot.budget, category) - amount_for(snapshot.actual_expenses, category))


def calculate_variance(budgeted: Money, actual: Money) -> float:
    """Calculate spending variance against budget as a percentage.

    Args:
        budgeted: Budgeted amount.
        actual: Amount actually spent.

    Returns:
        Percentage over (positive) or under (negative) budget, 0 when nothing was budgeted.
    """
    if budgeted == 0:
        return 0.0
    return (actual - budgeted) / budgeted * 100


def budget_allocation_series(
    categories: Iterable[CategoryName],
    snapshot: BudgetSnapshot,
) -> list[tuple[CategoryName, Money]]:
    """Budgeted amount per category, zero for unbudgeted ones."""
    return [(category, amount_for(snapshot.budget, category)) for category in categories]


def budget_vs_actual_rows(
    categories: Iterable[CategoryName],
    snapshot: BudgetSnapshot,
) -> list[BudgetVsActualRow]:
    """Build budget-vs-actual rows for categories with a budget or spending.

    Args:
        categories: Categories to consider, in display order.
        snapshot: Budget snapshot.

    Returns:
        List of BudgetVsActualRow, skipping categories with neither budget nor spending.
    """
    rows: list[BudgetVsActualRow] = []

    for category in categories:
        budgeted = amount_for(snapshot.budget, category)
        actual = amount_for(snapshot.actual_expenses, category)
        if budgeted <= 0 and actual <= 0:
            continue

        rows.append(
            BudgetVsActualRow(
                category=category,
                budgeted=budgeted,
                actual=actual,
                variance=calculate_variance(budgeted, actual),
                status=classify(budgeted, actual),
            )
        )

    return rows
