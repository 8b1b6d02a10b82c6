"""Pure functions for income/expense summaries and dashboard figures.

This module contains the functional core for the financial summary:
- No I/O operations (no network, no console, no files)
- No side effects
- Pure data transformations
- Easy to test
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from ledgerview.domain.models import CategoryName, CategoryType, Money, round_half_up
from ledgerview.domain.transactions import Transaction

TOP_CATEGORIES_DEFAULT = 8


@dataclass(frozen=True)
class FinancialSummary:
    """Immutable income and expense totals.

    by_category only carries a type key when that type has at least one category.
    """

    total_income: Money
    total_expenses: Money
    balance: Money
    by_category: dict[CategoryType, dict[CategoryName, Money]] = field(default_factory=dict)


def summarize_transactions(transactions: Iterable[Transaction]) -> FinancialSummary:
    """Summarize transactions into totals and per-category breakdowns.

    Args:
        transactions: Transactions in any order.

    Returns:
        FinancialSummary. An empty input yields zero totals and no categories.
        Transactions whose type is neither income nor expense are skipped.
    """
    totals: dict[CategoryType, float] = {"income": 0.0, "expense": 0.0}
    by_category: dict[CategoryType, dict[CategoryName, Money]] = {}

    for txn in transactions:
        if txn.type not in totals:
            continue
        totals[txn.type] += txn.amount
        breakdown = by_category.setdefault(txn.type, {})
        breakdown[txn.category] = Money(breakdown.get(txn.category, 0.0) + txn.amount)

    total_income = Money(totals["income"])
    total_expenses = Money(totals["expense"])

    return FinancialSummary(
        total_income=total_income,
        total_expenses=total_expenses,
        balance=Money(total_income - total_expenses),
        by_category=by_category,
    )


def parse_financial_summary(payload: Mapping[str, Any]) -> FinancialSummary:
    """Build a summary from the API's pre-aggregated payload.

    Missing totals read as zero and missing or empty breakdowns are dropped.
    """
    by_category: dict[CategoryType, dict[CategoryName, Money]] = {}
    raw_breakdown = payload.get("byCategory") or {}

    for category_type in ("income", "expense"):
        raw = raw_breakdown.get(category_type)
        if raw:
            by_category[category_type] = {CategoryName(name): Money(float(amount)) for name, amount in raw.items()}

    total_income = Money(float(payload.get("totalIncome") or 0))
    total_expenses = Money(float(payload.get("totalExpenses") or 0))
    balance = payload.get("balance")

    return FinancialSummary(
        total_income=total_income,
        total_expenses=total_expenses,
        balance=Money(float(balance)) if balance is not None else Money(total_income - total_expenses),
        by_category=by_category,
    )


def top_expense_categories(
    summary: FinancialSummary,
    n: int = TOP_CATEGORIES_DEFAULT,
) -> list[tuple[CategoryName, Money]]:
    """Largest expense categories first.

    Args:
        summary: Financial summary.
        n: Maximum number of categories to return.

    Returns:
        (category, amount) pairs sorted by descending amount. Ties keep the
        order in which categories were first encountered.
    """
    expenses = summary.by_category.get("expense", {})
    return sorted(expenses.items(), key=lambda item: -item[1])[: max(n, 0)]


def expense_ratio(summary: FinancialSummary) -> int:
    """Expenses as a whole-number percentage of income, 0 without income."""
    if summary.total_income <= 0:
        return 0
    return round_half_up(summary.total_expenses / summary.total_income * 100)


def savings_rate(summary: FinancialSummary) -> int:
    """Balance as a whole-number percentage of income, 0 without income."""
    if summary.total_income <= 0:
        return 0
    return round_half_up(summary.balance / summary.total_income * 100)


def category_count(summary: FinancialSummary, category_type: CategoryType) -> int:
    return len(summary.by_category.get(category_type, {}))


def income_vs_expenses(summary: FinancialSummary) -> list[tuple[str, Money]]:
    return [("Income", summary.total_income), ("Expenses", summary.total_expenses)]
