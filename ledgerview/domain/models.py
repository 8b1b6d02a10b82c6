"""Domain type definitions for ledgerview.

These NewTypes provide semantic clarity and help with type checking:
- Money: Amount in currency units, as delivered by the API
- Month: Month in YYYY-MM format
- CategoryName: Name of a budget category
- CategoryType: Either "income" or "expense"
"""

import math
from typing import Literal, Mapping, NewType

# Money amounts arrive from the API as JSON numbers and stay floating point
Money = NewType("Money", float)

# Month is always in YYYY-MM format (e.g., "2025-01")
Month = NewType("Month", str)

# Category name for budget categories (case-sensitive identity)
CategoryName = NewType("CategoryName", str)

CategoryType = Literal["income", "expense"]

CATEGORY_TYPES: tuple[CategoryType, ...] = ("income", "expense")


def amount_for(amounts: Mapping[CategoryName, Money], category: CategoryName) -> Money:
    """Look up a category amount, reading an absent key as zero.

    Args:
        amounts: Category-keyed amounts.
        category: Category to look up.

    Returns:
        The stored amount, or 0 when the category is absent.
    """
    return amounts.get(category, Money(0.0))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity."""
    return int(math.floor(value + 0.5))
