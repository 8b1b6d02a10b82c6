"""Category records and the predefined category set.

Pure data and functions; persistence lives in ledgerview.registry.
"""

from dataclasses import asdict, dataclass
from typing import Any, Iterable, Mapping

from ledgerview.domain.models import CategoryName, CategoryType


@dataclass(frozen=True)
class Category:
    """Immutable category descriptor. The name is its identity."""

    name: CategoryName
    type: CategoryType
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


PREDEFINED_CATEGORIES: tuple[Category, ...] = (
    Category(CategoryName("Salary"), "income"),
    Category(CategoryName("Freelance"), "income"),
    Category(CategoryName("Investment"), "income"),
    Category(CategoryName("Bonus"), "income"),
    Category(CategoryName("Gift"), "income"),
    Category(CategoryName("Other Income"), "income"),
    Category(CategoryName("Groceries"), "expense"),
    Category(CategoryName("Entertainment"), "expense"),
    Category(CategoryName("Utilities"), "expense"),
    Category(CategoryName("Transportation"), "expense"),
    Category(CategoryName("Healthcare"), "expense"),
    Category(CategoryName("Dining"), "expense"),
    Category(CategoryName("Shopping"), "expense"),
    Category(CategoryName("Education"), "expense"),
    Category(CategoryName("Travel"), "expense"),
    Category(CategoryName("Rent/Mortgage"), "expense"),
    Category(CategoryName("Insurance"), "expense"),
    Category(CategoryName("Savings"), "expense"),
    Category(CategoryName("Other Expenses"), "expense"),
)

PREDEFINED_NAMES: frozenset[CategoryName] = frozenset(category.name for category in PREDEFINED_CATEGORIES)


def is_custom_category(name: str) -> bool:
    """Check if a name is outside the predefined set (whether or not it exists)."""
    return name not in PREDEFINED_NAMES


def parse_category(payload: Mapping[str, Any]) -> Category:
    """Build a category from a stored or API payload.

    Raises:
        KeyError: If name or type is missing.
    """
    return Category(
        name=CategoryName(payload["name"]),
        type=payload["type"],
        description=payload.get("description") or "",
    )


def names_by_type(categories: Iterable[Category], category_type: CategoryType) -> list[CategoryName]:
    """Names of categories of the given type, in list order."""
    return [category.name for category in categories if category.type == category_type]
