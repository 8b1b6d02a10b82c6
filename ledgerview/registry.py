"""Category registry: the session's owned list of categories.

The registry is constructed explicitly and handed to whatever needs category
data. Every mutation writes the full list to the injected key-value store;
the in-memory list stays authoritative when the store fails.
"""

import json
import logging
from dataclasses import replace
from typing import Any, Iterable

from ledgerview.domain.categories import (
    PREDEFINED_CATEGORIES,
    Category,
    is_custom_category,
    names_by_type,
    parse_category,
)
from ledgerview.domain.models import CategoryName, CategoryType, Money
from ledgerview.domain.transactions import Transaction
from ledgerview.errors import StorageError
from ledgerview.store.kv import KeyValueStore

logger = logging.getLogger(__name__)

CATEGORIES_KEY = "budget-tracker-categories"

_UPDATABLE_FIELDS = ("name", "type", "description")


class CategoryRegistry:
    """In-memory category list persisted to a key-value store."""

    def __init__(self, store: KeyValueStore, key: str = CATEGORIES_KEY) -> None:
        self.store = store
        self.key = key
        self._categories: list[Category] = self._load()

    def _load(self) -> list[Category]:
        try:
            raw = self.store.get(self.key)
        except StorageError as e:
            logger.warning("Could not read stored categories, using predefined set: %s", e)
            return list(PREDEFINED_CATEGORIES)

        if raw is None:
            logger.debug("No stored categories, seeding %d predefined", len(PREDEFINED_CATEGORIES))
            return list(PREDEFINED_CATEGORIES)

        try:
            return [parse_category(item) for item in json.loads(raw)]
        except (ValueError, TypeError, KeyError) as e:
            logger.warning("Stored categories are unreadable, using predefined set: %s", e)
            return list(PREDEFINED_CATEGORIES)

    def _save(self) -> None:
        payload = json.dumps([category.to_dict() for category in self._categories])
        try:
            self.store.set(self.key, payload)
        except StorageError as e:
            logger.warning("Could not persist categories: %s", e)
        else:
            logger.debug("Persisted %d categories", len(self._categories))

    def _index(self, name: str) -> int | None:
        for i, category in enumerate(self._categories):
            if category.name == name:
                return i
        return None

    @property
    def categories(self) -> list[Category]:
        return list(self._categories)

    def names(self) -> list[CategoryName]:
        return [category.name for category in self._categories]

    def get(self, name: str) -> Category | None:
        index = self._index(name)
        return None if index is None else self._categories[index]

    def type_of(self, name: str) -> CategoryType | None:
        category = self.get(name)
        return category.type if category else None

    def by_type(self, category_type: CategoryType) -> list[CategoryName]:
        return names_by_type(self._categories, category_type)

    def by_type_full(self, category_type: CategoryType) -> list[Category]:
        return [category for category in self._categories if category.type == category_type]

    def income_names(self) -> list[CategoryName]:
        return self.by_type("income")

    def expense_names(self) -> list[CategoryName]:
        return self.by_type("expense")

    def is_custom(self, name: str) -> bool:
        return is_custom_category(name)

    def add(self, name: str, category_type: CategoryType, description: str = "") -> bool:
        """Add a custom category.

        Args:
            name: Category name (case-sensitive).
            category_type: "income" or "expense".
            description: Optional description.

        Returns:
            True if the category was added, False if the name already exists.
        """
        if self._index(name) is not None:
            logger.debug("Category %r already exists, not adding", name)
            return False

        self._categories.append(Category(CategoryName(name), category_type, description))
        self._save()
        return True

    def remove(self, name: str) -> bool:
        """Remove a custom category.

        Predefined categories are permanent.

        Returns:
            True if the category was removed, False otherwise.
        """
        if not is_custom_category(name):
            logger.debug("Category %r is predefined, not removing", name)
            return False

        index = self._index(name)
        if index is None:
            logger.debug("Category %r not found, not removing", name)
            return False

        del self._categories[index]
        self._save()
        return True

    def update(self, name: str, /, **fields: Any) -> bool:
        """Merge fields into an existing category.

        Args:
            name: Name of the category to update.
            **fields: Any of name, type, description. Other keys are ignored.

        Returns:
            True if the category was updated, False if it was not found or
            a rename targets a name another category already uses.
        """
        index = self._index(name)
        if index is None:
            logger.debug("Category %r not found, not updating", name)
            return False

        changes = {key: value for key, value in fields.items() if key in _UPDATABLE_FIELDS}
        new_name = changes.get("name", name)
        if new_name != name and self._index(new_name) is not None:
            logger.debug("Category %r already exists, not renaming %r", new_name, name)
            return False

        self._categories[index] = replace(self._categories[index], **changes)
        self._save()
        return True

    def replace_all(self, categories: Iterable[Category]) -> None:
        """Adopt a category list fetched from the API."""
        self._categories = list(categories)
        self._save()

    def stats(self, transactions: Iterable[Transaction]) -> list[tuple[Category, Money, int]]:
        """Total and count of transactions per known category.

        Args:
            transactions: Transactions in any order.

        Returns:
            (category, total, count) in first-encountered order. Transactions
            whose category is not in the registry are skipped.
        """
        totals: dict[CategoryName, tuple[float, int]] = {}
        for txn in transactions:
            total, count = totals.get(txn.category, (0.0, 0))
            totals[txn.category] = (total + txn.amount, count + 1)

        result: list[tuple[Category, Money, int]] = []
        for name, (total, count) in totals.items():
            category = self.get(name)
            if category is not None:
                result.append((category, Money(total), count))
        return result
