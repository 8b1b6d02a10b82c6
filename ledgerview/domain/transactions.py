"""Pure functions for transaction payloads, validation and paging.

This module contains the functional core for transaction handling:
- No I/O operations (no network, no console, no files)
- No side effects
- Pure data transformations
- Easy to test
"""

import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Mapping

from ledgerview.dates import format_date_for_api, parse_api_date
from ledgerview.domain.models import CATEGORY_TYPES, CategoryName, CategoryType, Money
from ledgerview.errors import ValidationError

MIN_AMOUNT = 0.01


@dataclass(frozen=True)
class Transaction:
    """Immutable income or expense record.

    The identifier is None until the API has persisted the transaction.
    """

    type: CategoryType
    category: CategoryName
    amount: Money
    date: date
    description: str | None = None
    id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_payload(self) -> dict[str, Any]:
        """Serialize for POST/PUT bodies, omitting the identifier and unset fields."""
        payload: dict[str, Any] = {
            "type": self.type,
            "category": self.category,
            "amount": self.amount,
            "date": format_date_for_api(self.date),
        }
        if self.description is not None:
            payload["description"] = self.description
        return payload


@dataclass(frozen=True)
class TransactionPage:
    """Immutable page of transactions from the list endpoint."""

    transactions: list[Transaction]
    total_pages: int
    current_page: int
    total: int


def _parse_timestamp(value: str | None) -> datetime | None:
    if not value:
        return None
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def parse_transaction(payload: Mapping[str, Any]) -> Transaction:
    """Build a transaction from an API payload.

    Args:
        payload: JSON object as returned by the transactions endpoints.

    Returns:
        Transaction with the API's "_id" as its identifier.

    Raises:
        KeyError: If a required field is missing.
        ValueError: If the date or a timestamp is not ISO-8601.
    """
    return Transaction(
        type=payload["type"],
        category=CategoryName(payload["category"]),
        amount=Money(float(payload["amount"])),
        date=parse_api_date(payload["date"]),
        description=payload.get("description"),
        id=payload.get("_id"),
        created_at=_parse_timestamp(payload.get("createdAt")),
        updated_at=_parse_timestamp(payload.get("updatedAt")),
    )


def parse_transaction_page(payload: Mapping[str, Any]) -> TransactionPage:
    """Build a transaction page from the list endpoint's payload."""
    transactions = [parse_transaction(item) for item in payload.get("transactions", [])]
    return TransactionPage(
        transactions=transactions,
        total_pages=int(payload.get("totalPages", 0)),
        current_page=int(payload.get("currentPage", 1)),
        total=int(payload.get("total", len(transactions))),
    )


def _is_valid_amount(amount: float) -> bool:
    return not math.isnan(amount) and amount >= MIN_AMOUNT

def validate_transaction(type: str, category: str, amount: float) -> None:
    """Check transaction form input before submission.

    Args:
        type: Transaction type.
        category: Category name.
        amount: Transaction amount.

    Raises:
        ValidationError: With one message per failing field.
    """
    validate_changes({"type": type, "category": category, "amount": amount})


def validate_changes(changes: Mapping[str, Any]) -> None:
    """Check the fields present in a partial transaction update.

    Raises:
        ValidationError: With one message per failing field.
    """
    errors: dict[str, str] = {}

    if "type" in changes and changes["type"] not in CATEGORY_TYPES:
        errors["type"] = "Type must be 'income' or 'expense'"
    if "category" in changes and not (changes["category"] or "").strip():
        errors["category"] = "Category is required"
    if "amount" in changes and not _is_valid_amount(changes["amount"]):
        errors["amount"] = f"Amount must be at least {MIN_AMOUNT}"

    if errors:
        raise ValidationError(errors)


def build_filters(
    category: str | None = None,
    type: str | None = None,
    start_date: str | None = None,
    end_date: str | None = None,
) -> dict[str, str]:
    """Build list-endpoint filters, dropping blank values.

    Returns:
        Dictionary of query parameters using the API's names.
    """
    filters = {
        "category": category,
        "type": type,
        "startDate": start_date,
        "endDate": end_date,
    }
    return {key: value for key, value in filters.items() if value}


def page_numbers(current_page: int, total_pages: int, max_visible: int = 5) -> list[int]:
    """Calculate the window of page numbers to offer around the current page.

    Args:
        current_page: 1-based current page.
        total_pages: Number of pages available.
        max_visible: Maximum page numbers in the window.

    Returns:
        Ascending page numbers, shifted back when near the last page.
    """
    start = max(1, current_page - max_visible // 2)
    end = min(total_pages, start + max_visible - 1)

    if end - start + 1 < max_visible:
        start = max(1, end - max_visible + 1)

    return list(range(start, end + 1))
