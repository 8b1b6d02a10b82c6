"""Tests for ledgerview.domain.transactions pure functions."""

from datetime import date, datetime, timezone

import pytest

from ledgerview.domain.models import CategoryName, Money
from ledgerview.domain.transactions import (
    Transaction,
    build_filters,
    page_numbers,
    parse_transaction,
    parse_transaction_page,
    validate_changes,
    validate_transaction,
)
from ledgerview.errors import ValidationError


class TestParseTransaction:
    """Tests for parse_transaction and Transaction.to_payload."""

    def test_parses_api_payload(self) -> None:
        """Should map API fields onto the transaction."""
        txn = parse_transaction(
            {
                "_id": "abc123",
                "type": "expense",
                "category": "Groceries",
                "amount": 42.5,
                "description": "Weekly shop",
                "date": "2025-01-15T00:00:00.000Z",
                "createdAt": "2025-01-15T09:30:00.000Z",
            }
        )

        assert txn.id == "abc123"
        assert txn.type == "expense"
        assert txn.category == "Groceries"
        assert txn.amount == 42.5
        assert txn.date == date(2025, 1, 15)
        assert txn.created_at == datetime(2025, 1, 15, 9, 30, tzinfo=timezone.utc)
        assert txn.updated_at is None

    def test_optional_fields_absent(self) -> None:
        """Should leave identifier and description unset when missing."""
        txn = parse_transaction({"type": "income", "category": "Salary", "amount": 100, "date": "2025-02-01"})

        assert txn.id is None
        assert txn.description is None

    def test_payload_omits_identifier(self) -> None:
        """Should not send the identifier when serializing."""
        txn = Transaction(
            type="expense",
            category=CategoryName("Dining"),
            amount=Money(18.0),
            date=date(2025, 3, 2),
            description="Lunch",
            id="xyz",
        )

        assert txn.to_payload() == {
            "type": "expense",
            "category": "Dining",
            "amount": 18.0,
            "date": "2025-03-02",
            "description": "Lunch",
        }

    def test_payload_omits_unset_description(self) -> None:
        """Should leave out a missing description."""
        txn = Transaction(type="income", category=CategoryName("Gift"), amount=Money(5.0), date=date(2025, 3, 2))

        assert "description" not in txn.to_payload()


class TestParseTransactionPage:
    """Tests for parse_transaction_page."""

    def test_parses_page(self) -> None:
        """Should read transactions and paging fields."""
        page = parse_transaction_page(
            {
                "transactions": [{"type": "income", "category": "Salary", "amount": 1, "date": "2025-01-01"}],
                "totalPages": 3,
                "currentPage": 2,
                "total": 21,
            }
        )

        assert len(page.transactions) == 1
        assert page.total_pages == 3
        assert page.current_page == 2
        assert page.total == 21

    def test_empty_page(self) -> None:
        """Should default missing fields."""
        page = parse_transaction_page({})

        assert page.transactions == []
        assert page.total == 0


class TestValidateTransaction:
    """Tests for validate_transaction and validate_changes."""

    def test_valid_input(self) -> None:
        """Should accept a well-formed transaction at the minimum amount."""
        validate_transaction("expense", "Groceries", 0.01)

    @pytest.mark.parametrize("amount", [0.0, 0.005, float("nan")])
    def test_rejects_amount_below_minimum(self, amount: float) -> None:
        """Should reject zero, sub-cent and NaN amounts."""
        with pytest.raises(ValidationError) as exc_info:
            validate_transaction("expense", "Groceries", amount)

        assert exc_info.value.fields == {"amount": "Amount must be at least 0.01"}

    def test_reports_every_failing_field(self) -> None:
        """Should collect one message per invalid field."""
        with pytest.raises(ValidationError) as exc_info:
            validate_transaction("transfer", "  ", -1)

        assert set(exc_info.value.fields) == {"type", "category", "amount"}

    def test_changes_only_checks_present_fields(self) -> None:
        """Should ignore fields that are not being changed."""
        validate_changes({"description": "Updated"})

        with pytest.raises(ValidationError) as exc_info:
            validate_changes({"amount": -5})

        assert list(exc_info.value.fields) == ["amount"]


class TestBuildFilters:
    """Tests for build_filters."""

    def test_drops_blank_filters(self) -> None:
        """Should keep only filters with values, using API names."""
        assert build_filters(category="Dining", type="", start_date="2025-01-01") == {
            "category": "Dining",
            "startDate": "2025-01-01",
        }


class TestPageNumbers:
    """Tests for page_numbers."""

    def test_centred_on_current_page(self) -> None:
        """Should centre the window on the current page."""
        assert page_numbers(5, 10) == [3, 4, 5, 6, 7]

    def test_start_of_range(self) -> None:
        """Should start at page 1 near the beginning."""
        assert page_numbers(1, 10) == [1, 2, 3, 4, 5]

    def test_shifted_back_near_end(self) -> None:
        """Should shift the window back near the last page."""
        assert page_numbers(10, 10) == [6, 7, 8, 9, 10]

    def test_fewer_pages_than_window(self) -> None:
        """Should show every page when there are fewer than the window size."""
        assert page_numbers(2, 3) == [1, 2, 3]

    def test_no_pages(self) -> None:
        """Should return nothing when there are no pages."""
        assert page_numbers(1, 0) == []
