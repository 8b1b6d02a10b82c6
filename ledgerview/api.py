"""Budget API interactions."""

import logging
import os
from typing import Any, Optional

import requests

from ledgerview.domain.budget import BudgetSnapshot, parse_budget_snapshot
from ledgerview.domain.categories import Category, parse_category
from ledgerview.domain.summary import FinancialSummary, parse_financial_summary
from ledgerview.domain.transactions import (
    Transaction,
    TransactionPage,
    parse_transaction,
    parse_transaction_page,
)
from ledgerview.errors import NotFoundError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:3000/api"
DEFAULT_TIMEOUT = 10.0


class LedgerApi:
    """Client for the budget and transactions API.

    Every call is a single blocking request. Failures are raised as
    TransportError (NotFoundError for HTTP 404) and never retried.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        token: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        session: Any = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.session = session or requests.Session()

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _request(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        body: Any = None,
    ) -> Any:
        """Send a request and decode the JSON response.

        Returns:
            Decoded JSON body, or None for an empty response.

        Raises:
            NotFoundError: If the API answers 404.
            TransportError: For any other network or HTTP failure.
        """
        url = f"{self.base_url}{path}"
        logger.debug("%s %s params=%s", method, url, params)

        try:
            response = self.session.request(
                method,
                url,
                headers=self._headers(),
                params=params,
                json=body,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(f"{method} {path} failed: {e}") from e

        if response.status_code == 404:
            raise NotFoundError(f"{method} {path}: not found")

        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise TransportError(f"{method} {path} failed: {e}", status_code=response.status_code) from e

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise TransportError(f"{method} {path} returned invalid JSON: {e}") from e

    # Budget

    def get_current_budget(self) -> BudgetSnapshot:
        """Get the current month's budget and actual expenses."""
        return parse_budget_snapshot(self._request("GET", "/budget/current"))

    def get_budget_by_month(self, year: int, month: int) -> BudgetSnapshot:
        """Get budget and actual expenses for a specific month.

        Args:
            year: Four-digit year.
            month: Month number, 1-12.
        """
        params = {"year": str(year), "month": str(month)}
        return parse_budget_snapshot(self._request("GET", "/budget/month", params=params))

    def get_budget_history(self) -> list[BudgetSnapshot]:
        """Get budget snapshots for recent months, in API order."""
        return [parse_budget_snapshot(item) for item in self._request("GET", "/budget/history") or []]

    def update_budget(self, categories: dict[str, float]) -> Any:
        """Replace the current month's budget amounts."""
        return self._request("POST", "/budget", body={"categories": categories})

    def set_category_budget(self, category: str, amount: float) -> Any:
        """Set the current month's budget for one category."""
        return self._request("PATCH", "/budget/category", body={"category": category, "amount": amount})

    def reset_budget(self) -> Any:
        """Clear the current month's budget."""
        return self._request("POST", "/budget/reset", body={})

    def copy_previous_month_budget(self) -> Any:
        """Copy the previous month's budget into the current month."""
        return self._request("POST", "/budget/copy-previous", body={})

    # Categories

    def get_categories(self) -> list[Category]:
        return [parse_category(item) for item in self._request("GET", "/categories") or []]

    # Transactions

    def get_transactions(
        self,
        page: int = 1,
        limit: int = 10,
        filters: Optional[dict[str, str]] = None,
    ) -> TransactionPage:
        """Fetch one page of transactions.

        Args:
            page: 1-based page number.
            limit: Page size.
            filters: Optional category/type/startDate/endDate filters. Blank values are dropped.

        Returns:
            TransactionPage.
        """
        params = {"page": str(page), "limit": str(limit)}
        for key, value in (filters or {}).items():
            if value:
                params[key] = value
        return parse_transaction_page(self._request("GET", "/transactions", params=params))

    def add_transaction(self, transaction: Transaction) -> Transaction:
        """Create a transaction. Any identifier on the input is not sent."""
        return parse_transaction(self._request("POST", "/transactions", body=transaction.to_payload()))

    def update_transaction(self, transaction_id: str, changes: dict[str, Any]) -> Transaction:
        """Update a transaction with a partial payload.

        Raises:
            NotFoundError: If the transaction does not exist.
        """
        return parse_transaction(self._request("PUT", f"/transactions/{transaction_id}", body=changes))

    def delete_transaction(self, transaction_id: str) -> None:
        """Delete a transaction.

        Raises:
            NotFoundError: If the transaction does not exist.
        """
        self._request("DELETE", f"/transactions/{transaction_id}")

    def get_financial_summary(self, user_id: str | None) -> FinancialSummary:
        """Get the server-side income and expense summary for a user."""
        return parse_financial_summary(
            self._request("POST", "/transactions/summary", body={"userId": user_id}) or {}
        )


def get_token() -> Optional[str]:
    """Get API token from environment.

    Returns:
        Token string or None if not set.
    """
    return os.environ.get("LEDGERVIEW_TOKEN")
