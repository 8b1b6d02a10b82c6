"""Tests for ledgerview.domain.classifier pure functions."""

import pytest

from ledgerview.domain.classifier import (
    CategoryStatus,
    classify,
    is_over_budget,
    status_label,
    utilization,
)
from ledgerview.domain.models import Money


class TestClassify:
    """Tests for classify."""

    @pytest.mark.parametrize("budgeted", [0.0, 50.0, 100.0, 1000.0])
    def test_no_spending_is_no_spend_regardless_of_budget(self, budgeted: float) -> None:
        """Should return NO_SPEND whenever nothing was spent."""
        assert classify(Money(budgeted), Money(0.0)) == CategoryStatus.NO_SPEND

    @pytest.mark.parametrize("budgeted", [10.0, 100.0, 250.0])
    def test_eighty_percent_is_under_budget(self, budgeted: float) -> None:
        """Should treat spending of exactly 80% as under budget."""
        assert classify(Money(budgeted), Money(budgeted * 0.8)) == CategoryStatus.UNDER_BUDGET

    @pytest.mark.parametrize("budgeted", [10.0, 100.0, 250.0])
    def test_exact_budget_is_within_budget(self, budgeted: float) -> None:
        """Should treat spending the whole budget as within budget."""
        assert classify(Money(budgeted), Money(budgeted)) == CategoryStatus.WITHIN_BUDGET

    @pytest.mark.parametrize("budgeted", [10.0, 100.0, 250.0])
    def test_one_cent_over_is_over_budget(self, budgeted: float) -> None:
        """Should flag spending one cent over the budget."""
        assert classify(Money(budgeted), Money(budgeted + 0.01)) == CategoryStatus.OVER_BUDGET

    def test_between_eighty_and_hundred_percent(self) -> None:
        """Should treat 90% as within budget."""
        assert classify(Money(100.0), Money(90.0)) == CategoryStatus.WITHIN_BUDGET

    def test_zero_budget_with_spending_is_over_budget(self) -> None:
        """Should fall through to over budget when nothing was budgeted."""
        assert classify(Money(0.0), Money(5.0)) == CategoryStatus.OVER_BUDGET

    def test_status_values(self) -> None:
        """Should expose the stable status identifiers."""
        assert CategoryStatus.NO_SPEND.value == "no-spend"
        assert CategoryStatus.OVER_BUDGET == "over-budget"


class TestUtilization:
    """Tests for utilization."""

    def test_percentage_of_budget(self) -> None:
        """Should return spending as a percentage of budget."""
        assert utilization(Money(200.0), Money(50.0)) == 25.0

    def test_over_budget_exceeds_hundred(self) -> None:
        """Should go above 100 when overspent."""
        assert utilization(Money(100.0), Money(150.0)) == 150.0

    def test_zero_budget_is_zero(self) -> None:
        """Should return 0 instead of dividing by zero."""
        assert utilization(Money(0.0), Money(75.0)) == 0.0


class TestHelpers:
    """Tests for is_over_budget and status_label."""

    def test_is_over_budget(self) -> None:
        """Should only report strictly greater spending as over budget."""
        assert is_over_budget(Money(100.0), Money(100.01))
        assert not is_over_budget(Money(100.0), Money(100.0))

    def test_status_label(self) -> None:
        """Should give a human label per status."""
        assert status_label(CategoryStatus.NO_SPEND) == "No Spending"
        assert status_label(CategoryStatus.WITHIN_BUDGET) == "Within Budget"
