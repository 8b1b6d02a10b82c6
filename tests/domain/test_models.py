"""Tests for ledgerview.domain.models helpers."""

from ledgerview.domain.models import CategoryName, Money, amount_for, round_half_up


class TestAmountFor:
    """Tests for amount_for."""

    def test_present_key(self) -> None:
        """Should return the stored amount."""
        assert amount_for({CategoryName("A"): Money(12.5)}, CategoryName("A")) == 12.5

    def test_absent_key_is_zero(self) -> None:
        """Should read a missing category as zero."""
        assert amount_for({}, CategoryName("A")) == 0.0


class TestRoundHalfUp:
    """Tests for round_half_up."""

    def test_halves_round_up(self) -> None:
        """Should round .5 up, unlike Python's round."""
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1

    def test_negative_halves_round_toward_positive(self) -> None:
        """Should round -2.5 to -2."""
        assert round_half_up(-2.5) == -2

    def test_regular_rounding(self) -> None:
        """Should round to the nearest integer otherwise."""
        assert round_half_up(110.00000000000001) == 110
        assert round_half_up(31.4) == 31
