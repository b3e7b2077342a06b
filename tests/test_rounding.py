"""Tests for quantity rounding."""

import pytest

from time_ago.rounding import round_amount, round_half_up


class TestRoundHalfUp:
    """Test round_half_up function."""

    @pytest.mark.parametrize(
        ("amount", "expected"),
        [(0, 0), (0.49, 0), (0.5, 1), (1.5, 2), (2.5, 3), (2.4999, 2), (59.5, 60)],
    )
    def test_rounds_halves_up(self, amount: float, expected: int) -> None:
        """Halves round up, unlike Python's banker's rounding."""
        assert round_half_up(amount) == expected

    def test_returns_int(self) -> None:
        """Result is an int, ready for display."""
        assert isinstance(round_half_up(3.2), int)


class TestRoundAmount:
    """Test round_amount function."""

    @pytest.mark.parametrize("amount", [0, 0.3, 1.4, 62, 1234.56])
    def test_no_granularity_returns_amount_unchanged(self, amount: float) -> None:
        """Without granularity the amount is returned as-is."""
        assert round_amount(amount) == amount
        assert round_amount(amount, None) == amount

    def test_rounds_to_nearest_multiple(self) -> None:
        """62 with granularity 5 rounds to 60."""
        assert round_amount(62, 5) == 60
        assert round_amount(63, 5) == 65
        assert round_amount(2.5, 5) == 5

    def test_small_amount_rounds_to_zero(self) -> None:
        """Amounts under half a granule round to zero."""
        assert round_amount(1.5, 5) == 0

    @pytest.mark.parametrize("granularity", [1, 2, 5, 15, 30])
    def test_result_is_multiple_of_granularity(self, granularity: int) -> None:
        """Every result is an exact multiple of the granularity."""
        for tenths in range(0, 2000, 7):
            result = round_amount(tenths / 10, granularity)
            assert result % granularity == 0
