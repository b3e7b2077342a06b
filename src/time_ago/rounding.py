"""Quantity rounding for gradation steps."""

import math

__all__ = ["round_half_up", "round_amount"]


def round_half_up(amount: float) -> int:
    """Round to the nearest integer, halves rounding up.

    Python's round() uses banker's rounding (round(2.5) == 2), which would
    turn "2.5 minutes" into "2 minutes". Amounts here are magnitudes, so
    rounding half up is what a reader expects.

    Args:
        amount: Value to round.

    Returns:
        Nearest integer, with .5 rounded towards positive infinity.

    """
    return math.floor(amount + 0.5)


def round_amount(amount: float, granularity: float | None = None) -> float:
    """Round a unit amount to the nearest multiple of granularity.

    Args:
        amount: Non-negative unit amount (e.g. 62 minutes).
        granularity: Step size (e.g. 5 for "0, 5, 10... minutes").
            None leaves the amount unchanged.

    Returns:
        The amount itself if granularity is None, otherwise the nearest
        multiple of granularity.

    Examples:
        >>> round_amount(62, 5)
        60
        >>> round_amount(1.4)
        1.4

    """
    if not granularity:
        return amount
    return round_half_up(amount / granularity) * granularity
