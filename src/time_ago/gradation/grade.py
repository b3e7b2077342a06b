"""Time scale stepping: pick the gradation step for an elapsed time."""

import logging
from collections.abc import Collection, Sequence

from time_ago.gradation.step import Step, Threshold
from time_ago.rounding import round_amount

logger = logging.getLogger(__name__)

__all__ = ["grade", "get_allowed_steps", "get_threshold", "step_amount"]


def get_allowed_steps(gradation: Sequence[Step], units: Collection[str]) -> list[Step]:
    """Leave only the steps whose unit is available.

    Formatter-only steps (no unit) are always kept.

    Args:
        gradation: Scale definition.
        units: Units available for the current locale flavour.

    Returns:
        Steps in their original order.

    """
    return [step for step in gradation if step.unit is None or step.unit in units]


def _evaluate(threshold: Threshold, now: float, future: bool) -> float:
    if callable(threshold):
        return threshold(now, future)
    return threshold


def get_threshold(
    from_step: Step | None,
    to_step: Step,
    now: float,
    future: bool,
) -> float:
    """Get the elapsed seconds needed to move from one step to the next.

    Precedence: the ``threshold_for`` override for the previous step's
    unit, then the step's own threshold, then its divisor. The first
    step of a scale defaults to 0.

    Args:
        from_step: Previous step, or None when `to_step` is the first one.
        to_step: Step being entered.
        now: Current time in epoch milliseconds.
        future: Whether the instant being formatted is in the future.

    Returns:
        Threshold in seconds.

    """
    threshold: Threshold | None = None
    if from_step is not None and from_step.unit is not None:
        threshold = to_step.threshold_for.get(from_step.unit)
    if threshold is None:
        threshold = to_step.threshold
    if threshold is None and from_step is not None:
        threshold = to_step.divisor
    if threshold is None:
        return 0
    return _evaluate(threshold, now, future)


def step_amount(magnitude: float, step: Step) -> float:
    """Elapsed magnitude expressed in the step's unit, granularity applied."""
    if step.divisor is None:
        return magnitude
    return round_amount(magnitude / step.divisor, step.granularity)


def _find_step_index(magnitude: float, now: float, future: bool, steps: list[Step]) -> int:
    for i, step in enumerate(steps):
        previous = steps[i - 1] if i > 0 else None
        if magnitude < get_threshold(previous, step, now, future):
            return i - 1
    return len(steps) - 1


def grade(
    elapsed: float,
    now: float,
    units: Collection[str],
    gradation: Sequence[Step],
) -> Step | None:
    """Choose the gradation step for an elapsed time.

    Walks the allowed steps in order and stops at the first one whose
    threshold is not reached; the step before it wins. If the winning
    step's granularity rounds the amount down to zero ("0 hours" for 20
    minutes with a granularity of 1 hour), falls back to smaller steps
    until one yields a non-zero amount or no smaller step is left.

    Args:
        elapsed: Seconds elapsed since the instant (negative for future).
        now: Current time in epoch milliseconds.
        units: Units available for the current locale flavour.
        gradation: Scale definition, smallest step first.

    Returns:
        Selected step, or None if even the first step's threshold
        isn't reached.

    """
    steps = get_allowed_steps(gradation, units)
    if not steps:
        logger.debug("No gradation steps left for units %s", sorted(units))
        return None

    magnitude = abs(elapsed)
    i = _find_step_index(magnitude, now, elapsed < 0, steps)
    if i < 0:
        return None

    while i > 0 and steps[i].granularity and step_amount(magnitude, steps[i]) == 0:
        logger.debug(
            "Granularity of step %r rounds %ss to zero, falling back",
            steps[i].unit,
            magnitude,
        )
        i -= 1

    return steps[i]
