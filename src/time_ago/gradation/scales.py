"""Built-in time scales.

``canonical`` moves to the next unit as soon as the rounded amount would
reach one of it ("59.5 seconds" is "1 minute"). ``convenient`` rounds more
loosely, the way people talk ("5 minutes", "half an hour", "an hour").
"""

from time_ago.gradation.step import Step
from time_ago.units import DAY, HOUR, MINUTE, MONTH, NOW, WEEK, YEAR

__all__ = ["CANONICAL", "CONVENIENT", "SCALES", "get_step"]

CANONICAL: tuple[Step, ...] = (
    Step(unit=NOW, divisor=1),
    Step(unit="second", divisor=1, threshold=0.5),
    Step(unit="minute", divisor=MINUTE, threshold=59.5),
    Step(unit="hour", divisor=HOUR, threshold=59.5 * MINUTE),
    Step(unit="day", divisor=DAY, threshold=23.5 * HOUR),
    Step(unit="week", divisor=WEEK, threshold=6.5 * DAY),
    Step(unit="month", divisor=MONTH, threshold=3.5 * WEEK),
    Step(unit="year", divisor=YEAR, threshold=11.5 * MONTH),
)

CONVENIENT: tuple[Step, ...] = (
    Step(unit=NOW, divisor=1),
    # "now" covers the first 45 seconds when available.
    Step(unit="second", divisor=1, threshold=1, threshold_for={NOW: 45}),
    Step(unit="minute", divisor=MINUTE, threshold=45),
    Step(unit="minute", divisor=MINUTE, threshold=2.5 * MINUTE, granularity=5),
    # Only used by locales that have a "half-hour" unit.
    Step(unit="half-hour", divisor=30 * MINUTE, threshold=22.5 * MINUTE),
    # Without "half-hour", "50 minutes" stays in minutes up to 52.5.
    Step(
        unit="hour",
        divisor=HOUR,
        threshold=42.5 * MINUTE,
        threshold_for={"minute": 52.5 * MINUTE},
    ),
    Step(unit="day", divisor=DAY, threshold=(20.5 / 24) * DAY),
    Step(unit="week", divisor=WEEK, threshold=5.5 * DAY),
    Step(unit="month", divisor=MONTH, threshold=3.5 * WEEK),
    Step(unit="year", divisor=YEAR, threshold=10.5 * MONTH),
)

SCALES: dict[str, tuple[Step, ...]] = {
    "canonical": CANONICAL,
    "convenient": CONVENIENT,
}


def get_step(scale: tuple[Step, ...], unit: str) -> Step:
    """Return the first step of a scale for the given unit.

    Raises:
        KeyError: If the scale has no step for the unit.

    """
    for step in scale:
        if step.unit == unit:
            return step
    raise KeyError(unit)
