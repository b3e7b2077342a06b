"""Shared types for time-ago: format context and formatting strategies."""

from collections.abc import Callable
from datetime import date as date_type
from typing import NamedTuple, Protocol, runtime_checkable

__all__ = [
    "DateOrTime",
    "FormatContext",
    "StyleOverride",
    "StepFormatter",
    "FunctionOverride",
    "FunctionStepFormatter",
]

# What a step formatter receives: the original date object when the caller
# passed one, otherwise epoch milliseconds.
DateOrTime = date_type | float


class FormatContext(NamedTuple):
    """Everything a style override gets to see.

    Attributes:
        now: Current time in epoch milliseconds.
        date: Date object being formatted, or None for numeric input.
        time: Instant being formatted in epoch milliseconds.
        elapsed: Seconds from `time` to `now` (positive for past instants).
        locale: Negotiated locale tag.

    """

    now: float
    date: date_type | None
    time: float
    elapsed: float
    locale: str


@runtime_checkable
class StyleOverride(Protocol):
    """Style-level hook that may format the whole value itself."""

    def attempt_format(self, context: FormatContext) -> str | None:
        """Return the formatted string, or None to continue as usual."""
        ...


@runtime_checkable
class StepFormatter(Protocol):
    """Gradation-step hook replacing template substitution for that step."""

    def attempt_format(self, value: DateOrTime, locale: str) -> str | None:
        """Return the formatted string, or None to use the locale template."""
        ...


class FunctionOverride:
    """Adapts a plain function of FormatContext into a StyleOverride."""

    def __init__(self, func: Callable[[FormatContext], str | None]) -> None:
        self.func = func

    def attempt_format(self, context: FormatContext) -> str | None:
        return self.func(context)

    def __repr__(self) -> str:
        return f"FunctionOverride({self.func!r})"


class FunctionStepFormatter:
    """Adapts a plain ``func(value, locale)`` into a StepFormatter."""

    def __init__(self, func: Callable[[DateOrTime, str], str | None]) -> None:
        self.func = func

    def attempt_format(self, value: DateOrTime, locale: str) -> str | None:
        return self.func(value, locale)

    def __repr__(self) -> str:
        return f"FunctionStepFormatter({self.func!r})"
