"""Relative time formatter.

Ties together locale data, styles and the gradation stepper:

1. Normalize the input to epoch milliseconds (keeping the date object).
2. Pick the first flavour of the style the locale has ("long" last).
3. Let the style's custom override short-circuit, if it wants to.
4. Collect the units the flavour provides, plus "now" when renderable.
5. Select a gradation step, then either delegate to the step's formatter,
   render "now", or resolve the unit template and substitute the amount.

Usage:
    from time_ago import TimeAgo, add_locale, load_locale

    add_locale(load_locale("en"))
    time_ago = TimeAgo("en-US")
    time_ago.format(datetime.now() - timedelta(hours=3))  # "3 hours ago"
"""

import functools
import logging
import threading
import time as time_module
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any

from time_ago.cache import Cache
from time_ago.exceptions import NoStepSelectedError, NoUnitsAvailableError, UnsupportedInputError
from time_ago.gradation import grade, step_amount
from time_ago.locale.babel_support import format_number, get_quantify
from time_ago.locale.messages import FlavourMessages, LocaleData, Message, QuantifyFunction
from time_ago.locale.registry import LocaleRegistry, get_default_registry
from time_ago.locale.resolver import format_value, has_now_message, resolve_now
from time_ago.rounding import round_half_up
from time_ago.styles import Style, resolve_style
from time_ago.types import FormatContext
from time_ago.units import NOW

logger = logging.getLogger(__name__)

__all__ = ["TimeAgo", "get_date_and_time", "get_available_units"]

# Always present for every locale.
FALLBACK_FLAVOUR = "long"

Clock = Callable[[], float]


def _system_clock() -> float:
    return time_module.time() * 1000


@dataclass(frozen=True)
class FlavourFormatter:
    """Everything needed to format in one locale flavour. Built once, cached.

    Attributes:
        flavour: Flavour name.
        messages: Unit messages of the flavour.
        long_messages: Unit messages of the "long" flavour ("now" fallback).
        now_message: Locale-wide "now" message.
        units: Units the flavour can render, "now" included if renderable.
        quantify: Plural classifier registered with the locale data, if any.

    """

    flavour: str
    messages: FlavourMessages
    long_messages: FlavourMessages | None
    now_message: Message | None
    units: tuple[str, ...]
    quantify: QuantifyFunction | None = None

    @classmethod
    def build(cls, flavour: str, locale_data: LocaleData) -> "FlavourFormatter":
        messages = locale_data.flavours[flavour]
        long_messages = locale_data.flavour(FALLBACK_FLAVOUR)
        units = [unit for unit in messages if unit != NOW]
        # "now" has its own messages, which not every locale has. Without
        # them, long.second.current stands in.
        if has_now_message(messages, long_messages, locale_data.now):
            units.append(NOW)
        return cls(
            flavour,
            messages,
            long_messages,
            locale_data.now,
            tuple(units),
            locale_data.quantify,
        )

    def resolve_now(self, future: bool) -> str | None:
        return resolve_now(future, self.messages, self.long_messages, self.now_message)


def get_date_and_time(value: Any) -> tuple[float, date | None]:
    """Normalize format() input.

    Args:
        value: A datetime, a date (local midnight), an object with a
            timestamp() method, or epoch milliseconds.

    Returns:
        Tuple of (epoch milliseconds, date object or None).

    Raises:
        UnsupportedInputError: For anything else.

    """
    if isinstance(value, datetime):
        return value.timestamp() * 1000, value
    if isinstance(value, date):
        return datetime.combine(value, time()).timestamp() * 1000, value
    # bool is an int, but True is no timestamp.
    if isinstance(value, int | float) and not isinstance(value, bool):
        return float(value), None
    # Mocked dates in tests aren't always real datetimes.
    timestamp = getattr(value, "timestamp", None)
    if callable(timestamp):
        return timestamp() * 1000, value
    raise UnsupportedInputError(value)


def get_available_units(
    allowed_units: Sequence[str] | None,
    flavour_units: Sequence[str],
) -> list[str]:
    """Units the style may use: the flavour's units, filtered by the style's."""
    if allowed_units is None:
        return list(flavour_units)
    return [unit for unit in allowed_units if unit in flavour_units]


class TimeAgo:
    """Formats instants relative to now, in one negotiated locale."""

    def __init__(
        self,
        locales: str | Sequence[str] = (),
        registry: LocaleRegistry | None = None,
        clock: Clock | None = None,
    ) -> None:
        """Initialize the formatter.

        Args:
            locales: Preferred locales, most preferred first. The
                registry's default locale is tried last.
            registry: Locale data registry. Defaults to the process-wide one.
            clock: Returns the current time in epoch milliseconds.

        Raises:
            LocaleNotFoundError: If none of the locales (nor the default
                locale) has been registered.

        """
        if isinstance(locales, str):
            locales = [locales]
        self.registry = registry or get_default_registry()
        self.locale = self.registry.choose(locales)
        self._clock = clock or _system_clock
        self._cache: Cache[FlavourFormatter] = Cache()
        self._cache_revision = self.registry.revision
        self._cache_lock = threading.Lock()
        self._format_number = functools.partial(format_number, tag=self.locale)

    def __repr__(self) -> str:
        return f"TimeAgo(locale={self.locale!r})"

    def _get_cache(self, revision: int) -> Cache[FlavourFormatter]:
        """Cache for formatters built from locale data of a registry revision.

        A newer revision replaces the cache. Data read at an older revision
        gets a throwaway cache, so it never fills the current one.
        """
        with self._cache_lock:
            if revision > self._cache_revision:
                logger.debug("Locale registry changed, dropping cached flavours")
                self._cache = Cache()
                self._cache_revision = revision
            if revision == self._cache_revision:
                return self._cache
        return Cache()

    def get_flavour_formatter(self, flavours: Sequence[str]) -> FlavourFormatter | None:
        """Pick the first available flavour ("long" last) and build its formatter.

        Returns:
            Formatter of the chosen flavour, or None if the locale has
            none of the flavours.

        """
        revision, locale_data = self.registry.snapshot(self.locale)
        cache = self._get_cache(revision)
        if locale_data is None:
            return None

        for flavour in (*flavours, FALLBACK_FLAVOUR):
            if flavour in locale_data.flavours:
                return cache.get_or_create(
                    self.locale,
                    flavour,
                    lambda: FlavourFormatter.build(flavour, locale_data),
                )
        return None

    def format(
        self,
        value: Any,
        style: str | Style | Mapping[str, Any] | None = None,
        *,
        future: bool = False,
        now: float | None = None,
    ) -> str:
        """Format an instant relative to now.

        Args:
            value: A datetime or date, or epoch milliseconds.
            style: Style name, Style, or a mapping validated into a Style.
                None uses the default style ("approximate").
            future: Format a zero difference as future ("in 0 seconds")
                instead of past.
            now: Current time in epoch milliseconds. Defaults to the clock.

        Returns:
            The relative time string, or an empty string if the locale data
            has no suitable unit for the elapsed time.

        Raises:
            UnsupportedInputError: If value is neither a date nor a number.
            StyleNotFoundError: If style names an unregistered style.

        """
        style = resolve_style(style)
        time_ms, date_value = get_date_and_time(value)
        formatter = self.get_flavour_formatter(style.flavour)

        if now is None:
            now = self._clock()
        elapsed = (now - time_ms) / 1000

        if style.custom is not None:
            result = style.custom.attempt_format(
                FormatContext(
                    now=now,
                    date=date_value,
                    time=time_ms,
                    elapsed=elapsed,
                    locale=self.locale,
                )
            )
            if result is not None:
                return result

        try:
            return self._format(formatter, style, elapsed, now, time_ms, date_value, future)
        except NoUnitsAvailableError as e:
            logger.warning("%s", e)
            return ""
        except NoStepSelectedError as e:
            logger.debug("%s", e)
            return ""

    def _format(
        self,
        formatter: FlavourFormatter | None,
        style: Style,
        elapsed: float,
        now: float,
        time_ms: float,
        date_value: date | None,
        future: bool,
    ) -> str:
        if formatter is None:
            raise NoUnitsAvailableError(
                f'None of the flavours "{", ".join(style.flavour) or FALLBACK_FLAVOUR}" '
                f'were found in locale data for "{self.locale}"'
            )

        units = get_available_units(style.units, formatter.units)
        if not units:
            requested = style.units if style.units is not None else formatter.units
            raise NoUnitsAvailableError(
                f'Units "{", ".join(requested)}" were not found in locale data '
                f'for "{self.locale}" ({formatter.flavour})'
            )

        step = grade(elapsed, now, units, style.gradation)
        # E.g. when "now" isn't available and "second" has a threshold of 0.5.
        if step is None:
            raise NoStepSelectedError(f"No gradation step for {elapsed}s in units {units}")

        if step.formatter is not None:
            result = step.formatter.attempt_format(
                date_value if date_value is not None else time_ms,
                self.locale,
            )
            if result is not None:
                return result
            if step.unit is None:
                raise NoStepSelectedError(f"Step formatter {step.formatter!r} produced nothing")

        if step.unit == NOW:
            return formatter.resolve_now(future or elapsed < 0) or ""

        amount = round_half_up(step_amount(abs(elapsed), step))
        # Past instants have a positive elapsed time and a negative value.
        signed_amount = -amount if elapsed > 0 else amount

        return format_value(
            formatter.messages[step.unit],
            signed_amount,
            format_number=self._format_number,
            future=future,
            quantify=formatter.quantify or get_quantify(self.locale),
        )
