"""Built-in styles."""

from datetime import date, datetime, time

from time_ago.gradation import CANONICAL, CONVENIENT, Step, get_step
from time_ago.locale.babel_support import format_date_skeleton
from time_ago.styles.style import Style
from time_ago.types import DateOrTime
from time_ago.units import HOUR, NOW

__all__ = [
    "APPROXIMATE",
    "APPROXIMATE_TIME",
    "CANONICAL_STYLE",
    "TWITTER",
    "BUILTIN_STYLES",
    "DateSkeletonFormatter",
    "year_boundary_threshold",
]

APPROXIMATE_UNITS = (NOW, "minute", "hour", "day", "week", "month", "year")

# "3 hours ago", "in 2 days". The default style.
APPROXIMATE = Style(
    flavour="long",
    gradation=CONVENIENT,
    units=APPROXIMATE_UNITS,
)

# "3 hours", "2 days": no "ago"/"in".
APPROXIMATE_TIME = Style(
    flavour="long-time",
    gradation=CONVENIENT,
    units=APPROXIMATE_UNITS,
)

# Every unit of the locale data, rounded to the nearest whole unit.
CANONICAL_STYLE = Style(
    flavour="long",
    gradation=CANONICAL,
)


def _to_datetime(value: DateOrTime) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if isinstance(value, int | float):
        return datetime.fromtimestamp(value / 1000)
    # Date-like objects exposing timestamp().
    return datetime.fromtimestamp(value.timestamp())


class DateSkeletonFormatter:
    """Step formatter rendering the instant as a date via a CLDR skeleton."""

    def __init__(self, skeleton: str) -> None:
        self.skeleton = skeleton

    def attempt_format(self, value: DateOrTime, locale: str) -> str | None:
        return format_date_skeleton(_to_datetime(value), self.skeleton, locale)

    def __repr__(self) -> str:
        return f"DateSkeletonFormatter({self.skeleton!r})"


def year_boundary_threshold(now: float, future: bool) -> float:
    """Seconds between now and the calendar year boundary (local time).

    For past instants that's the start of the current year, for future
    ones the start of the next year.
    """
    current = datetime.fromtimestamp(now / 1000)
    if future:
        boundary = datetime(current.year + 1, 1, 1)
        return boundary.timestamp() - now / 1000
    boundary = datetime(current.year, 1, 1)
    return now / 1000 - boundary.timestamp()


# "now", "12s", "5m", "3h", then "Mar 3", then "Mar 3, 2017".
TWITTER = Style(
    flavour=("mini-time", "short-time", "narrow", "short"),
    gradation=(
        get_step(CANONICAL, NOW),
        get_step(CANONICAL, "second"),
        get_step(CANONICAL, "minute"),
        get_step(CANONICAL, "hour"),
        # Same year: month and day.
        Step(threshold=23.5 * HOUR, formatter=DateSkeletonFormatter("MMMd")),
        # Another year: month, day and year.
        Step(threshold=year_boundary_threshold, formatter=DateSkeletonFormatter("yMMMd")),
    ),
    units=(NOW, "second", "minute", "hour"),
)

BUILTIN_STYLES: dict[str, Style] = {
    "approximate": APPROXIMATE,
    "approximate-time": APPROXIMATE_TIME,
    # Legacy name of "approximate-time".
    "time": APPROXIMATE_TIME,
    "canonical": CANONICAL_STYLE,
    "twitter": TWITTER,
}
