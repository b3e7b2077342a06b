"""Time units and their lengths in seconds."""

__all__ = [
    "UNITS",
    "NOW",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "MONTH",
    "YEAR",
]

# Pseudo-unit for near-zero durations. Has no length of its own.
NOW = "now"

# Valid time units. All but "now" match the CLDR relative-time fields.
UNITS: tuple[str, ...] = (
    NOW,
    "second",
    "minute",
    "hour",
    "day",
    "week",
    "month",
    "quarter",
    "year",
)

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY

# Gregorian mean year: 146097 days per 400 years.
YEAR = (146097 / 400) * DAY
MONTH = YEAR / 12
