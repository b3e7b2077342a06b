"""Exception hierarchy for time-ago.

Only malformed call-site input escapes ``TimeAgo.format()``. Problems with
locale data surface when the data is registered, and gaps in otherwise valid
data degrade to an empty string at format time.
"""

__all__ = [
    "TimeAgoError",
    "UnsupportedInputError",
    "LocaleDataError",
    "LocaleNotFoundError",
    "StyleNotFoundError",
    "ConfigError",
    "NoUnitsAvailableError",
    "NoStepSelectedError",
]


class TimeAgoError(Exception):
    """Base class for all time-ago errors."""


class UnsupportedInputError(TimeAgoError, TypeError):
    """Value passed to format() is neither a date-like object nor epoch milliseconds."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Unsupported relative time formatter input: {type(value).__name__}, {value!r}"
        )


class LocaleDataError(TimeAgoError):
    """Locale message data is malformed.

    Attributes:
        locale: Locale tag being parsed (empty if unknown).
        path: Dotted path to the offending node, e.g. "long.hour.past".

    """

    def __init__(self, message: str, locale: str = "", path: str = "") -> None:
        self.locale = locale
        self.path = path
        if path:
            message = f"{message} (at {path})"
        super().__init__(message)


class LocaleNotFoundError(TimeAgoError):
    """None of the requested locales has been registered."""

    def __init__(self, locales: list[str]) -> None:
        self.locales = locales
        super().__init__(
            f"No locale data has been registered for any of the locales: {', '.join(locales)}"
        )


class StyleNotFoundError(TimeAgoError, KeyError):
    """Style name is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown relative time style: {self.name!r}"


class ConfigError(TimeAgoError):
    """Configuration could not be read or failed validation."""


class NoUnitsAvailableError(TimeAgoError):
    """Locale data has no units usable by the requested style.

    Recoverable: ``TimeAgo.format()`` logs it and returns an empty string.
    """


class NoStepSelectedError(TimeAgoError):
    """No gradation step applies to the elapsed time.

    Recoverable: ``TimeAgo.format()`` returns an empty string.
    """
