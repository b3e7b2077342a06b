"""time-ago: international relative date/time formatting.

Formats instants as "3 hours ago" or "in 2 days" using CLDR-derived locale
messages, plural rules and configurable time scales ("styles").

Example:
    >>> from time_ago import TimeAgo, add_locale, load_locale
    >>> _ = add_locale(load_locale("en"))
    >>> TimeAgo("en").format(0, now=3 * 60 * 60 * 1000)
    '3 hours ago'

"""

from time_ago.exceptions import (
    ConfigError,
    LocaleDataError,
    LocaleNotFoundError,
    StyleNotFoundError,
    TimeAgoError,
    UnsupportedInputError,
)
from time_ago.formatter import TimeAgo
from time_ago.gradation import CANONICAL, CONVENIENT, Step
from time_ago.locale import (
    LocaleRegistry,
    add_locale,
    bundled_locales,
    get_default_locale,
    load_locale,
    load_locale_file,
    set_default_locale,
)
from time_ago.styles import Style, get_style, register_style
from time_ago.types import FormatContext

__all__ = [
    "CANONICAL",
    "CONVENIENT",
    "ConfigError",
    "FormatContext",
    "LocaleDataError",
    "LocaleNotFoundError",
    "LocaleRegistry",
    "Step",
    "Style",
    "StyleNotFoundError",
    "TimeAgo",
    "TimeAgoError",
    "UnsupportedInputError",
    "add_locale",
    "bundled_locales",
    "get_default_locale",
    "get_style",
    "load_locale",
    "load_locale_file",
    "register_style",
    "set_default_locale",
]
