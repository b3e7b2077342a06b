"""CLDR services backed by Babel: plural rules, numbers and dates.

Locale message data only carries templates. Plural classification and
number rendering come from Babel's CLDR data, keyed by the same tags.
"""

import functools
import logging
from datetime import date, datetime

from babel import Locale
from babel.core import UnknownLocaleError
from babel.dates import format_skeleton
from babel.numbers import format_decimal

from time_ago.locale.messages import QuantifyFunction
from time_ago.locale.negotiation import normalize_locale

logger = logging.getLogger(__name__)

__all__ = ["get_babel_locale", "get_quantify", "format_number", "format_date_skeleton"]


@functools.lru_cache(maxsize=128)
def get_babel_locale(tag: str) -> Locale | None:
    """Parse a locale tag into a Babel Locale.

    Args:
        tag: Locale tag, hyphen or underscore separated.

    Returns:
        Babel Locale, or None if Babel has no data for the tag.

    """
    try:
        return Locale.parse(normalize_locale(tag), sep="-")
    except (UnknownLocaleError, ValueError) as e:
        logger.debug("Babel has no data for locale %s: %s", tag, e)
        return None


def get_quantify(tag: str) -> QuantifyFunction | None:
    """CLDR plural classifier for a locale, or None if unknown."""
    locale = get_babel_locale(tag)
    if locale is None:
        return None
    return locale.plural_form


def format_number(number: float, tag: str) -> str:
    """Format a number for a locale ("1,000" in en, "1.000" in de)."""
    locale = get_babel_locale(tag)
    if locale is None:
        return str(number)
    return format_decimal(number, locale=locale)


def format_date_skeleton(value: date | datetime, skeleton: str, tag: str) -> str | None:
    """Format a date with a CLDR skeleton ("MMMd" -> "Mar 3" in en).

    Returns:
        Formatted date, or None if Babel has no data for the locale.

    """
    locale = get_babel_locale(tag)
    if locale is None:
        return None
    return format_skeleton(skeleton, value, locale=locale)
