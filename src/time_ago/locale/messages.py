"""Locale message tree model.

A unit's messages come in three shapes, mirroring how CLDR-derived data is
stored once identical variants are collapsed:

- ``LiteralMessage``: a single template ("{0}m"), no variants at all.
- ``PluralMessage``: templates per plural category, same for past and
  future ({"one": "{0} minute", "other": "{0} minutes"}).
- ``DirectionalMessage``: separate ``past``/``future`` branches, each a
  literal or plural message, plus CLDR's "last/this/next" phrases.

``parse_locale_data()`` turns a plain mapping (as loaded from YAML) into
these frozen objects and validates that every unit resolves to some
template in both directions.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from time_ago.exceptions import LocaleDataError

logger = logging.getLogger(__name__)

__all__ = [
    "PLURAL_CATEGORIES",
    "LiteralMessage",
    "PluralMessage",
    "DirectionalMessage",
    "Message",
    "FlavourMessages",
    "LocaleData",
    "QuantifyFunction",
    "parse_message",
    "parse_locale_data",
]

PLURAL_CATEGORIES: tuple[str, ...] = ("zero", "one", "two", "few", "many", "other")

DIRECTIONS: tuple[str, ...] = ("past", "future")

# CLDR "last year" / "this year" / "next year" phrases.
RELATIVE_PHRASES: tuple[str, ...] = ("previous", "current", "next")

# Top-level keys of locale data that are not flavours.
RESERVED_KEYS: frozenset[str] = frozenset({"locale", "now", "quantify"})

QuantifyFunction = Callable[[float], str]


@dataclass(frozen=True)
class LiteralMessage:
    """Template with no past/future or plural variants."""

    template: str


@dataclass(frozen=True)
class PluralMessage:
    """Templates keyed by plural category. "other" is always present."""

    forms: Mapping[str, str]

    def select(self, category: str | None) -> str:
        """Template for a plural category, falling back to "other"."""
        if category and category in self.forms:
            return self.forms[category]
        return self.forms["other"]


BranchMessage = LiteralMessage | PluralMessage


@dataclass(frozen=True)
class DirectionalMessage:
    """Unit messages split by direction.

    Attributes:
        past: Templates for past instants, or None if same as `symmetric`.
        future: Templates for future instants, or None if same as `symmetric`.
        symmetric: Plural forms given directly on the unit, shared by both
            directions when a branch is absent.
        previous: "last year", "yesterday".
        current: "this year", "now".
        next: "next year", "tomorrow".

    """

    past: BranchMessage | None = None
    future: BranchMessage | None = None
    symmetric: PluralMessage | None = None
    previous: str | None = None
    current: str | None = None
    next: str | None = None

    def branch(self, direction: str) -> BranchMessage | None:
        """Messages for "past" or "future", falling back to the symmetric forms."""
        selected = self.past if direction == "past" else self.future
        return selected if selected is not None else self.symmetric


Message = LiteralMessage | PluralMessage | DirectionalMessage
FlavourMessages = Mapping[str, Message]


@dataclass(frozen=True)
class LocaleData:
    """Parsed messages for one locale.

    Attributes:
        locale: Locale tag ("en", "de-AT").
        flavours: Flavour name to unit messages ("long" -> "hour" -> ...).
        now: Locale-wide "now" message, shared by all flavours.
        quantify: Plural classifier. None means "use CLDR rules via Babel".

    """

    locale: str
    flavours: Mapping[str, FlavourMessages]
    now: Message | None = None
    quantify: QuantifyFunction | None = field(default=None, compare=False)

    def flavour(self, name: str) -> FlavourMessages | None:
        return self.flavours.get(name)


def _parse_plural(data: Mapping[str, Any], path: str, locale: str) -> PluralMessage:
    forms: dict[str, str] = {}
    for category in PLURAL_CATEGORIES:
        value = data.get(category)
        if value is None:
            continue
        if not isinstance(value, str):
            raise LocaleDataError(
                f"Plural form must be a string, got {type(value).__name__}",
                locale,
                f"{path}.{category}",
            )
        forms[category] = value
    if "other" not in forms:
        raise LocaleDataError('Plural forms must include "other"', locale, path)
    return PluralMessage(MappingProxyType(forms))


def _parse_branch(value: Any, path: str, locale: str) -> BranchMessage:
    if isinstance(value, str):
        return LiteralMessage(value)
    if isinstance(value, Mapping):
        return _parse_plural(value, path, locale)
    raise LocaleDataError(
        f"Expected a string or plural forms, got {type(value).__name__}", locale, path
    )


def parse_message(value: Any, path: str = "", locale: str = "") -> Message:
    """Parse one unit's messages.

    Args:
        value: A template string, a mapping of plural forms, or a mapping
            with "past"/"future" branches.
        path: Location used in error messages.
        locale: Locale tag used in error messages.

    Returns:
        The matching message variant.

    Raises:
        LocaleDataError: If the value has an unknown shape or some
            direction would not resolve to a template.

    """
    if isinstance(value, str):
        return LiteralMessage(value)
    if not isinstance(value, Mapping):
        raise LocaleDataError(
            f"Expected a string or a mapping, got {type(value).__name__}", locale, path
        )

    directional_keys = set(DIRECTIONS) | set(RELATIVE_PHRASES)
    if not directional_keys.intersection(value):
        return _parse_plural(value, path, locale)

    past = value.get("past")
    future = value.get("future")
    symmetric = None
    if any(category in value for category in PLURAL_CATEGORIES):
        symmetric = _parse_plural(value, path, locale)

    message = DirectionalMessage(
        past=_parse_branch(past, f"{path}.past", locale) if past is not None else None,
        future=_parse_branch(future, f"{path}.future", locale) if future is not None else None,
        symmetric=symmetric,
        previous=value.get("previous"),
        current=value.get("current"),
        next=value.get("next"),
    )
    for direction in DIRECTIONS:
        if message.branch(direction) is None and message.current is None:
            raise LocaleDataError(f'No "{direction}" messages', locale, path)
    return message


def parse_locale_data(
    data: Mapping[str, Any],
    quantify: QuantifyFunction | None = None,
) -> LocaleData:
    """Parse a locale data mapping.

    Expected shape::

        locale: en
        now: {past: just now, future: in a moment, current: now}
        long:
          hour:
            past: {one: "{0} hour ago", other: "{0} hours ago"}
            future: {one: "in {0} hour", other: "in {0} hours"}
        mini-time:
          hour: "{0}h"

    Args:
        data: Locale data mapping.
        quantify: Plural classifier overriding the one in `data`.

    Returns:
        Parsed, immutable locale data.

    Raises:
        LocaleDataError: If the data is malformed.

    """
    locale = data.get("locale")
    if not isinstance(locale, str) or not locale:
        raise LocaleDataError('Locale data must have a "locale" tag')

    flavours: dict[str, FlavourMessages] = {}
    for name, units in data.items():
        if name in RESERVED_KEYS:
            continue
        if not isinstance(units, Mapping):
            raise LocaleDataError(
                f"Flavour must be a mapping of units, got {type(units).__name__}", locale, name
            )
        flavours[name] = MappingProxyType(
            {unit: parse_message(value, f"{name}.{unit}", locale) for unit, value in units.items()}
        )

    now = data.get("now")
    quantify = quantify or data.get("quantify")
    if quantify is not None and not callable(quantify):
        raise LocaleDataError('"quantify" must be callable', locale, "quantify")

    logger.debug("Parsed locale %s with flavours %s", locale, sorted(flavours))
    return LocaleData(
        locale=locale,
        flavours=MappingProxyType(flavours),
        now=parse_message(now, "now", locale) if now is not None else None,
        quantify=quantify,
    )
