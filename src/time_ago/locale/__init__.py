"""Locale message data: model, registry, loading and resolution.

Example:
    >>> from time_ago.locale import LocaleRegistry, load_locale
    >>> registry = LocaleRegistry()
    >>> registry.add(load_locale("en")).locale
    'en'

"""

from time_ago.locale.loader import bundled_locales, load_locale, load_locale_file
from time_ago.locale.messages import (
    DirectionalMessage,
    FlavourMessages,
    LiteralMessage,
    LocaleData,
    Message,
    PluralMessage,
    parse_locale_data,
    parse_message,
)
from time_ago.locale.negotiation import choose_locale, normalize_locale
from time_ago.locale.registry import (
    DEFAULT_LOCALE,
    LocaleRegistry,
    add_locale,
    get_default_locale,
    get_default_registry,
    reset_default_registry,
    set_default_locale,
)
from time_ago.locale.resolver import format_value, has_now_message, resolve_now, resolve_template

__all__ = [
    "DEFAULT_LOCALE",
    "DirectionalMessage",
    "FlavourMessages",
    "LiteralMessage",
    "LocaleData",
    "LocaleRegistry",
    "Message",
    "PluralMessage",
    "add_locale",
    "bundled_locales",
    "choose_locale",
    "format_value",
    "get_default_locale",
    "get_default_registry",
    "has_now_message",
    "load_locale",
    "load_locale_file",
    "normalize_locale",
    "parse_locale_data",
    "parse_message",
    "reset_default_registry",
    "resolve_now",
    "resolve_template",
    "set_default_locale",
]
