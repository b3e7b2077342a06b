"""Process-wide locale data registry.

The registry starts empty and only grows: registering a tag again replaces
its data, nothing is ever removed. Formatting reads it concurrently with
registration, so every access goes through a lock.

Usage:
    from time_ago.locale import add_locale, load_locale

    add_locale(load_locale("en"))
"""

import logging
import threading
from collections.abc import Iterable, Mapping
from typing import Any

from time_ago.locale.messages import LocaleData, QuantifyFunction, parse_locale_data
from time_ago.locale.negotiation import choose_locale, normalize_locale

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_LOCALE",
    "LocaleRegistry",
    "get_default_registry",
    "reset_default_registry",
    "add_locale",
    "get_default_locale",
    "set_default_locale",
]

DEFAULT_LOCALE = "en"


class LocaleRegistry:
    """Registry of parsed locale data, keyed by normalized locale tag."""

    def __init__(self, default_locale: str = DEFAULT_LOCALE) -> None:
        """Initialize an empty registry.

        Args:
            default_locale: Tag negotiation falls back to when none of the
                preferred locales is registered.

        """
        self._lock = threading.RLock()
        self._locales: dict[str, LocaleData] = {}
        self._default_locale = normalize_locale(default_locale)
        self._revision = 0

    @property
    def default_locale(self) -> str:
        return self._default_locale

    @default_locale.setter
    def default_locale(self, tag: str) -> None:
        with self._lock:
            self._default_locale = normalize_locale(tag)

    @property
    def revision(self) -> int:
        """Incremented on every registration. Used to invalidate caches."""
        with self._lock:
            return self._revision

    def add(
        self,
        data: LocaleData | Mapping[str, Any],
        quantify: QuantifyFunction | None = None,
    ) -> LocaleData:
        """Register locale data. The last registration for a tag wins.

        Args:
            data: Parsed locale data or a raw mapping (see parse_locale_data).
            quantify: Plural classifier, overriding the data's own.

        Returns:
            The registered data.

        Raises:
            LocaleDataError: If a raw mapping is malformed.

        """
        if not isinstance(data, LocaleData):
            data = parse_locale_data(data, quantify=quantify)
        elif quantify is not None:
            data = LocaleData(data.locale, data.flavours, data.now, quantify)

        tag = normalize_locale(data.locale)
        with self._lock:
            replaced = tag in self._locales
            self._locales[tag] = data
            self._revision += 1
        logger.debug("%s locale %s", "Replaced" if replaced else "Registered", tag)
        return data

    def get(self, tag: str) -> LocaleData | None:
        with self._lock:
            return self._locales.get(normalize_locale(tag))

    def snapshot(self, tag: str) -> tuple[int, LocaleData | None]:
        """Get the current revision and a locale's data in one consistent read.

        Returns:
            Tuple of (revision, locale data or None).

        """
        with self._lock:
            return self._revision, self._locales.get(normalize_locale(tag))

    def has(self, tag: str) -> bool:
        with self._lock:
            return normalize_locale(tag) in self._locales

    def tags(self) -> list[str]:
        """Registered locale tags, sorted."""
        with self._lock:
            return sorted(self._locales)

    def choose(self, locales: Iterable[str]) -> str:
        """Negotiate the best registered locale, falling back to the default.

        Raises:
            LocaleNotFoundError: If neither a preferred locale nor the
                default locale is registered.

        """
        return choose_locale([*locales, self.default_locale], self.has)


_default_registry: LocaleRegistry | None = None
_registry_lock = threading.Lock()


def get_default_registry() -> LocaleRegistry:
    """Get the process-wide registry, creating it on first use."""
    global _default_registry
    if _default_registry is None:
        with _registry_lock:
            if _default_registry is None:
                _default_registry = LocaleRegistry()
    return _default_registry


def reset_default_registry() -> None:
    """Drop the process-wide registry. For tests."""
    global _default_registry
    with _registry_lock:
        _default_registry = None


def add_locale(
    data: LocaleData | Mapping[str, Any],
    quantify: QuantifyFunction | None = None,
) -> LocaleData:
    """Register locale data in the process-wide registry."""
    return get_default_registry().add(data, quantify=quantify)


def get_default_locale() -> str:
    return get_default_registry().default_locale


def set_default_locale(tag: str) -> None:
    get_default_registry().default_locale = tag
