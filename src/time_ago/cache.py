"""Two-level memo for objects that are expensive to build.

Purely a performance optimization: removing it changes no output.
"""

import threading
from collections.abc import Callable
from typing import Generic, TypeVar

__all__ = ["Cache"]

T = TypeVar("T")


class Cache(Generic[T]):
    """Lazily populated cache keyed by (locale, flavour). No eviction.

    Example:
        >>> cache: Cache[str] = Cache()
        >>> cache.get_or_create("en", "long", lambda: "built")
        'built'
        >>> cache.get("en", "long")
        'built'

    """

    def __init__(self) -> None:
        self._entries: dict[str, dict[str, T]] = {}
        self._lock = threading.Lock()

    def get(self, locale: str, flavour: str) -> T | None:
        return self._entries.get(locale, {}).get(flavour)

    def put(self, locale: str, flavour: str, value: T) -> T:
        with self._lock:
            self._entries.setdefault(locale, {})[flavour] = value
        return value

    def get_or_create(self, locale: str, flavour: str, factory: Callable[[], T]) -> T:
        """Get a cached value or build and cache it.

        Thread-safe implementation using double-checked locking pattern.
        """
        # Fast path: check cache without lock
        value = self.get(locale, flavour)
        if value is not None:
            return value

        with self._lock:
            # Double-check after acquiring lock
            value = self._entries.get(locale, {}).get(flavour)
            if value is None:
                value = factory()
                self._entries.setdefault(locale, {})[flavour] = value
            return value

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return sum(len(flavours) for flavours in self._entries.values())
