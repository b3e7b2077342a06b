"""Locale negotiation."""

from collections.abc import Callable, Iterable

from time_ago.exceptions import LocaleNotFoundError

__all__ = ["normalize_locale", "choose_locale"]


def normalize_locale(tag: str) -> str:
    """Normalize a locale tag to hyphen-separated form ("en_US" -> "en-US")."""
    return tag.strip().replace("_", "-")


def choose_locale(
    locales: Iterable[str],
    is_available: Callable[[str], bool],
) -> str:
    """Choose the best available locale.

    Tries each preferred tag in order, first as-is, then with trailing
    subtags removed ("de-AT-1996" -> "de-AT" -> "de").

    Args:
        locales: Preferred locale tags, most preferred first.
        is_available: Whether locale data has been registered for a tag.

    Returns:
        The first available tag.

    Raises:
        LocaleNotFoundError: If none of the locales is available.

    Examples:
        >>> choose_locale(["fr-CA", "de-AT"], lambda tag: tag in {"de", "en"})
        'de'

    """
    tried: list[str] = []
    for locale in locales:
        locale = normalize_locale(locale)
        if not locale:
            continue
        tried.append(locale)
        parts = locale.split("-")
        while parts:
            candidate = "-".join(parts)
            if is_available(candidate):
                return candidate
            parts.pop()
    raise LocaleNotFoundError(tried)
