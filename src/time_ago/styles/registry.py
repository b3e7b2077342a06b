"""Named style registry."""

import logging
import threading
from collections.abc import Mapping
from typing import Any

from time_ago.exceptions import StyleNotFoundError
from time_ago.styles.builtin import BUILTIN_STYLES
from time_ago.styles.style import Style

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_STYLE",
    "get_style",
    "register_style",
    "style_names",
    "resolve_style",
    "get_default_style_name",
    "set_default_style",
    "reset_styles",
]

# For historical reasons "approximate" is the default style.
DEFAULT_STYLE = "approximate"

_styles: dict[str, Style] = dict(BUILTIN_STYLES)
_default_style = DEFAULT_STYLE
_styles_lock = threading.Lock()


def get_style(name: str) -> Style:
    """Get a registered style by name.

    Raises:
        StyleNotFoundError: If no style is registered under the name.

    """
    with _styles_lock:
        style = _styles.get(name)
    if style is None:
        raise StyleNotFoundError(name)
    return style


def register_style(name: str, style: Style | Mapping[str, Any]) -> Style:
    """Register a style under a name, replacing any previous one.

    Args:
        name: Style name ("compact", "twitter").
        style: Style or a mapping validated into one.

    Returns:
        The registered style.

    """
    if not isinstance(style, Style):
        style = Style.model_validate(style)
    with _styles_lock:
        replaced = name in _styles
        _styles[name] = style
    logger.debug("%s style %s", "Replaced" if replaced else "Registered", name)
    return style


def style_names() -> list[str]:
    with _styles_lock:
        return sorted(_styles)


def get_default_style_name() -> str:
    return _default_style


def set_default_style(name: str) -> None:
    """Set the style used when format() gets none.

    Raises:
        StyleNotFoundError: If the style isn't registered.

    """
    global _default_style
    get_style(name)
    _default_style = name


def resolve_style(style: str | Style | Mapping[str, Any] | None) -> Style:
    """Turn a style name, inline mapping or None into a Style."""
    if style is None:
        return get_style(_default_style)
    if isinstance(style, Style):
        return style
    if isinstance(style, str):
        return get_style(style)
    return Style.model_validate(style)


def reset_styles() -> None:
    """Restore built-in styles and the default style. For tests."""
    global _default_style
    with _styles_lock:
        _styles.clear()
        _styles.update(BUILTIN_STYLES)
        _default_style = DEFAULT_STYLE
