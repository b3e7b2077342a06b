"""Relative time formatting styles.

A style bundles label flavours, a gradation and an optional unit allow-list.
Built-in styles: "approximate" (default), "approximate-time" (alias "time"),
"canonical" and "twitter".
"""

from time_ago.styles.builtin import (
    APPROXIMATE,
    APPROXIMATE_TIME,
    BUILTIN_STYLES,
    CANONICAL_STYLE,
    TWITTER,
)
from time_ago.styles.registry import (
    DEFAULT_STYLE,
    get_default_style_name,
    get_style,
    register_style,
    reset_styles,
    resolve_style,
    set_default_style,
    style_names,
)
from time_ago.styles.style import Style

__all__ = [
    "APPROXIMATE",
    "APPROXIMATE_TIME",
    "BUILTIN_STYLES",
    "CANONICAL_STYLE",
    "DEFAULT_STYLE",
    "TWITTER",
    "Style",
    "get_default_style_name",
    "get_style",
    "register_style",
    "reset_styles",
    "resolve_style",
    "set_default_style",
    "style_names",
]
