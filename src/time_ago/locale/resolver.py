"""Resolve locale messages into final strings."""

from collections.abc import Callable

from time_ago.locale.messages import (
    DirectionalMessage,
    FlavourMessages,
    LiteralMessage,
    Message,
    PluralMessage,
    QuantifyFunction,
)
from time_ago.units import NOW

__all__ = [
    "PLACEHOLDER",
    "get_direction",
    "resolve_template",
    "format_value",
    "get_now_message",
    "has_now_message",
    "resolve_now",
]

PLACEHOLDER = "{0}"


def get_direction(value: float, future: bool = False) -> str:
    """Pick "past" or "future" for a signed value.

    Zero has no sign of its own, so the `future` flag decides (past by
    default).
    """
    if value == 0:
        return "future" if future else "past"
    return "past" if value < 0 else "future"


def resolve_template(
    message: Message,
    value: float,
    future: bool = False,
    quantify: QuantifyFunction | None = None,
) -> str:
    """Find the template for a value.

    Args:
        message: Messages of one unit.
        value: Signed quantity (negative for past).
        future: How to treat zero.
        quantify: Plural classifier. Without one, "other" is used.

    Returns:
        Template containing the "{0}" placeholder (or none at all).

    Examples:
        >>> hour = DirectionalMessage(
        ...     past=PluralMessage({"one": "{0} hour ago", "other": "{0} hours ago"}),
        ...     future=LiteralMessage("in {0} h"),
        ... )
        >>> resolve_template(hour, -1, quantify=lambda n: "one" if n == 1 else "other")
        '{0} hour ago'
        >>> resolve_template(hour, 3)
        'in {0} h'

    """
    if isinstance(message, LiteralMessage):
        return message.template

    branch: Message | None = message
    if isinstance(message, DirectionalMessage):
        branch = message.branch(get_direction(value, future))
        if branch is None:
            # Parsing guarantees "current" in this case.
            return message.current or ""

    if isinstance(branch, LiteralMessage):
        return branch.template

    assert isinstance(branch, PluralMessage)
    category = quantify(abs(value)) if quantify else None
    return branch.select(category)


def format_value(
    message: Message,
    value: float,
    format_number: Callable[[float], str] = str,
    future: bool = False,
    quantify: QuantifyFunction | None = None,
) -> str:
    """Resolve the template for a value and substitute the formatted number."""
    template = resolve_template(message, value, future=future, quantify=quantify)
    return template.replace(PLACEHOLDER, format_number(abs(value)))


def get_now_message(
    flavour_messages: FlavourMessages,
    now_message: Message | None,
) -> Message | None:
    """Dedicated "now" message: the flavour's own, then the locale-wide one."""
    return flavour_messages.get(NOW) or now_message


def _second_current(long_messages: FlavourMessages | None) -> str | None:
    if long_messages is None:
        return None
    second = long_messages.get("second")
    if isinstance(second, DirectionalMessage):
        return second.current
    return None


def has_now_message(
    flavour_messages: FlavourMessages,
    long_messages: FlavourMessages | None,
    now_message: Message | None,
) -> bool:
    """Whether "now" can be rendered at all. Pure query."""
    if get_now_message(flavour_messages, now_message) is not None:
        return True
    return _second_current(long_messages) is not None


def resolve_now(
    future: bool,
    flavour_messages: FlavourMessages,
    long_messages: FlavourMessages | None,
    now_message: Message | None,
) -> str | None:
    """Render the "now" pseudo-unit.

    "Now" is a moment, so only past ("just now") and future ("in a moment")
    are told apart, and it never pluralizes. Without any dedicated "now"
    message, the long flavour's ``second.current`` ("now") is used.

    Args:
        future: Whether the moment is in the future.
        flavour_messages: Messages of the chosen flavour.
        long_messages: Messages of the "long" flavour.
        now_message: Locale-wide "now" message.

    Returns:
        The "now" string, or None if the locale has none.

    """
    message = get_now_message(flavour_messages, now_message)
    if message is None:
        return _second_current(long_messages)

    if isinstance(message, LiteralMessage):
        return message.template
    if isinstance(message, PluralMessage):
        return message.select(None)

    branch = message.branch("future" if future else "past")
    if branch is None:
        return message.current
    if isinstance(branch, LiteralMessage):
        return branch.template
    return branch.select(None)
