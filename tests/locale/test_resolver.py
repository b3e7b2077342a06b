"""Tests for message resolution."""

import pytest

from time_ago.locale import (
    DirectionalMessage,
    LiteralMessage,
    PluralMessage,
    format_value,
    has_now_message,
    parse_message,
    resolve_now,
    resolve_template,
)
from time_ago.locale.resolver import get_direction


def _quantify(n: float) -> str:
    return "one" if n == 1 else "other"


HOUR = parse_message(
    {
        "current": "this hour",
        "past": {"one": "{0} hour ago", "other": "{0} hours ago"},
        "future": {"one": "in {0} hour", "other": "in {0} hours"},
    }
)
LONG = {
    "hour": HOUR,
    "second": parse_message({"current": "now", "past": "{0}s ago", "future": "in {0}s"}),
}


class TestGetDirection:
    """Test get_direction function."""

    @pytest.mark.parametrize(
        ("value", "future", "expected"),
        [(-1, False, "past"), (2, False, "future"), (0, False, "past"), (0, True, "future")],
    )
    def test_direction(self, value: float, future: bool, expected: str) -> None:
        """Sign decides, zero follows the future flag."""
        assert get_direction(value, future) == expected


class TestResolveTemplate:
    """Test resolve_template function."""

    def test_past_and_future_plural(self) -> None:
        """Sign picks the branch, quantify picks the form."""
        assert resolve_template(HOUR, -1, quantify=_quantify) == "{0} hour ago"
        assert resolve_template(HOUR, -3, quantify=_quantify) == "{0} hours ago"
        assert resolve_template(HOUR, 1, quantify=_quantify) == "in {0} hour"

    def test_without_quantify_uses_other(self) -> None:
        """No plural classifier: "other"."""
        assert resolve_template(HOUR, -1) == "{0} hours ago"

    def test_literal(self) -> None:
        """Literals ignore sign and count."""
        assert resolve_template(LiteralMessage("{0}h"), -5) == "{0}h"
        assert resolve_template(LiteralMessage("{0}h"), 5) == "{0}h"

    def test_symmetric_plural(self) -> None:
        """Plural messages are the same in both directions."""
        message = PluralMessage({"one": "{0} day", "other": "{0} days"})
        assert resolve_template(message, -2, quantify=_quantify) == "{0} days"
        assert resolve_template(message, 1, quantify=_quantify) == "{0} day"

    def test_missing_branch_uses_current(self) -> None:
        """A unit with only "current" returns it."""
        assert resolve_template(DirectionalMessage(current="now"), -3) == "now"

    def test_quantify_gets_magnitude(self) -> None:
        """Plural rules are applied to the absolute value."""
        seen: list[float] = []

        def quantify(n: float) -> str:
            seen.append(n)
            return "other"

        resolve_template(HOUR, -4, quantify=quantify)
        assert seen == [4]


class TestFormatValue:
    """Test format_value function."""

    def test_substitutes_magnitude(self) -> None:
        """The placeholder gets the unsigned number."""
        assert format_value(HOUR, -3, quantify=_quantify) == "3 hours ago"
        assert format_value(HOUR, 3, quantify=_quantify) == "in 3 hours"

    def test_custom_number_format(self) -> None:
        """Numbers go through the given formatter."""
        assert format_value(HOUR, -1000, format_number=lambda n: f"{n:,}") == "1,000 hours ago"

    def test_zero_follows_future_flag(self) -> None:
        """Zero is past unless future is set."""
        assert format_value(HOUR, 0) == "0 hours ago"
        assert format_value(HOUR, 0, future=True) == "in 0 hours"

    def test_template_without_placeholder(self) -> None:
        """Templates without "{0}" are returned as-is."""
        assert format_value(LiteralMessage("a while ago"), -7) == "a while ago"


class TestNow:
    """Test "now" resolution."""

    NOW = parse_message({"current": "now", "past": "just now", "future": "in a moment"})

    def test_locale_wide_now(self) -> None:
        """The locale-wide message distinguishes past and future."""
        assert resolve_now(False, LONG, LONG, self.NOW) == "just now"
        assert resolve_now(True, LONG, LONG, self.NOW) == "in a moment"

    def test_flavour_now_wins(self) -> None:
        """A flavour's own "now" beats the locale-wide one."""
        flavour = {"now": LiteralMessage("now!")}
        assert resolve_now(False, flavour, LONG, self.NOW) == "now!"

    def test_plural_now_uses_other(self) -> None:
        """"now" never pluralizes."""
        flavour = {"now": PluralMessage({"one": "x", "other": "moments ago"})}
        assert resolve_now(False, flavour, LONG, None) == "moments ago"

    def test_falls_back_to_long_second_current(self) -> None:
        """Without "now" messages, long.second.current is used."""
        assert resolve_now(False, {}, LONG, None) == "now"
        assert resolve_now(True, {}, LONG, None) == "now"

    def test_none_when_unavailable(self) -> None:
        """No "now" anywhere."""
        assert resolve_now(False, {}, {"hour": HOUR}, None) is None
        assert resolve_now(False, {}, None, None) is None

    def test_has_now_message(self) -> None:
        """has_now_message mirrors resolve_now availability."""
        assert has_now_message({}, LONG, None)
        assert has_now_message({}, None, self.NOW)
        assert not has_now_message({}, {"hour": HOUR}, None)
