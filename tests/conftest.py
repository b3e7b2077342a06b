"""Pytest configuration and fixtures for time-ago tests."""

from pathlib import Path

import pytest

from time_ago.locale import LocaleRegistry, load_locale


@pytest.fixture(autouse=True)
def reset_default_registry_singleton():
    """Reset the process-wide locale registry before and after each test.

    Tests that need locales must register them explicitly (or use the
    `registry` fixture).
    """
    from time_ago.locale import reset_default_registry

    reset_default_registry()
    yield
    reset_default_registry()


@pytest.fixture(autouse=True)
def reset_styles_and_config():
    """Restore built-in styles, the default style and the config singleton."""
    from time_ago.config import _reset_config
    from time_ago.styles import reset_styles

    reset_styles()
    _reset_config()
    yield
    reset_styles()
    _reset_config()


@pytest.fixture
def registry() -> LocaleRegistry:
    """Fresh registry with every bundled locale."""
    registry = LocaleRegistry()
    for tag in ("en", "de", "ru", "ko"):
        registry.add(load_locale(tag))
    return registry


@pytest.fixture
def fixture_locale_file(tmp_path: Path) -> Path:
    """Minimal locale data file with a single flavour."""
    path = tmp_path / "xx.yaml"
    path.write_text(
        """\
locale: xx
long:
  minute:
    past: "{0} min back"
    future: "{0} min ahead"
  second:
    current: right now
    past: "{0} sec back"
    future: "{0} sec ahead"
""",
        encoding="utf-8",
    )
    return path
