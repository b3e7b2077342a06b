"""Tests for locale data loading."""

from pathlib import Path

import pytest

from time_ago.exceptions import LocaleDataError, LocaleNotFoundError
from time_ago.locale import DirectionalMessage, LiteralMessage, bundled_locales, load_locale, load_locale_file


class TestBundledLocales:
    """Test bundled locale data."""

    def test_bundled_tags(self) -> None:
        """Shipped locales are listed sorted."""
        assert bundled_locales() == ["de", "en", "ko", "ru"]

    @pytest.mark.parametrize("tag", ["de", "en", "ko", "ru"])
    def test_every_bundled_locale_parses(self, tag: str) -> None:
        """Every shipped file is valid and has the long flavour."""
        data = load_locale(tag)
        assert data.locale == tag
        assert "long" in data.flavours
        assert "mini-time" in data.flavours

    def test_tiny_is_mini_time(self) -> None:
        """"tiny" is the legacy name of "mini-time"."""
        data = load_locale("en")
        assert data.flavour("tiny") == data.flavour("mini-time")
        assert data.flavour("tiny")["hour"] == LiteralMessage("{0}h")

    def test_now_messages(self) -> None:
        """en has a locale-wide "now", ko does not."""
        assert isinstance(load_locale("en").now, DirectionalMessage)
        assert load_locale("ko").now is None

    def test_load_normalizes_tag(self) -> None:
        """Surrounding whitespace is ignored."""
        assert load_locale(" en ").locale == "en"

    def test_unknown_locale(self) -> None:
        """Tags without bundled data raise."""
        with pytest.raises(LocaleNotFoundError):
            load_locale("fr")


class TestLoadLocaleFile:
    """Test load_locale_file function."""

    def test_load_file(self, fixture_locale_file: Path) -> None:
        """A YAML file with the bundled layout loads."""
        data = load_locale_file(fixture_locale_file)
        assert data.locale == "xx"
        second = data.flavour("long")["second"]
        assert isinstance(second, DirectionalMessage)
        assert second.current == "right now"

    def test_missing_file(self, tmp_path: Path) -> None:
        """Unreadable files raise LocaleDataError."""
        with pytest.raises(LocaleDataError, match="Failed to read"):
            load_locale_file(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """YAML syntax errors raise LocaleDataError."""
        path = tmp_path / "bad.yaml"
        path.write_text("locale: [unclosed\n", encoding="utf-8")
        with pytest.raises(LocaleDataError, match="Failed to parse"):
            load_locale_file(path)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        """Top level must be a mapping."""
        path = tmp_path / "list.yaml"
        path.write_text("- en\n- de\n", encoding="utf-8")
        with pytest.raises(LocaleDataError, match="must be a mapping"):
            load_locale_file(path)
