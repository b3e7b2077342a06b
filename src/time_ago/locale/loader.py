"""Load locale data from YAML files.

Bundled data lives in ``time_ago/locale/data/<tag>.yaml``. Extra locales
can be loaded from any file with the same layout.
"""

import logging
from importlib import resources
from pathlib import Path
from typing import Any

import yaml

from time_ago.exceptions import LocaleDataError, LocaleNotFoundError
from time_ago.locale.messages import LocaleData, parse_locale_data
from time_ago.locale.negotiation import normalize_locale

logger = logging.getLogger(__name__)

__all__ = ["bundled_locales", "load_locale", "load_locale_file"]

DATA_PACKAGE = "time_ago.locale"
DATA_DIR = "data"
DATA_SUFFIX = ".yaml"


def _data_dir() -> Any:
    return resources.files(DATA_PACKAGE).joinpath(DATA_DIR)


def bundled_locales() -> list[str]:
    """Tags of the locales shipped with the package, sorted."""
    return sorted(
        entry.name[: -len(DATA_SUFFIX)]
        for entry in _data_dir().iterdir()
        if entry.name.endswith(DATA_SUFFIX)
    )


def _parse_yaml(text: str, source: str) -> LocaleData:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise LocaleDataError(f"Failed to parse locale data {source}: {e}") from e
    if not isinstance(data, dict):
        raise LocaleDataError(f"Locale data {source} must be a mapping")
    return parse_locale_data(data)


def load_locale(tag: str) -> LocaleData:
    """Load a bundled locale.

    Args:
        tag: Locale tag ("en", "ru").

    Returns:
        Parsed locale data (not yet registered).

    Raises:
        LocaleNotFoundError: If no data is bundled for the tag.

    """
    tag = normalize_locale(tag)
    resource = _data_dir().joinpath(f"{tag}{DATA_SUFFIX}")
    if not resource.is_file():
        raise LocaleNotFoundError([tag])
    logger.debug("Loading bundled locale %s", tag)
    return _parse_yaml(resource.read_text(encoding="utf-8"), f"{tag}{DATA_SUFFIX}")


def load_locale_file(path: Path) -> LocaleData:
    """Load locale data from a YAML file.

    Raises:
        LocaleDataError: If the file can't be read or parsed.

    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise LocaleDataError(f"Failed to read locale data {path}: {e}") from e
    return _parse_yaml(text, str(path))
