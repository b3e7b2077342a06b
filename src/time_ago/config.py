"""Configuration for time-ago.

Configuration is plain YAML, validated by pydantic::

    default_locale: en
    locales: [en, de]
    locale_files: [./locales/uk.yaml]
    default_style: compact
    styles:
      compact:
        flavour: [short, narrow]
        gradation: canonical
        units: [now, minute, hour, day]

Usage:
    from time_ago.config import apply_config, load_config

    config = load_config(Path("time-ago.yaml"))
    apply_config(config)
"""

import logging
import threading
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Self

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
    model_validator,
)

from time_ago.exceptions import ConfigError, LocaleDataError, LocaleNotFoundError
from time_ago.locale import (
    DEFAULT_LOCALE,
    LocaleRegistry,
    get_default_registry,
    load_locale,
    load_locale_file,
)
from time_ago.styles import DEFAULT_STYLE, Style, register_style, set_default_style, style_names

logger = logging.getLogger(__name__)

__all__ = [
    "TimeAgoConfig",
    "load_config",
    "apply_config",
    "get_config",
    "_reset_config",
]


class TimeAgoConfig(BaseModel):
    """time-ago configuration.

    Attributes:
        default_locale: Locale used when none of the preferred ones is
            registered.
        locales: Bundled locales to register.
        locale_files: Extra locale data files (YAML) to register.
        default_style: Style used when format() gets none.
        styles: Additional named styles.

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    default_locale: str = DEFAULT_LOCALE
    locales: list[str] = Field(default_factory=lambda: [DEFAULT_LOCALE])
    locale_files: list[Path] = Field(default_factory=list)
    default_style: str = DEFAULT_STYLE
    styles: dict[str, Style] = Field(default_factory=dict)

    @field_validator("locales", "locale_files", "styles", mode="before")
    @classmethod
    def coerce_none_to_empty(cls, v: Any, info: ValidationInfo) -> Any:
        """YAML parses empty keys (all items commented out) as None."""
        if v is None:
            return {} if info.field_name == "styles" else []
        return v

    @field_validator("locales", mode="after")
    @classmethod
    def require_locale_tags(cls, v: list[str]) -> list[str]:
        if any(not tag.strip() for tag in v):
            raise ValueError("Locale tags must not be empty")
        return v

    @model_validator(mode="after")
    def validate_default_style(self) -> Self:
        """The default style must be built in or defined in `styles`."""
        if self.default_style not in self.styles and self.default_style not in style_names():
            raise ValueError(f"default_style {self.default_style!r} is not a known style")
        return self


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse config {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping, got {type(data).__name__}")

    # Locale files are relative to the config file.
    files = data.get("locale_files")
    if isinstance(files, list):
        data["locale_files"] = [path.parent / Path(str(item)) for item in files]
    return data


_config: TimeAgoConfig | None = None
_config_lock = threading.Lock()


def load_config(source: Path | str | Mapping[str, Any]) -> TimeAgoConfig:
    """Load and validate configuration, and keep it as the current config.

    Args:
        source: Path to a YAML file, or an already parsed mapping.

    Returns:
        Validated configuration.

    Raises:
        ConfigError: If the file can't be read or the config is invalid.

    """
    global _config
    data = _read_yaml(Path(source)) if isinstance(source, str | Path) else dict(source)

    try:
        config = TimeAgoConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid time-ago configuration: {e}") from e

    with _config_lock:
        _config = config
    return config


def get_config() -> TimeAgoConfig:
    """Current configuration, defaults if nothing was loaded."""
    global _config
    if _config is None:
        with _config_lock:
            if _config is None:
                _config = TimeAgoConfig()
    return _config


def _reset_config() -> None:
    """Reset the config singleton. For tests."""
    global _config
    with _config_lock:
        _config = None


def apply_config(config: TimeAgoConfig, registry: LocaleRegistry | None = None) -> LocaleRegistry:
    """Register the configured locales and styles.

    Args:
        config: Configuration to apply.
        registry: Registry to populate. Defaults to the process-wide one.

    Returns:
        The populated registry.

    Raises:
        ConfigError: If a configured locale can't be loaded.

    """
    registry = registry or get_default_registry()

    try:
        for tag in config.locales:
            registry.add(load_locale(tag))
        for path in config.locale_files:
            registry.add(load_locale_file(path))
    except (LocaleNotFoundError, LocaleDataError) as e:
        raise ConfigError(f"Failed to load configured locale: {e}") from e

    for name, style in config.styles.items():
        register_style(name, style)

    registry.default_locale = config.default_locale
    set_default_style(config.default_style)

    logger.info(
        "Applied config: locales=%s, default locale=%s, default style=%s",
        registry.tags(),
        config.default_locale,
        config.default_style,
    )
    return registry
