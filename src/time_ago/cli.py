"""Command line interface for time-ago.

Example:
    $ time-ago format 2024-03-01T12:00:00 --locale de
    $ time-ago format 1700000000000 --style twitter --now 1700000300000
    $ time-ago locales
    $ time-ago styles
"""

import logging
from datetime import datetime
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from time_ago.config import TimeAgoConfig, apply_config, load_config
from time_ago.exceptions import ConfigError, TimeAgoError
from time_ago.formatter import TimeAgo
from time_ago.locale import bundled_locales, get_default_registry, load_locale, normalize_locale
from time_ago.styles import get_default_style_name, get_style, style_names

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2

app = typer.Typer(
    name="time-ago",
    help="Format timestamps as relative time (\"3 hours ago\", \"in 2 days\")",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _error(message: str) -> None:
    err_console.print(f"[red]Error:[/red] {message}")


def _parse_value(value: str) -> datetime | float:
    """Parse epoch milliseconds or an ISO-8601 datetime.

    Values with date or time separators ("2024-03-01", "T12:00") are read
    as ISO-8601 first. A bare number, even "2024", is epoch milliseconds.

    Raises:
        typer.BadParameter: If the value is neither.

    """
    looks_like_date = "T" in value or ":" in value or "-" in value[1:]
    parsers = (datetime.fromisoformat, float) if looks_like_date else (float, datetime.fromisoformat)
    for parser in parsers:
        try:
            return parser(value)
        except ValueError:
            continue
    raise typer.BadParameter(
        f"Expected epoch milliseconds or an ISO-8601 datetime, got {value!r}"
    )


def _load_settings(config: Path | None) -> TimeAgoConfig:
    try:
        settings = load_config(config) if config is not None else TimeAgoConfig()
        apply_config(settings)
    except ConfigError as e:
        _error(str(e))
        raise typer.Exit(code=EXIT_CONFIG_ERROR) from None
    return settings


@app.command(name="format")
def format_command(
    value: str = typer.Argument(
        ...,
        help="Epoch milliseconds (any bare number, e.g. 2024) or ISO-8601 datetime (2024-03-01)",
    ),
    locale: list[str] = typer.Option(
        [],
        "--locale",
        "-l",
        help="Preferred locale (repeatable, most preferred first)",
    ),
    style: str | None = typer.Option(None, "--style", "-s", help="Style name"),
    future: bool = typer.Option(False, "--future", help="Format zero difference as future"),
    now: float | None = typer.Option(None, "--now", help="Current time in epoch milliseconds"),
    config: Path | None = typer.Option(None, "--config", "-c", help="Path to config YAML"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Format a timestamp relative to now."""
    _setup_logging(verbose)
    parsed = _parse_value(value)
    _load_settings(config)

    # Register requested bundled locales on demand.
    registry = get_default_registry()
    available = set(bundled_locales())
    for tag in locale:
        base = normalize_locale(tag).split("-")[0]
        if base in available and not registry.has(base):
            registry.add(load_locale(base))

    try:
        formatter = TimeAgo(locale)
        result = formatter.format(parsed, style, future=future, now=now)
    except TimeAgoError as e:
        _error(str(e))
        raise typer.Exit(code=EXIT_ERROR) from None

    logger.debug("Formatted %r in %s: %r", value, formatter.locale, result)
    console.print(result, markup=False, highlight=False)


@app.command(name="locales")
def locales_command() -> None:
    """List bundled locales and their label flavours."""
    table = Table(title="Bundled locales")
    table.add_column("Locale", style="cyan")
    table.add_column("Flavours")
    table.add_column("Now", justify="center")

    for tag in bundled_locales():
        data = load_locale(tag)
        table.add_row(
            tag,
            ", ".join(sorted(data.flavours)),
            "[green]yes[/green]" if data.now is not None else "[yellow]fallback[/yellow]",
        )
    console.print(table)


@app.command(name="styles")
def styles_command(
    config: Path | None = typer.Option(None, "--config", "-c", help="Path to config YAML"),
) -> None:
    """List registered styles."""
    if config is not None:
        _load_settings(config)

    default = get_default_style_name()
    table = Table(title="Styles")
    table.add_column("Name", style="cyan")
    table.add_column("Flavours")
    table.add_column("Units")
    for name in style_names():
        style = get_style(name)
        label = f"{name} [dim](default)[/dim]" if name == default else name
        table.add_row(
            label,
            ", ".join(style.flavour) or "long",
            ", ".join(style.units) if style.units is not None else "all",
        )
    console.print(table)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
