"""
CLI Main Application - Typer app entry point.

This module provides the main CLI application: global options, logging
and UI setup, and registration of the catalog, search, detail, links and
config commands.
"""

import sys
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

import typer
from rich.traceback import install as install_rich_traceback

from krx18 import __version__
from krx18.core import ConfigManager, create_default_config_files
from krx18.core.config_schemas import LoggingSettings
from krx18.core.exceptions import Krx18Error, ConfigurationError
from krx18.ui import (
    get_console,
    setup_console,
    ThemeName,
    set_theme,
    handle_error,
)
from krx18.cli.context import (
    get_config_manager,
    set_config_manager,
    set_base_url_override,
)
from krx18.cli.commands import catalog, config, detail, links, search


app = typer.Typer(
    name="krx18",
    help="🎬 Browse the krx18.com catalog from the command line",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)

# Set by the callback so command error panels can include tracebacks
_debug = False


def _version_callback(value: bool) -> None:
    if value:
        get_console().print(f"[bold blue]krx18[/bold blue] version [green]{__version__}[/green]")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version information and exit",
        callback=_version_callback,
        is_eager=True,
    ),
    config_dir: Optional[Path] = typer.Option(
        None,
        "--config-dir",
        help="Configuration directory path",
        file_okay=False,
        dir_okay=True,
    ),
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        help="Override the configured site origin for this run",
    ),
    theme: Optional[ThemeName] = typer.Option(
        None,
        "--theme",
        help="UI color theme",
        case_sensitive=False,
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug mode with detailed logging",
    ),
) -> None:
    """
    🎬 krx18 - catalog browser for krx18.com.

    List the latest titles, search, inspect a title's page and resolve
    its playable links.
    """
    global _debug
    _debug = debug

    try:
        _initialize_application(config_dir=config_dir, base_url=base_url, theme=theme, debug=debug)
    except Exception as e:
        if isinstance(e, Krx18Error):
            handle_error(e, "During application initialization")
        else:
            handle_error(e, "Unexpected error during startup", show_traceback=debug)
        raise typer.Exit(1)


def _initialize_application(
    config_dir: Optional[Path] = None,
    base_url: Optional[str] = None,
    theme: Optional[ThemeName] = None,
    debug: bool = False,
) -> None:
    """
    Initialize configuration, logging and the console.

    Args:
        config_dir: Configuration directory override
        base_url: Site origin override
        theme: Theme override
        debug: Enable debug mode
    """
    install_rich_traceback(show_locals=debug)

    if config_dir is None:
        config_dir = Path("config")

    if not config_dir.exists():
        create_default_config_files(config_dir)

    try:
        config_manager = ConfigManager(config_dir)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Failed to load configuration: {e}", str(config_dir))

    set_config_manager(config_manager)
    set_base_url_override(base_url)

    _setup_logging(debug, config_manager.settings.logging)
    _setup_ui(theme)


def _setup_logging(debug: bool = False, settings: Optional[LoggingSettings] = None) -> None:
    """
    Set up application logging.

    Args:
        debug: Enable debug logging
        settings: Logging section of the settings file
    """
    settings = settings or LoggingSettings()
    level = logging.DEBUG if debug else getattr(logging, settings.level)
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )
    root = logging.getLogger()
    root.setLevel(level)

    if settings.file:
        log_path = Path(settings.file).expanduser().resolve()
        already_attached = any(
            isinstance(handler, RotatingFileHandler) and handler.baseFilename == str(log_path)
            for handler in root.handlers
        )
        if not already_attached:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_path, maxBytes=1024 * 1024 * 5, backupCount=3, encoding="utf-8"
            )
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

    # Reduce noise from third-party libraries
    if not debug:
        logging.getLogger("aiohttp").setLevel(logging.WARNING)
        logging.getLogger("asyncio").setLevel(logging.WARNING)


def _setup_ui(theme_override: Optional[ThemeName] = None) -> None:
    """Set up the console with the configured or overridden theme."""
    if theme_override:
        theme = theme_override
    else:
        try:
            theme = ThemeName(get_config_manager().settings.ui.color_theme)
        except (RuntimeError, ValueError):
            theme = ThemeName.DEFAULT

    set_theme(theme)
    setup_console(theme_name=theme)


def _run(action, context: str, *args, **kwargs) -> None:
    """Run a command body with the shared error handling."""
    try:
        action(*args, **kwargs)
    except typer.Exit:
        raise
    except KeyboardInterrupt:
        get_console().print("\n[yellow]Operation cancelled by user[/yellow]")
        raise typer.Exit(130)
    except Exception as e:
        handle_error(e, context, show_traceback=_debug)
        raise typer.Exit(1)


@app.command(name="catalog")
def catalog_command(
    limit: Optional[int] = typer.Option(None, "--limit", "-l", min=1, help="Maximum entries to show"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
) -> None:
    """🎬 Show the latest titles from the home page."""
    _run(catalog.show_catalog, "While fetching the catalog", limit=limit, as_json=as_json)


@app.command(name="search")
def search_command(
    query: str = typer.Argument(..., help="Title to search for"),
    limit: Optional[int] = typer.Option(None, "--limit", "-l", min=1, max=200, help="Maximum results to show"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
) -> None:
    """
    🔍 Search titles by name.

    When the site returns no matches, the latest titles are shown instead.

    Examples:

        krx18 search "the matrix"

        krx18 search matrix --limit 5 --json
    """
    _run(search.search_titles, f"During search for '{query}'", query, limit=limit, as_json=as_json)


@app.command(name="detail")
def detail_command(
    url: str = typer.Argument(..., help="Detail page URL or site-relative path"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a panel"),
) -> None:
    """📺 Show a title's details and media candidates."""
    _run(detail.show_detail, f"While loading {url}", url, as_json=as_json)


@app.command(name="links")
def links_command(
    url: str = typer.Argument(..., help="Detail page URL or site-relative path"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
) -> None:
    """🔗 Resolve playable links for a title."""
    _run(links.show_links, f"While resolving links for {url}", url, as_json=as_json)


app.add_typer(config.app, name="config", help="⚙️  Manage configuration")


def cli_main() -> None:
    """
    Main CLI entry point for the krx18 command.
    """
    try:
        app()
    except KeyboardInterrupt:
        get_console().print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        handle_error(e, "Unexpected error in CLI")
        sys.exit(1)


__all__ = ["app", "cli_main"]
