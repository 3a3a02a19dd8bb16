"""
Config Command - Inspect and change settings.json.
"""

import json
import logging
from typing import Any

import typer

from krx18.cli.context import get_config_manager
from krx18.cli.display import echo_json
from krx18.ui import get_console, handle_error, display_info


app = typer.Typer(
    name="config",
    help="⚙️  Manage configuration",
    no_args_is_help=True,
)

logger = logging.getLogger(__name__)


def parse_value(raw: str) -> Any:
    """Interpret a command-line value as JSON, falling back to the raw string."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


@app.command(name="show")
def show_config() -> None:
    """📋 Show the current settings."""
    config_manager = get_config_manager()
    get_console().print(f"[dim]Settings file:[/dim] {config_manager.settings_file}")
    echo_json(config_manager.settings)


@app.command(name="get")
def get_config(
    key: str = typer.Argument(..., help="Configuration key (dot notation)"),
) -> None:
    """🔎 Print a single setting."""
    sentinel = object()
    value = get_config_manager().get_setting(key, sentinel)
    if value is sentinel:
        get_console().print(f"[red]Unknown setting:[/red] {key}")
        raise typer.Exit(1)
    echo_json(value)


@app.command(name="set")
def set_config(
    key: str = typer.Argument(..., help="Configuration key (dot notation)"),
    value: str = typer.Argument(..., help="New value for the setting"),
) -> None:
    """
    🔧 Set a configuration value.

    Example: krx18 config set provider.timeout 60
    """
    try:
        get_config_manager().update_setting(key, parse_value(value))
    except Exception as e:
        handle_error(e, f"Failed to set configuration value '{key}'")
        raise typer.Exit(1)

    get_console().print(f"[green]✓[/green] {key} updated")


@app.command(name="reset")
def reset_config(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """♻️  Reset all settings to defaults."""
    if not yes and not typer.confirm("Reset all settings to defaults?"):
        raise typer.Exit()

    get_config_manager().reset_to_defaults()
    display_info("Settings were reset to defaults.", "♻️  Reset")


__all__ = ["app", "parse_value"]
