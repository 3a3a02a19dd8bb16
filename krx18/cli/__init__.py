"""
CLI Layer - Typer command-line interface.
"""

from krx18.cli.main import app, cli_main

__all__ = ["app", "cli_main"]
