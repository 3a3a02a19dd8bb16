"""
CLI Commands - Individual command implementations.

This module contains the catalog, search, detail, links and
configuration command implementations.
"""

from krx18.cli.commands import catalog, config, detail, links, search

__all__ = ["catalog", "config", "detail", "links", "search"]
