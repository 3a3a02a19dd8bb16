"""
Display Manager - Terminal and JSON output for command results.

This module renders catalog entries, detail records and resolved links
either as Rich tables and panels or as plain JSON for scripting.
"""

import json
import logging
from typing import Any, List, Optional

import typer
from pydantic import BaseModel

from krx18.core.models import CatalogEntry, DetailRecord
from krx18.ui import get_console, UIComponents, display_warning


logger = logging.getLogger(__name__)


def echo_json(data: Any) -> None:
    """Print pydantic models (or lists of them) as indented JSON."""
    if isinstance(data, BaseModel):
        payload = data.model_dump(mode="json")
    elif isinstance(data, list):
        payload = [item.model_dump(mode="json") if isinstance(item, BaseModel) else item for item in data]
    else:
        payload = data
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


class DisplayManager:
    """Renders provider results with the configured table style."""

    def __init__(self, table_style: str = "rounded"):
        self.console = get_console()
        self.ui = UIComponents(table_style)

    def display_entries(
        self,
        entries: List[CatalogEntry],
        title: str,
        empty_message: str,
        total_found: Optional[int] = None,
    ) -> None:
        """
        Display catalog entries in a formatted table.

        Args:
            entries: Entries to show (already limited)
            title: Table title
            empty_message: Warning shown when there is nothing to display
            total_found: Number of entries before limiting
        """
        if not entries:
            display_warning(empty_message, "🔍 Nothing Found")
            return

        self.console.print(self.ui.create_entries_table(entries, title=title))

        if total_found is not None and total_found > len(entries):
            self.console.print(f"[dim]Showing {len(entries)} of {total_found} entries[/dim]")

    def display_detail(self, record: DetailRecord) -> None:
        self.console.print(self.ui.create_detail_panel(record))
        if not record.has_media:
            display_warning("No media candidates were found on this page.", "📺 No Media")

    def display_links(self, links: List[str], url: str) -> None:
        if not links:
            display_warning(f"No playable source found on {url}", "🔗 No Links")
            return
        self.console.print(self.ui.create_links_table(links))


__all__ = ["DisplayManager", "echo_json"]
