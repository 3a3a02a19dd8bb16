"""
UI Components - Rich renderables for catalog entries, details and links.
"""

from typing import List, Optional

from rich import box
from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from krx18.core.models import CatalogEntry, DetailRecord
from krx18.ui.themes import get_palette


TABLE_BOXES = {
    "rounded": box.ROUNDED,
    "simple": box.SIMPLE,
    "minimal": box.MINIMAL,
}


class UIComponents:
    """Collection of standardized UI components with consistent styling."""

    def __init__(self, table_style: str = "rounded"):
        self.palette = get_palette()
        self.table_box = TABLE_BOXES.get(table_style, box.ROUNDED)

    def create_entries_table(self, entries: List[CatalogEntry], title: str = "🎬 Catalog") -> Table:
        """
        Create a table of catalog entries.

        Args:
            entries: Entries to display
            title: Table title

        Returns:
            Formatted table
        """
        table = Table(
            title=title,
            box=self.table_box,
            show_header=True,
            header_style="table.header",
            border_style=self.palette.table_border,
            expand=True
        )

        table.add_column("#", style="muted", width=4)
        table.add_column("Title", style="entry.title", min_width=30)
        table.add_column("URL", style="entry.url", overflow="fold")
        table.add_column("Poster", style="muted", width=7)

        for i, entry in enumerate(entries, 1):
            table.add_row(
                str(i),
                entry.title,
                entry.url,
                "✓" if entry.poster else "-"
            )

        return table

    def create_detail_panel(self, record: DetailRecord) -> Panel:
        """Create a panel describing one detail record and its media candidates."""
        facts = Table.grid(padding=(0, 2))
        facts.add_column(style="muted")
        facts.add_column()
        facts.add_row("URL", record.url)
        facts.add_row("Poster", record.poster or "-")
        facts.add_row("Kind", record.media_kind.value)

        parts = [facts]
        if record.plot:
            parts.append(Text("\n" + record.plot))

        parts.append(Text(""))
        parts.append(self.create_links_table(record.media_urls, title="Media candidates"))

        return Panel(
            Group(*parts),
            title=Text(record.title, style="entry.title"),
            border_style=self.palette.panel_border,
            padding=(1, 2)
        )

    def create_links_table(self, links: List[str], title: Optional[str] = "🔗 Links") -> Table:
        table = Table(
            title=title,
            box=self.table_box,
            show_header=True,
            header_style="table.header",
            border_style=self.palette.panel_border,
            expand=True
        )
        table.add_column("#", style="muted", width=4)
        table.add_column("URL", overflow="fold")

        for i, link in enumerate(links, 1):
            table.add_row(str(i), link)

        return table


__all__ = ["UIComponents", "TABLE_BOXES"]
