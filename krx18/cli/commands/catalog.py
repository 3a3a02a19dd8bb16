"""
Catalog Command - Latest titles from the home page.
"""

import asyncio
import logging
from typing import List, Optional

from krx18.cli.context import create_provider, get_config_manager
from krx18.cli.display import DisplayManager, echo_json
from krx18.core.models import CatalogSection
from krx18.ui import status_spinner


logger = logging.getLogger(__name__)


async def load_catalog() -> List[CatalogSection]:
    """Fetch the catalog and release the provider afterwards."""
    async with create_provider() as provider:
        return await provider.get_catalog()


def show_catalog(limit: Optional[int] = None, as_json: bool = False) -> None:
    """
    Fetch and display the home page catalog.

    Args:
        limit: Maximum entries to show per section
        as_json: Print JSON instead of tables
    """
    if as_json:
        sections = asyncio.run(load_catalog())
    else:
        with status_spinner("Fetching latest titles..."):
            sections = asyncio.run(load_catalog())

    if limit:
        sections = [
            CatalogSection(name=section.name, entries=section.entries[:limit])
            for section in sections
        ]

    if as_json:
        echo_json(sections)
        return

    display = DisplayManager(get_config_manager().settings.ui.table_style)
    for section in sections:
        display.display_entries(
            section.entries,
            title=f"🎬 {section.name}",
            empty_message="The home page did not list any titles.",
        )
