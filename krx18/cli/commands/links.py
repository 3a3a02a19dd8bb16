"""
Links Command - Playable link resolution for a detail page.
"""

import asyncio
import logging
from typing import List

from krx18.cli.context import create_provider, get_config_manager
from krx18.cli.display import DisplayManager, echo_json
from krx18.core.exceptions import ValidationError
from krx18.ui import status_spinner


logger = logging.getLogger(__name__)


async def resolve_links(url: str) -> List[str]:
    async with create_provider() as provider:
        return await provider.resolve_links(url)


def show_links(url: str, as_json: bool = False) -> None:
    """Resolve and display playable links for a detail page."""
    if not url.strip():
        raise ValidationError("A detail page URL is required", field_name="url", invalid_value=url)

    if as_json:
        echo_json(asyncio.run(resolve_links(url)))
        return

    with status_spinner("Resolving links..."):
        links = asyncio.run(resolve_links(url))

    DisplayManager(get_config_manager().settings.ui.table_style).display_links(links, url)
