"""
Detail Command - Title details and media candidates.
"""

import asyncio
import logging

from krx18.cli.context import create_provider, get_config_manager
from krx18.cli.display import DisplayManager, echo_json
from krx18.core.exceptions import ValidationError
from krx18.core.models import DetailRecord
from krx18.ui import status_spinner


logger = logging.getLogger(__name__)


async def load_detail(url: str) -> DetailRecord:
    async with create_provider() as provider:
        return await provider.load_detail(url)


def show_detail(url: str, as_json: bool = False) -> None:
    """Load a detail page and display the extracted record."""
    if not url.strip():
        raise ValidationError("A detail page URL is required", field_name="url", invalid_value=url)

    if as_json:
        echo_json(asyncio.run(load_detail(url)))
        return

    with status_spinner("Loading details..."):
        record = asyncio.run(load_detail(url))

    DisplayManager(get_config_manager().settings.ui.table_style).display_detail(record)
