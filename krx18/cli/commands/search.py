"""
Search Command - Title search with catalog fallback.
"""

import asyncio
import logging
from typing import List, Optional

from krx18.cli.context import create_provider, get_config_manager
from krx18.cli.display import DisplayManager, echo_json
from krx18.core.exceptions import SearchError
from krx18.core.models import CatalogEntry
from krx18.ui import status_spinner


logger = logging.getLogger(__name__)


async def run_search(query: str) -> List[CatalogEntry]:
    async with create_provider() as provider:
        return await provider.search(query)


def search_titles(query: str, limit: Optional[int] = None, as_json: bool = False) -> None:
    """
    Search for titles and display the results.

    Args:
        query: Search query
        limit: Maximum results to show (defaults to search.max_results)
        as_json: Print JSON instead of a table

    Raises:
        SearchError: If the query is shorter than search.min_query_length
    """
    settings = get_config_manager().settings
    query = query.strip()

    if len(query) < settings.search.min_query_length:
        raise SearchError(
            f"Search query must be at least {settings.search.min_query_length} characters long",
            query=query,
        )

    if as_json:
        results = asyncio.run(run_search(query))
    else:
        with status_spinner(f"Searching for '{query}'..."):
            results = asyncio.run(run_search(query))

    total_found = len(results)
    results = results[:limit or settings.search.max_results]

    if as_json:
        echo_json(results)
        return

    DisplayManager(settings.ui.table_style).display_entries(
        results,
        title=f"🔍 Results for '{query}'",
        empty_message=f"No results found for '{query}' and the catalog is empty.",
        total_found=total_found,
    )
