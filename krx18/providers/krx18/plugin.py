"""
Krx18 Provider - Catalog provider for krx18.com

This module wires the krx18 extraction pipeline to the provider
interface: home page catalog, search with catalog fallback, detail
loading and playable link resolution.
"""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote_plus

from krx18.core.config_schemas import DEFAULT_BASE_URL
from krx18.core.exceptions import ProviderError
from krx18.core.models import CatalogEntry, CatalogSection, DetailRecord, MediaKind
from krx18.providers.base import BaseProvider, ProviderMetadata
from krx18.providers.common import to_absolute_url

from .parser import extract_detail, extract_listing, extract_playable_links, extract_search_results
from .selectors import LATEST_SECTION_NAME


logger = logging.getLogger(__name__)


provider_metadata = ProviderMetadata(
    name="Krx18",
    version="1.0.0",
    description="Movie catalog provider for krx18.com with selector fallbacks",
    website=DEFAULT_BASE_URL,
    supported_kinds=[MediaKind.MOVIE, MediaKind.TV_SERIES],
    has_main_page=True,
)

default_config = {
    "base_url": DEFAULT_BASE_URL,
    "timeout": 30,
}


class Krx18Provider(BaseProvider):
    """
    Provider for krx18.com.

    Every operation performs one fetch (search may add a second one for
    its catalog fallback) and hands the parsed page to the extractors.
    Fetch failures propagate unchanged.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None, fetcher: Optional[Any] = None):
        """
        Initialize the krx18 provider.

        Args:
            config: Provider configuration (base_url, timeout, user_agent)
            fetcher: Fetch collaborator; defaults to an HttpFetcher

        Raises:
            ProviderError: If the base URL is not an http(s) origin
        """
        merged_config = {**default_config}
        if config:
            merged_config.update({key: value for key, value in config.items() if value is not None})

        base_url = str(merged_config["base_url"]).strip().rstrip('/')
        if not base_url.startswith(("http://", "https://")):
            raise ProviderError(
                f"Base URL must start with http:// or https://: {base_url}",
                provider_name=provider_metadata.name,
            )

        super().__init__(merged_config, fetcher)
        self._base_url = base_url

    @property
    def metadata(self) -> ProviderMetadata:
        return provider_metadata

    @property
    def base_url(self) -> str:
        return self._base_url

    def search_url(self, query: str) -> str:
        """Build the site search URL; spaces become '+'."""
        return f"{self.base_url}/?s={quote_plus(query)}"

    def page_url(self, url: str) -> str:
        """Resolve a root-relative page path against the site origin."""
        return to_absolute_url(self.base_url, url.strip())

    async def get_catalog(self) -> List[CatalogSection]:
        """
        Get the latest titles from the home page.

        Returns:
            A single "Latest" section, possibly with no entries
        """
        logger.debug(f"Fetching catalog from {self.base_url}")

        document = await self.fetch_document(self.base_url)
        entries = extract_listing(document, self.base_url, self.name)

        logger.info(f"Catalog returned {len(entries)} entries")
        return [CatalogSection(name=LATEST_SECTION_NAME, entries=entries)]

    async def search(self, query: str) -> List[CatalogEntry]:
        """
        Search krx18.com.

        When the results page yields nothing, the home page catalog is
        returned instead, so the result is only empty when the catalog
        is empty too. A blank query is sent as-is and ends in the same
        fallback.

        Args:
            query: Search query string

        Returns:
            Matching entries, or the catalog entries as a fallback
        """
        search_url = self.search_url(query.strip())
        logger.debug(f"Searching {self.name} with query: '{query}'")

        document = await self.fetch_document(search_url)
        results = extract_search_results(document, self.base_url, self.name)
        if results:
            logger.info(f"Search for '{query}' returned {len(results)} results")
            return results

        logger.info(f"No search results for '{query}', falling back to catalog")
        sections = await self.get_catalog()
        return list(sections[0].entries) if sections else []

    async def load_detail(self, url: str) -> DetailRecord:
        """
        Load the detail record for a title.

        Args:
            url: Detail page URL (root-relative paths are accepted)

        Returns:
            Extracted detail record
        """
        page_url = self.page_url(url)
        logger.debug(f"Loading detail page {page_url}")

        document = await self.fetch_document(page_url)
        record = extract_detail(document, page_url, self.base_url, self.name)

        logger.info(f"Detail '{record.title}' has {len(record.media_urls)} media candidates")
        return record

    async def resolve_links(self, url: str) -> List[str]:
        """
        Resolve playable link candidates for a detail page.

        Args:
            url: Detail page URL (root-relative paths are accepted)

        Returns:
            Candidate URLs, possibly empty
        """
        page_url = self.page_url(url)
        logger.debug(f"Resolving links on {page_url}")

        document = await self.fetch_document(page_url)
        links = extract_playable_links(document, self.base_url)

        if not links:
            logger.info(f"No playable source found on {page_url}")
        return links


__all__ = ["Krx18Provider", "provider_metadata", "default_config"]
