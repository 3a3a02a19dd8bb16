"""
Base Provider Interface - Abstract base class for media catalog providers.

This module defines the interface every site provider implements
(catalog listing, search, detail loading and link resolution) and the
default aiohttp-based fetch collaborator that turns URLs into parsed
documents.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import aiohttp
from pydantic import BaseModel, Field

from krx18.core.config_schemas import DEFAULT_USER_AGENT
from krx18.core.exceptions import NetworkError
from krx18.core.models import CatalogEntry, CatalogSection, DetailRecord, MediaKind
from krx18.providers.common import HTMLDocument


logger = logging.getLogger(__name__)


class ProviderMetadata(BaseModel):
    """Metadata information for a provider."""

    name: str = Field(..., description="Provider display name")
    version: str = Field(default="1.0.0", description="Provider version")
    description: str = Field(default="", description="Provider description")
    website: Optional[str] = Field(None, description="Source website URL")
    supported_kinds: List[MediaKind] = Field(
        default_factory=lambda: [MediaKind.MOVIE],
        description="Media kinds the provider declares"
    )
    has_main_page: bool = Field(default=True, description="Whether the provider lists a home page catalog")


class HttpFetcher:
    """
    Fetch collaborator backed by aiohttp.

    Each call performs exactly one GET request and parses the body with
    BeautifulSoup. Failures are raised as NetworkError and never retried.
    """

    def __init__(
        self,
        timeout: int = 30,
        user_agent: str = DEFAULT_USER_AGENT,
        headers: Optional[Dict[str, str]] = None,
    ):
        self.timeout = timeout
        self.user_agent = user_agent
        self.extra_headers = headers or {}
        self._session: Optional[aiohttp.ClientSession] = None
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create HTTP session with proper configuration."""
        if self._session is None or self._session.closed:
            headers = {
                'User-Agent': self.user_agent,
                'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
                'Accept-Language': 'en-US,en;q=0.5',
                'Accept-Encoding': 'gzip, deflate',
                'Connection': 'keep-alive',
                **self.extra_headers,
            }

            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout),
                headers=headers,
            )

        return self._session

    async def fetch(self, url: str) -> HTMLDocument:
        """
        Fetch a page and parse it.

        Args:
            url: Absolute URL to fetch

        Returns:
            Parsed document

        Raises:
            NetworkError: On transport failure, timeout or HTTP status >= 400
        """
        self.logger.debug(f"GET {url}")

        try:
            async with self.session.get(url) as response:
                if response.status >= 400:
                    raise NetworkError(
                        f"HTTP {response.status} error for {url}",
                        url=url,
                        status_code=response.status,
                    )
                # raw bytes; BeautifulSoup detects the encoding when no charset is declared
                body = await response.read()
                charset = response.charset
                final_url = str(response.url)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise NetworkError(
                f"Request failed for {url}: {str(e) or e.__class__.__name__}",
                url=url,
                details=str(e),
            ) from e

        return HTMLDocument(body, final_url, from_encoding=charset)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()
            self.logger.debug("HTTP session closed")
        self._session = None


class BaseProvider(ABC):
    """
    Abstract base class for media catalog providers.

    A provider is a plain object: it receives its configuration and its
    fetch collaborator as constructor arguments. Any object exposing an
    awaitable ``fetch(url) -> HTMLDocument`` can stand in for the default
    HttpFetcher.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None, fetcher: Optional[Any] = None):
        """
        Initialize the provider.

        Args:
            config: Provider configuration dictionary
            fetcher: Fetch collaborator; an HttpFetcher is created when omitted
        """
        self.config = config or {}
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        self._initialize_config()

        self._owns_fetcher = fetcher is None
        self.fetcher = fetcher if fetcher is not None else HttpFetcher(
            timeout=self.timeout,
            user_agent=self.user_agent,
        )

    def _initialize_config(self) -> None:
        """Initialize provider configuration with defaults."""
        self.timeout = self.config.get('timeout', 30)
        self.user_agent = self.config.get('user_agent', DEFAULT_USER_AGENT)

    @property
    @abstractmethod
    def metadata(self) -> ProviderMetadata:
        """Get provider metadata information."""

    @property
    @abstractmethod
    def base_url(self) -> str:
        """Get the site origin."""

    @property
    def name(self) -> str:
        return self.metadata.name

    async def fetch_document(self, url: str) -> HTMLDocument:
        """Fetch one page through the fetch collaborator."""
        return await self.fetcher.fetch(url)

    @abstractmethod
    async def get_catalog(self) -> List[CatalogSection]:
        """
        Get the provider's home page catalog.

        Returns:
            Named sections of catalog entries
        """

    @abstractmethod
    async def search(self, query: str) -> List[CatalogEntry]:
        """
        Search the site by title.

        Args:
            query: Search query string

        Returns:
            Matching catalog entries
        """

    @abstractmethod
    async def load_detail(self, url: str) -> DetailRecord:
        """
        Load the detail record for a title.

        Args:
            url: Detail page URL

        Returns:
            Extracted detail record
        """

    @abstractmethod
    async def resolve_links(self, url: str) -> List[str]:
        """
        Resolve candidate playable URLs for a detail page.

        Args:
            url: Detail page URL

        Returns:
            Candidate URLs, possibly empty
        """

    async def cleanup(self) -> None:
        """Release the fetch collaborator if the provider created it."""
        if self._owns_fetcher:
            await self.fetcher.close()

    async def __aenter__(self) -> "BaseProvider":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.cleanup()

    def __str__(self) -> str:
        return f"{self.metadata.name} v{self.metadata.version}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.metadata.name}')"


__all__ = ["BaseProvider", "ProviderMetadata", "HttpFetcher"]
