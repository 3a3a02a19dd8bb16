"""
krx18 - Catalog scraper for the krx18.com movie listing site.

Extracts the latest titles, search results, title details and playable
links from krx18.com through a provider interface, with a Typer and Rich
command-line interface on top.
"""

__version__ = "0.1.0"

# Package metadata
__title__ = "krx18"
__description__ = "Catalog scraper for krx18.com with a provider interface and CLI"
__license__ = "MIT"

# Version info tuple for programmatic access
VERSION_INFO = tuple(map(int, __version__.split(".")))

from krx18.core.models import CatalogEntry, CatalogSection, DetailRecord, MediaKind
from krx18.providers import Krx18Provider, HttpFetcher

__all__ = [
    "__version__",
    "CatalogEntry",
    "CatalogSection",
    "DetailRecord",
    "MediaKind",
    "Krx18Provider",
    "HttpFetcher",
]
