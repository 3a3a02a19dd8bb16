"""
Krx18 Provider - Catalog provider for krx18.com

This package provides the krx18.com provider: listing, search, detail
and link extraction built on ordered selector chains.
"""

from .plugin import Krx18Provider, provider_metadata, default_config
from .parser import (
    convert_item,
    extract_detail,
    extract_listing,
    extract_playable_links,
    extract_search_results,
)

__all__ = [
    "Krx18Provider",
    "provider_metadata",
    "default_config",
    "convert_item",
    "extract_detail",
    "extract_listing",
    "extract_playable_links",
    "extract_search_results",
]
