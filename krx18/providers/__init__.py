"""
Provider Layer - Site catalog provider implementations.

This module contains the provider interface, the default fetch
collaborator, shared extraction helpers and the krx18.com provider.
"""

from krx18.providers.base import BaseProvider, HttpFetcher, ProviderMetadata
from krx18.providers.common import (
    HTMLDocument,
    TextCleaner,
    first_non_empty_text,
    to_absolute_url,
)
from krx18.providers.krx18 import Krx18Provider

__all__ = [
    # Base Provider Architecture
    "BaseProvider",
    "HttpFetcher",
    "ProviderMetadata",
    # Extraction Utilities
    "HTMLDocument",
    "TextCleaner",
    "first_non_empty_text",
    "to_absolute_url",
    # Providers
    "Krx18Provider",
]
