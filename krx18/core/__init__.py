"""
Core Layer - Data models, configuration and exceptions.

This module contains the records produced by providers, the settings
schemas and manager, and the exception hierarchy used across krx18.
"""

from krx18.core.config_manager import ConfigManager
from krx18.core.config_schemas import AppSettings, ProviderSettings
from krx18.core.config_defaults import (
    create_default_config_files,
    get_default_settings,
)
from krx18.core.exceptions import (
    Krx18Error,
    ConfigurationError,
    NetworkError,
    ProviderError,
    SearchError,
    ValidationError,
)
from krx18.core.models import (
    CatalogEntry,
    CatalogSection,
    DetailRecord,
    ItemConversion,
    MediaKind,
)

__all__ = [
    # Data Models
    "CatalogEntry",
    "CatalogSection",
    "DetailRecord",
    "ItemConversion",
    "MediaKind",
    # Configuration Management
    "ConfigManager",
    "AppSettings",
    "ProviderSettings",
    "create_default_config_files",
    "get_default_settings",
    # Exceptions
    "Krx18Error",
    "ConfigurationError",
    "NetworkError",
    "ProviderError",
    "SearchError",
    "ValidationError",
]
