"""
CLI Context - Global application context and state management.

This module holds the configuration manager, run-level overrides and
the fetch collaborator used when building the provider for a command.
"""

from typing import Any, Optional

from krx18.core import ConfigManager
from krx18.providers import Krx18Provider


# Global application state
_config_manager: Optional[ConfigManager] = None
_base_url_override: Optional[str] = None
_fetcher: Optional[Any] = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    if _config_manager is None:
        raise RuntimeError("Configuration manager not initialized")
    return _config_manager


def set_config_manager(config_manager: ConfigManager) -> None:
    """Set the global configuration manager instance."""
    global _config_manager
    _config_manager = config_manager


def set_base_url_override(base_url: Optional[str]) -> None:
    """Override the configured base URL for the current run."""
    global _base_url_override
    _base_url_override = base_url


def set_fetcher(fetcher: Optional[Any]) -> None:
    """Inject a fetch collaborator; None restores the default HttpFetcher."""
    global _fetcher
    _fetcher = fetcher


def create_provider() -> Krx18Provider:
    """Build the krx18 provider from the loaded settings."""
    config = get_config_manager().provider_config()
    if _base_url_override:
        config["base_url"] = _base_url_override
    return Krx18Provider(config, fetcher=_fetcher)


__all__ = [
    "get_config_manager",
    "set_config_manager",
    "set_base_url_override",
    "set_fetcher",
    "create_provider",
]
