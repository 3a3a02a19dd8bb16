"""
Core Exceptions - Custom exception classes for krx18.

This module defines the exception hierarchy raised by the provider,
the fetch layer, and the configuration layer.
"""

from typing import Optional, Any


class Krx18Error(Exception):
    """Base exception class for all krx18-specific errors."""

    def __init__(self, message: str, details: Optional[Any] = None):
        """
        Initialize krx18 error.

        Args:
            message: Human-readable error message
            details: Additional error details for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return self.message


class ConfigurationError(Krx18Error):
    """Raised when configuration-related errors occur."""

    def __init__(self, message: str, config_path: Optional[str] = None, details: Optional[Any] = None):
        super().__init__(message, details)
        self.config_path = config_path


class ProviderError(Krx18Error):
    """Raised when a provider cannot complete an operation."""

    def __init__(self, message: str, provider_name: Optional[str] = None, details: Optional[Any] = None):
        super().__init__(message, details)
        self.provider_name = provider_name


class NetworkError(Krx18Error):
    """Raised when fetching a page fails."""

    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None, details: Optional[Any] = None):
        """
        Initialize network error.

        Args:
            message: Error description
            url: URL that caused the error
            status_code: HTTP status code if applicable
            details: Additional error context
        """
        super().__init__(message, details)
        self.url = url
        self.status_code = status_code


class SearchError(Krx18Error):
    """Raised when a search request is invalid."""

    def __init__(self, message: str, query: Optional[str] = None, source: Optional[str] = None, details: Optional[Any] = None):
        super().__init__(message, details)
        self.query = query
        self.source = source


class ValidationError(Krx18Error):
    """Raised when user-supplied values fail validation."""

    def __init__(self, message: str, field_name: Optional[str] = None, invalid_value: Optional[Any] = None, details: Optional[Any] = None):
        super().__init__(message, details)
        self.field_name = field_name
        self.invalid_value = invalid_value


__all__ = [
    "Krx18Error",
    "ConfigurationError",
    "ProviderError",
    "NetworkError",
    "SearchError",
    "ValidationError",
]
