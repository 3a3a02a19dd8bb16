"""
Configuration Schemas - Pydantic models for configuration validation.

This module defines the data structures and validation rules for
the settings file read by the command-line interface.
"""

import re
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator


DEFAULT_BASE_URL = "https://krx18.com"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class ProviderSettings(BaseModel):
    """Settings handed to the site provider."""

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Site origin used for requests and URL absolutization"
    )
    timeout: int = Field(
        default=30,
        ge=5,
        le=300,
        description="Network timeout in seconds"
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User agent string for requests"
    )

    @field_validator('base_url')
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an http(s) origin and drop trailing slashes."""
        v = v.strip()
        if not re.match(r'^https?://[^/]+', v):
            raise ValueError(f"Base URL must start with http:// or https://: {v}")
        return v.rstrip('/')

    @field_validator('user_agent')
    @classmethod
    def validate_user_agent(cls, v: str) -> str:
        if not v or len(v.strip()) < 10:
            raise ValueError("User agent must be a valid browser string")
        return v.strip()


class SearchSettings(BaseModel):
    """Search-related configuration settings."""

    min_query_length: int = Field(
        default=2,
        ge=1,
        le=10,
        description="Minimum search query length"
    )
    max_results: int = Field(
        default=50,
        ge=1,
        le=200,
        description="Maximum results to display"
    )


class UISettings(BaseModel):
    """User interface configuration settings."""

    color_theme: Literal["default", "dark", "light"] = Field(
        default="default",
        description="Color theme for the CLI interface"
    )
    table_style: Literal["rounded", "simple", "minimal"] = Field(
        default="rounded",
        description="Style for data tables"
    )


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level"
    )
    file: Optional[str] = Field(
        default=None,
        description="Optional log file path"
    )

    @field_validator('level', mode='before')
    @classmethod
    def validate_level(cls, v):
        return v.upper() if isinstance(v, str) else v


class AppSettings(BaseModel):
    """Main application settings container."""

    provider: ProviderSettings = Field(default_factory=ProviderSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)
    ui: UISettings = Field(default_factory=UISettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_USER_AGENT",
    "ProviderSettings",
    "SearchSettings",
    "UISettings",
    "LoggingSettings",
    "AppSettings",
]
