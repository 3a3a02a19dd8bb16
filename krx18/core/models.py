"""
Core Data Models - Pydantic models for catalog entries and detail records.

This module defines the records produced by the extractors and handed
out by the provider. All models are frozen: once an extractor builds a
record, nothing downstream changes it.
"""

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


SelectorChain = Tuple[str, ...]


class MediaKind(str, Enum):
    """Kinds of media a provider can list."""

    MOVIE = "movie"
    TV_SERIES = "tv_series"

    def __str__(self) -> str:
        return self.value


class CatalogEntry(BaseModel):
    """
    Summary record for one listed title.

    Built from a single listing or search-result item; the url points
    at the title's detail page.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(default="Unknown", min_length=1, description="Display title")
    url: str = Field(..., min_length=1, description="Detail page URL")
    poster: str = Field(default="", description="Poster image URL or empty")
    media_kind: MediaKind = Field(default=MediaKind.MOVIE, description="Kind of media")
    source: str = Field(default="", description="Provider name")

    @field_validator('title')
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Strip surrounding whitespace, keeping the Unknown placeholder for blanks."""
        return v.strip() or "Unknown"

    def __str__(self) -> str:
        return f"{self.title} ({self.url})"


class CatalogSection(BaseModel):
    """A named row of catalog entries, e.g. the home page's latest titles."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Section heading")
    entries: List[CatalogEntry] = Field(default_factory=list, description="Entries in page order")

    def __len__(self) -> int:
        return len(self.entries)


class DetailRecord(BaseModel):
    """
    Full record extracted from one detail page.

    media_urls holds every candidate playable URL found on the page,
    in discovery order and without duplicates.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(default="Unknown", min_length=1, description="Title")
    url: str = Field(..., min_length=1, description="Detail page URL")
    poster: str = Field(default="", description="Poster image URL or empty")
    plot: str = Field(default="", description="Plot summary")
    media_urls: List[str] = Field(default_factory=list, description="Candidate media URLs")
    media_kind: MediaKind = Field(default=MediaKind.MOVIE, description="Kind of media")
    source: str = Field(default="", description="Provider name")

    @field_validator('media_urls')
    @classmethod
    def validate_media_urls(cls, v: List[str]) -> List[str]:
        """Drop blanks and duplicates while preserving order."""
        return list(dict.fromkeys(url for url in v if url))

    @property
    def has_media(self) -> bool:
        return bool(self.media_urls)


class ItemConversion(BaseModel):
    """
    Outcome of turning one HTML item into a CatalogEntry.

    Exactly one of entry and reason is set.
    """

    model_config = ConfigDict(frozen=True)

    entry: Optional[CatalogEntry] = None
    reason: Optional[str] = None

    @classmethod
    def success(cls, entry: CatalogEntry) -> "ItemConversion":
        return cls(entry=entry)

    @classmethod
    def skipped(cls, reason: str) -> "ItemConversion":
        return cls(reason=reason)

    @property
    def ok(self) -> bool:
        return self.entry is not None


__all__ = [
    "SelectorChain",
    "MediaKind",
    "CatalogEntry",
    "CatalogSection",
    "DetailRecord",
    "ItemConversion",
]
