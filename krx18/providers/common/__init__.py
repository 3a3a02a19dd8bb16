"""
Common utilities for provider development.

This package contains the extraction helpers shared by site providers.
"""

from .utils import (
    HTMLDocument,
    TextCleaner,
    attr_value,
    contains_any,
    element_text,
    first_non_empty_text,
    to_absolute_url,
)

__all__ = [
    "HTMLDocument",
    "TextCleaner",
    "attr_value",
    "contains_any",
    "element_text",
    "first_non_empty_text",
    "to_absolute_url",
]
