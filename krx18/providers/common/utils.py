"""
Provider Utilities - Selector probing, URL and text helpers.

This module provides the small, side-effect-free helpers every site
extractor is built from: probing an element against an ordered list of
selectors, reading attributes, absolutizing root-relative URLs, and a
thin wrapper around a parsed page.
"""

import re
import logging
from typing import Iterable, List, Optional, Union
from urllib.parse import urlparse

from bs4 import BeautifulSoup, Tag


logger = logging.getLogger(__name__)


class TextCleaner:
    """Utility class for cleaning and normalizing text content."""

    @staticmethod
    def clean_text(text: Optional[str]) -> str:
        """Collapse runs of whitespace and strip the result."""
        if not text:
            return ""
        return re.sub(r'\s+', ' ', text).strip()


def element_text(element: Optional[Tag]) -> str:
    """Return the normalized text of an element, or "" for None."""
    if element is None:
        return ""
    return TextCleaner.clean_text(element.get_text())


def attr_value(element: Optional[Tag], name: str) -> str:
    """
    Read an attribute from an element.

    Args:
        element: Element to read from (None is allowed)
        name: Attribute name

    Returns:
        The stripped attribute value, or "" if missing
    """
    if element is None or not element.has_attr(name):
        return ""
    value = element[name]
    # BeautifulSoup returns multi-valued attributes (class, rel) as lists
    if isinstance(value, list):
        value = value[0] if value else ""
    return value.strip() if isinstance(value, str) else ""


def first_non_empty_text(element: Tag, selectors: Iterable[str]) -> str:
    """
    Probe an element with selectors in order and return the first non-empty text.

    Args:
        element: Element (or whole document) to search within
        selectors: Ordered selectors; earlier entries take priority

    Returns:
        Text of the first match with non-empty text, or "" if none
    """
    for selector in selectors:
        text = element_text(element.select_one(selector))
        if text:
            return text
    return ""


def to_absolute_url(base: str, value: str) -> str:
    """
    Turn a root-relative URL into an absolute one.

    Only values starting with "/" are rewritten, by prefixing the base's
    scheme and host. Protocol-relative "//host/path" values start with
    "/" too and get the same prefix; "../path" and bare relative paths
    are returned unchanged.

    Args:
        base: Site origin, e.g. "https://krx18.com"
        value: URL as found in the page

    Returns:
        Absolute URL, or the input unchanged
    """
    if not value or not value.startswith('/'):
        return value

    parsed = urlparse(base)
    if parsed.scheme and parsed.netloc:
        origin = f"{parsed.scheme}://{parsed.netloc}"
    else:
        origin = base.rstrip('/')
    return origin + value


def contains_any(value: str, markers: Iterable[str]) -> bool:
    """Check whether any marker occurs in value."""
    return any(marker in value for marker in markers)


class HTMLDocument:
    """A parsed page together with the URL it was fetched from."""

    def __init__(
        self,
        html_content: Union[str, bytes],
        url: str = "",
        parser: str = "html.parser",
        from_encoding: Optional[str] = None,
    ):
        """
        Initialize HTML document.

        Args:
            html_content: HTML text, or raw bytes to be decoded by BeautifulSoup
            url: URL the content was fetched from
            parser: BeautifulSoup tree builder name
            from_encoding: Declared charset for byte content, if any
        """
        if isinstance(html_content, bytes):
            self.soup = BeautifulSoup(html_content, parser, from_encoding=from_encoding)
        else:
            self.soup = BeautifulSoup(html_content, parser)
        self.url = url

    def select(self, selector: str) -> List[Tag]:
        return self.soup.select(selector)

    def select_one(self, selector: str) -> Optional[Tag]:
        return self.soup.select_one(selector)

    def first_text(self, selectors: Iterable[str]) -> str:
        return first_non_empty_text(self.soup, selectors)

    def find_attr(self, selector: str, attr: str, default: str = "") -> str:
        """
        Find attribute value using CSS selector.

        Args:
            selector: CSS selector string
            attr: Attribute name
            default: Default value if element/attribute not found

        Returns:
            Attribute value or default value
        """
        return attr_value(self.soup.select_one(selector), attr) or default

    def __repr__(self) -> str:
        return f"HTMLDocument(url='{self.url}')"


__all__ = [
    "TextCleaner",
    "HTMLDocument",
    "element_text",
    "attr_value",
    "first_non_empty_text",
    "to_absolute_url",
    "contains_any",
]
