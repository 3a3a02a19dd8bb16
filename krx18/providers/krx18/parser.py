"""
Krx18 Parser - Extraction pipeline for krx18.com pages.

The site's markup is undocumented and changes without notice, so every
extractor here works from ordered selector chains with fallbacks rather
than a single fixed path. All functions are pure: given a parsed
document they return records and never raise on missing markup.
"""

import copy
import logging
from typing import Iterable, Iterator, List

from bs4 import Tag

from krx18.core.models import CatalogEntry, DetailRecord, ItemConversion, MediaKind
from krx18.providers.common import (
    HTMLDocument,
    attr_value,
    contains_any,
    element_text,
    first_non_empty_text,
    to_absolute_url,
)
from .selectors import (
    CONTAINER_SELECTORS,
    DATA_SRC_SELECTOR,
    DETAIL_MEDIA_MARKERS,
    DETAIL_PLOT_SELECTORS,
    DETAIL_TITLE_SELECTORS,
    FALLBACK_ENTRY_LIMIT,
    FALLBACK_PATH_MARKERS,
    HEADING_LINK_SELECTORS,
    IFRAME_SELECTOR,
    ITEM_SELECTOR,
    ITEM_TITLE_SELECTORS,
    LINK_SELECTOR,
    OG_IMAGE_SELECTOR,
    PLAYABLE_LINK_MARKERS,
    UNKNOWN_TITLE,
    VIDEO_SOURCE_SELECTOR,
)


logger = logging.getLogger(__name__)


def _title_candidates(item: Tag, link: Tag) -> Iterator[str]:
    """Yield title candidates in priority order; evaluated lazily."""
    for selector in HEADING_LINK_SELECTORS:
        yield element_text(item.select_one(selector))
    yield attr_value(link, "title")
    yield element_text(link)
    yield first_non_empty_text(item, ITEM_TITLE_SELECTORS)


def convert_item(item: Tag, base_url: str, source: str = "") -> ItemConversion:
    """
    Convert one listing item into a catalog entry.

    Args:
        item: Element wrapping a single listed title
        base_url: Site origin for absolutizing links
        source: Provider name recorded on the entry

    Returns:
        A successful conversion, or a skip with the reason
    """
    try:
        link = item.select_one(LINK_SELECTOR)
        href = attr_value(link, "href")
        if not href:
            return ItemConversion.skipped("no link with href")

        title = next((text for text in _title_candidates(item, link) if text), UNKNOWN_TITLE)

        image = item.select_one("img")
        poster = attr_value(image, "data-src") or attr_value(image, "src")

        entry = CatalogEntry(
            title=title,
            url=to_absolute_url(base_url, href),
            poster=to_absolute_url(base_url, poster),
            media_kind=MediaKind.MOVIE,
            source=source,
        )
        return ItemConversion.success(entry)

    # a single malformed item never aborts the listing
    except Exception as e:
        return ItemConversion.skipped(f"{e.__class__.__name__}: {e}")


def _convert_all(items: Iterable[Tag], base_url: str, source: str) -> List[CatalogEntry]:
    entries: List[CatalogEntry] = []
    for item in items:
        result = convert_item(item, base_url, source)
        if result.ok:
            entries.append(result.entry)
        else:
            logger.debug(f"Skipping item: {result.reason}")
    return entries


def _extract_from_containers(document: HTMLDocument, base_url: str, source: str) -> List[CatalogEntry]:
    """Return entries from the first container element that yields any."""
    for selector in CONTAINER_SELECTORS:
        for container in document.select(selector):
            items = container.select(ITEM_SELECTOR)
            if not items:
                continue

            entries = _convert_all(items, base_url, source)
            if entries:
                logger.debug(f"Found {len(entries)} entries under container '{selector}'")
                return entries
    return []


def _extract_from_anchors(document: HTMLDocument, base_url: str, source: str) -> List[CatalogEntry]:
    """Build entries from bare anchors whose href looks like a title page."""
    entries: List[CatalogEntry] = []

    for anchor in document.select(LINK_SELECTOR):
        if contains_any(attr_value(anchor, "href"), FALLBACK_PATH_MARKERS):
            wrapper = document.soup.new_tag("div")
            wrapper.append(copy.copy(anchor))

            result = convert_item(wrapper, base_url, source)
            if result.ok:
                entries.append(result.entry)
            else:
                logger.debug(f"Skipping anchor: {result.reason}")

        if len(entries) >= FALLBACK_ENTRY_LIMIT:
            break

    return entries


def extract_listing(document: HTMLDocument, base_url: str, source: str = "") -> List[CatalogEntry]:
    """
    Extract catalog entries from the home page or any listing page.

    Containers are tried in priority order; when none yields an entry,
    anchors pointing at watch/movie/title pages are used instead, capped
    at FALLBACK_ENTRY_LIMIT entries.

    Args:
        document: Parsed listing page
        base_url: Site origin for absolutizing links
        source: Provider name recorded on entries

    Returns:
        Entries in document order, possibly empty
    """
    entries = _extract_from_containers(document, base_url, source)
    if entries:
        return entries

    logger.debug("No container produced entries, falling back to anchor scan")
    return _extract_from_anchors(document, base_url, source)


def extract_search_results(document: HTMLDocument, base_url: str, source: str = "") -> List[CatalogEntry]:
    """Extract entries from a search results page using the item selectors alone."""
    return _convert_all(document.select(ITEM_SELECTOR), base_url, source)


def _matching_hrefs(document: HTMLDocument, markers: Iterable[str]) -> List[str]:
    hrefs = (attr_value(anchor, "href") for anchor in document.select(LINK_SELECTOR))
    return [href for href in hrefs if contains_any(href, markers)]


def _absolute_unique(urls: Iterable[str], base_url: str) -> List[str]:
    return list(dict.fromkeys(to_absolute_url(base_url, url) for url in urls if url))


def extract_detail(document: HTMLDocument, url: str, base_url: str, source: str = "") -> DetailRecord:
    """
    Extract the full record from a detail page.

    Candidate media URLs come from the inline video source, the first
    iframe and every anchor that looks like a hosted video, in that
    order. The first data-src attribute on the page is used only when
    none of those produced anything.

    Args:
        document: Parsed detail page
        url: URL the page was requested with
        base_url: Site origin for absolutizing links
        source: Provider name recorded on the record

    Returns:
        Detail record with defaults for anything not found
    """
    title = document.first_text(DETAIL_TITLE_SELECTORS) or UNKNOWN_TITLE
    poster = document.find_attr(OG_IMAGE_SELECTOR, "content") or document.find_attr("img", "src")
    plot = document.first_text(DETAIL_PLOT_SELECTORS)

    candidates = [
        document.find_attr(VIDEO_SOURCE_SELECTOR, "src"),
        document.find_attr(IFRAME_SELECTOR, "src"),
    ]
    candidates.extend(_matching_hrefs(document, DETAIL_MEDIA_MARKERS))
    media_urls = _absolute_unique(candidates, base_url)

    if not media_urls:
        data_src = document.find_attr(DATA_SRC_SELECTOR, "data-src")
        media_urls = _absolute_unique([data_src], base_url)

    return DetailRecord(
        title=title,
        url=url,
        poster=to_absolute_url(base_url, poster),
        plot=plot,
        media_urls=media_urls,
        media_kind=MediaKind.MOVIE,
        source=source,
    )


def extract_playable_links(document: HTMLDocument, base_url: str) -> List[str]:
    """
    Collect playable link candidates from a detail page.

    Args:
        document: Parsed detail page
        base_url: Site origin for absolutizing links

    Returns:
        The first iframe source followed by matching anchors, deduplicated
    """
    candidates = [document.find_attr(IFRAME_SELECTOR, "src")]
    candidates.extend(_matching_hrefs(document, PLAYABLE_LINK_MARKERS))
    return _absolute_unique(candidates, base_url)


__all__ = [
    "convert_item",
    "extract_listing",
    "extract_search_results",
    "extract_detail",
    "extract_playable_links",
]
