"""
Selector chains for krx18.com.

Each chain is consulted in order and the first selector producing a
usable match wins.
"""

from krx18.core.models import SelectorChain


# Listing page wrappers, most specific first
CONTAINER_SELECTORS: SelectorChain = (
    "div.latest-movies",
    "section.latest",
    "#main",
    "article",
    ".post",
    ".movie-list",
    ".items",
)

# One selector group; matches come back in document order
ITEM_SELECTOR = "article, .post, .item, .movie, .thumb, li"

LINK_SELECTOR = "a[href]"

HEADING_LINK_SELECTORS: SelectorChain = ("h2 a", "h3 a")
ITEM_TITLE_SELECTORS: SelectorChain = (".title", ".name", "h2", "h3")

# Anchor fallback when no container produced entries
FALLBACK_PATH_MARKERS: SelectorChain = ("/watch", "/movie", "/title")
FALLBACK_ENTRY_LIMIT = 40

DETAIL_TITLE_SELECTORS: SelectorChain = ("h1", "h2", ".title", ".post-title")
DETAIL_PLOT_SELECTORS: SelectorChain = (".description", ".entry-content", ".post-content", ".desc")
OG_IMAGE_SELECTOR = 'meta[property="og:image"]'

VIDEO_SOURCE_SELECTOR = "video source[src]"
IFRAME_SELECTOR = "iframe[src]"
DATA_SRC_SELECTOR = "[data-src]"

# Substrings marking an anchor as a media candidate on detail pages
DETAIL_MEDIA_MARKERS: SelectorChain = ("drive.google", "vimeo", "youtube.com", "mp4", "m3u8")

# Substrings marking an anchor as a playable link during link resolution
PLAYABLE_LINK_MARKERS: SelectorChain = (".m3u8", ".mp4", "googleusercontent", "vimeo")

UNKNOWN_TITLE = "Unknown"
LATEST_SECTION_NAME = "Latest"
