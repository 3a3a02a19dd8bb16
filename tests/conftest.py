"""
Shared fixtures: an in-memory fetcher and small HTML pages.
"""

from typing import Dict, List

import pytest

from krx18.core.exceptions import NetworkError
from krx18.providers import HTMLDocument, Krx18Provider


BASE_URL = "https://krx18.com"


class FakeFetcher:
    """Serves canned HTML by URL and records every request."""

    def __init__(self, pages: Dict[str, str]):
        self.pages = pages
        self.calls: List[str] = []
        self.closed = False

    async def fetch(self, url: str) -> HTMLDocument:
        self.calls.append(url)
        if url not in self.pages:
            raise NetworkError(f"HTTP 404 error for {url}", url=url, status_code=404)
        return HTMLDocument(self.pages[url], url)

    async def close(self) -> None:
        self.closed = True


HOME_PAGE = """
<html><body>
  <div class="latest-movies">
    <article><a href="/movie/alpha">Alpha</a><img src="/img/alpha.jpg"></article>
    <article><a href="/movie/beta">Beta</a><img src="/img/beta.jpg"></article>
    <article><a href="/movie/gamma">Gamma</a><img src="/img/gamma.jpg"></article>
  </div>
  <div class="items">
    <div class="item"><a href="/movie/ignored">Ignored</a></div>
  </div>
</body></html>
"""

SEARCH_PAGE = """
<html><body>
  <article class="post">
    <h2><a href="/movie/the-matrix">The Matrix</a></h2>
    <img data-src="/img/matrix.jpg" src="/img/placeholder.gif">
  </article>
  <article class="post">
    <h2><a href="/movie/the-matrix-reloaded">The Matrix Reloaded</a></h2>
  </article>
</body></html>
"""

EMPTY_PAGE = "<html><body><p>Nothing found</p></body></html>"

DETAIL_PAGE = """
<html>
<head><meta property="og:image" content="/img/poster.jpg"></head>
<body>
  <h1>  The   Matrix </h1>
  <div class="description">A hacker learns the truth.</div>
  <video><source src="/media/matrix.mp4"></video>
  <iframe src="https://player.vimeo.com/video/42"></iframe>
  <a href="https://player.vimeo.com/video/42">Mirror</a>
  <a href="https://drive.google.com/file/d/abc">Drive</a>
  <a href="/about">About</a>
</body>
</html>
"""


@pytest.fixture
def html_document():
    """Build an HTMLDocument from a string."""
    def _make(html: str, url: str = BASE_URL) -> HTMLDocument:
        return HTMLDocument(html, url)
    return _make


@pytest.fixture
def fake_fetcher():
    return FakeFetcher({
        BASE_URL: HOME_PAGE,
        f"{BASE_URL}/?s=the+matrix": SEARCH_PAGE,
        f"{BASE_URL}/?s=nothing+here": EMPTY_PAGE,
        f"{BASE_URL}/movie/the-matrix": DETAIL_PAGE,
    })


@pytest.fixture
def provider(fake_fetcher):
    return Krx18Provider({"base_url": BASE_URL}, fetcher=fake_fetcher)
