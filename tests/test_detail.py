from krx18.providers.krx18.parser import extract_detail, extract_playable_links

from tests.conftest import BASE_URL, DETAIL_PAGE


PAGE_URL = "https://krx18.com/movie/the-matrix"


def test_full_detail_page(html_document):
    record = extract_detail(html_document(DETAIL_PAGE), PAGE_URL, BASE_URL, "Krx18")

    assert record.title == "The Matrix"
    assert record.plot == "A hacker learns the truth."
    assert record.poster == "https://krx18.com/img/poster.jpg"
    assert record.media_urls == [
        "https://krx18.com/media/matrix.mp4",
        "https://player.vimeo.com/video/42",
        "https://drive.google.com/file/d/abc",
    ]
    assert record.source == "Krx18"
    assert record.has_media


def test_iframe_and_anchor_with_same_link_kept_once(html_document):
    html = """
    <iframe src="https://www.youtube.com/embed/x"></iframe>
    <a href="https://www.youtube.com/embed/x">Watch</a>
    """
    record = extract_detail(html_document(html), PAGE_URL, BASE_URL)
    assert record.media_urls == ["https://www.youtube.com/embed/x"]


def test_data_src_used_only_when_nothing_else_found(html_document):
    html = '<div class="player" data-src="/video/1.mp4"></div>'
    record = extract_detail(html_document(html), PAGE_URL, BASE_URL)
    assert record.media_urls == ["https://krx18.com/video/1.mp4"]


def test_data_src_ignored_when_iframe_present(html_document):
    html = '<iframe src="https://embed.example/x"></iframe><img data-src="/lazy.jpg">'
    record = extract_detail(html_document(html), PAGE_URL, BASE_URL)
    assert record.media_urls == ["https://embed.example/x"]


def test_defaults_for_empty_page(html_document):
    record = extract_detail(html_document("<html><body></body></html>"), PAGE_URL, BASE_URL)

    assert record.title == "Unknown"
    assert record.plot == ""
    assert record.poster == ""
    assert record.media_urls == []
    assert not record.has_media


def test_poster_falls_back_to_first_image(html_document):
    html = '<h2>Title</h2><img src="/img/cover.jpg"><img src="/img/other.jpg">'
    record = extract_detail(html_document(html), PAGE_URL, BASE_URL)
    assert record.poster == "https://krx18.com/img/cover.jpg"


def test_playable_links_iframe_then_anchor(html_document):
    html = '<iframe src="https://embed.example/x"></iframe><a href="/file.m3u8">HLS</a>'
    links = extract_playable_links(html_document(html), BASE_URL)
    assert links == ["https://embed.example/x", "https://krx18.com/file.m3u8"]


def test_playable_links_empty_without_sources(html_document):
    html = '<a href="https://www.youtube.com/watch?v=1">Trailer</a>'
    assert extract_playable_links(html_document(html), BASE_URL) == []
