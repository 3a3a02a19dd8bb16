import pytest

from krx18.providers.common import (
    HTMLDocument,
    TextCleaner,
    attr_value,
    contains_any,
    first_non_empty_text,
    to_absolute_url,
)


BASE = "https://krx18.com"


class TestToAbsoluteUrl:
    def test_root_relative_path_gets_origin(self):
        assert to_absolute_url(BASE, "/movie/1") == "https://krx18.com/movie/1"

    def test_base_path_and_trailing_slash_are_ignored(self):
        assert to_absolute_url("https://krx18.com/some/page/", "/img/a.jpg") == "https://krx18.com/img/a.jpg"

    def test_absolute_url_is_unchanged(self):
        assert to_absolute_url(BASE, "https://cdn.example/a.jpg") == "https://cdn.example/a.jpg"

    def test_parent_relative_path_is_unchanged(self):
        assert to_absolute_url(BASE, "../movie/1") == "../movie/1"

    def test_protocol_relative_is_prefixed_as_root_relative(self):
        assert to_absolute_url(BASE, "//cdn.example/a.jpg") == "https://krx18.com//cdn.example/a.jpg"

    def test_empty_value_stays_empty(self):
        assert to_absolute_url(BASE, "") == ""

    @pytest.mark.parametrize("value", ["/movie/1", "https://other.example/x", "relative/path", ""])
    def test_idempotent(self, value):
        once = to_absolute_url(BASE, value)
        assert to_absolute_url(BASE, once) == once


class TestSelectorHelpers:
    def test_first_non_empty_text_skips_blank_matches(self):
        doc = HTMLDocument("<div><h2>   </h2><span class='title'>Real Title</span></div>")
        assert first_non_empty_text(doc.soup, ["h2", ".title"]) == "Real Title"

    def test_first_non_empty_text_respects_order(self):
        doc = HTMLDocument("<div><h3>Second</h3><h2>First</h2></div>")
        assert first_non_empty_text(doc.soup, ["h2", "h3"]) == "First"

    def test_first_non_empty_text_returns_empty_when_nothing_matches(self):
        doc = HTMLDocument("<div></div>")
        assert first_non_empty_text(doc.soup, [".missing"]) == ""

    def test_attr_value_handles_missing_element_and_attribute(self):
        doc = HTMLDocument("<a>no href</a>")
        assert attr_value(None, "href") == ""
        assert attr_value(doc.select_one("a"), "href") == ""

    def test_attr_value_strips_whitespace(self):
        doc = HTMLDocument('<a href="  /movie/1  ">x</a>')
        assert attr_value(doc.select_one("a"), "href") == "/movie/1"

    def test_find_attr_default(self):
        doc = HTMLDocument("<p></p>")
        assert doc.find_attr("iframe", "src", "none") == "none"

    def test_clean_text_collapses_whitespace(self):
        assert TextCleaner.clean_text("  The \n\t Matrix  ") == "The Matrix"

    def test_contains_any(self):
        assert contains_any("https://krx18.com/watch/1", ["/movie", "/watch"])
        assert not contains_any("https://krx18.com/about", ["/movie", "/watch"])


def test_document_decodes_bytes_with_declared_charset():
    doc = HTMLDocument("<h1>Café</h1>".encode("latin-1"), from_encoding="iso-8859-1")
    assert doc.first_text(["h1"]) == "Café"
