import pytest

from krx18.core.exceptions import NetworkError, ProviderError
from krx18.providers import Krx18Provider

from tests.conftest import BASE_URL, FakeFetcher


async def test_catalog_has_single_latest_section(provider, fake_fetcher):
    sections = await provider.get_catalog()

    assert len(sections) == 1
    assert sections[0].name == "Latest"
    assert [entry.title for entry in sections[0].entries] == ["Alpha", "Beta", "Gamma"]
    assert all(entry.source == "Krx18" for entry in sections[0].entries)
    assert fake_fetcher.calls == [BASE_URL]


async def test_search_builds_plus_encoded_url(provider, fake_fetcher):
    results = await provider.search("the matrix")

    assert fake_fetcher.calls == ["https://krx18.com/?s=the+matrix"]
    assert [entry.title for entry in results] == ["The Matrix", "The Matrix Reloaded"]
    assert results[0].poster == "https://krx18.com/img/matrix.jpg"


async def test_search_without_matches_falls_back_to_catalog(provider, fake_fetcher):
    results = await provider.search("nothing here")
    sections = await provider.get_catalog()

    assert results == sections[0].entries
    assert fake_fetcher.calls[:2] == ["https://krx18.com/?s=nothing+here", BASE_URL]


@pytest.mark.parametrize("query", ["", "   "])
async def test_blank_search_falls_back_to_catalog(provider, fake_fetcher, query):
    fake_fetcher.pages["https://krx18.com/?s="] = "<html></html>"

    results = await provider.search(query)

    assert [entry.title for entry in results] == ["Alpha", "Beta", "Gamma"]
    assert fake_fetcher.calls == ["https://krx18.com/?s=", BASE_URL]


async def test_load_detail_accepts_relative_path(provider, fake_fetcher):
    record = await provider.load_detail("/movie/the-matrix")

    assert fake_fetcher.calls == ["https://krx18.com/movie/the-matrix"]
    assert record.url == "https://krx18.com/movie/the-matrix"
    assert record.title == "The Matrix"


async def test_resolve_links(provider):
    links = await provider.resolve_links("https://krx18.com/movie/the-matrix")
    assert links == ["https://player.vimeo.com/video/42"]


async def test_fetch_failure_propagates(provider):
    with pytest.raises(NetworkError) as exc_info:
        await provider.load_detail("/movie/missing")
    assert exc_info.value.status_code == 404


async def test_injected_fetcher_is_not_closed():
    fetcher = FakeFetcher({})
    async with Krx18Provider(fetcher=fetcher):
        pass
    assert not fetcher.closed


def test_config_overrides_and_trailing_slash():
    provider = Krx18Provider({"base_url": "https://mirror.example/", "timeout": None}, fetcher=FakeFetcher({}))

    assert provider.base_url == "https://mirror.example"
    assert provider.timeout == 30
    assert provider.search_url("a b") == "https://mirror.example/?s=a+b"
    assert provider.name == "Krx18"


def test_non_http_base_url_is_rejected():
    with pytest.raises(ProviderError):
        Krx18Provider({"base_url": "krx18.com"}, fetcher=FakeFetcher({}))
