import pytest
from aiohttp import web
from aiohttp import test_utils

from krx18.core.exceptions import NetworkError
from krx18.providers import HttpFetcher


async def _ok(request):
    return web.Response(text="<html><body><h1>Hello</h1></body></html>", content_type="text/html")


async def _missing(request):
    return web.Response(status=404, text="not here")


LATIN1_PAGE = (
    "<html><body><h1>Café</h1>"
    "<p>Un été à la mer, où le héros découvre la vérité sur sa famille.</p>"
    "</body></html>"
).encode("latin-1")


async def _latin1(request):
    return web.Response(body=LATIN1_PAGE, content_type="text/html")


async def _latin1_declared(request):
    return web.Response(body=LATIN1_PAGE, content_type="text/html", charset="iso-8859-1")


@pytest.fixture
async def server():
    app = web.Application()
    app.router.add_get("/ok", _ok)
    app.router.add_get("/missing", _missing)
    app.router.add_get("/latin1", _latin1)
    app.router.add_get("/latin1-declared", _latin1_declared)

    test_server = test_utils.TestServer(app)
    await test_server.start_server()
    yield test_server
    await test_server.close()


async def test_fetch_parses_page(server):
    fetcher = HttpFetcher(timeout=5)
    try:
        document = await fetcher.fetch(str(server.make_url("/ok")))
    finally:
        await fetcher.close()

    assert document.first_text(["h1"]) == "Hello"
    assert document.url.endswith("/ok")


async def test_http_error_status_raises(server):
    fetcher = HttpFetcher(timeout=5)
    try:
        with pytest.raises(NetworkError) as exc_info:
            await fetcher.fetch(str(server.make_url("/missing")))
    finally:
        await fetcher.close()

    assert exc_info.value.status_code == 404


async def test_connection_failure_raises():
    fetcher = HttpFetcher(timeout=5)
    try:
        with pytest.raises(NetworkError) as exc_info:
            await fetcher.fetch("http://127.0.0.1:1/")
    finally:
        await fetcher.close()

    assert exc_info.value.status_code is None
    assert exc_info.value.url == "http://127.0.0.1:1/"


@pytest.mark.parametrize("path", ["/latin1", "/latin1-declared"])
async def test_non_utf8_page_is_decoded(server, path):
    fetcher = HttpFetcher(timeout=5)
    try:
        document = await fetcher.fetch(str(server.make_url(path)))
    finally:
        await fetcher.close()

    assert document.first_text(["h1"]) == "Café"
