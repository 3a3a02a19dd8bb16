import json

import pytest
from typer.testing import CliRunner

from krx18 import __version__
from krx18.cli import app
from krx18.cli import context

from tests.conftest import FakeFetcher, HOME_PAGE, SEARCH_PAGE, DETAIL_PAGE, BASE_URL


runner = CliRunner()


@pytest.fixture
def config_args(tmp_path):
    return ["--config-dir", str(tmp_path / "config")]


@pytest.fixture(autouse=True)
def fetcher():
    fake = FakeFetcher({
        BASE_URL: HOME_PAGE,
        f"{BASE_URL}/?s=the+matrix": SEARCH_PAGE,
        f"{BASE_URL}/movie/the-matrix": DETAIL_PAGE,
    })
    context.set_fetcher(fake)
    yield fake
    context.set_fetcher(None)
    context.set_base_url_override(None)


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_catalog_json(config_args):
    result = runner.invoke(app, config_args + ["catalog", "--json"])

    assert result.exit_code == 0, result.output
    sections = json.loads(result.stdout)
    assert sections[0]["name"] == "Latest"
    assert [entry["title"] for entry in sections[0]["entries"]] == ["Alpha", "Beta", "Gamma"]


def test_catalog_limit(config_args):
    result = runner.invoke(app, config_args + ["catalog", "--json", "--limit", "1"])
    assert len(json.loads(result.stdout)[0]["entries"]) == 1


def test_catalog_table(config_args):
    result = runner.invoke(app, config_args + ["catalog"])
    assert result.exit_code == 0, result.output
    assert "Alpha" in result.stdout


def test_search_json(config_args):
    result = runner.invoke(app, config_args + ["search", "the matrix", "--json"])

    assert result.exit_code == 0, result.output
    assert [entry["title"] for entry in json.loads(result.stdout)] == ["The Matrix", "The Matrix Reloaded"]


def test_search_too_short(config_args):
    result = runner.invoke(app, config_args + ["search", "a"])
    assert result.exit_code == 1


def test_detail_json(config_args):
    result = runner.invoke(app, config_args + ["detail", "/movie/the-matrix", "--json"])

    assert result.exit_code == 0, result.output
    record = json.loads(result.stdout)
    assert record["title"] == "The Matrix"
    assert record["media_urls"][0] == "https://krx18.com/media/matrix.mp4"


def test_links_json(config_args):
    result = runner.invoke(app, config_args + ["links", "/movie/the-matrix", "--json"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == ["https://player.vimeo.com/video/42"]


def test_network_error_exits_with_failure(config_args):
    result = runner.invoke(app, config_args + ["detail", "/movie/missing"])
    assert result.exit_code == 1


def test_base_url_override(config_args, fetcher):
    fetcher.pages["https://mirror.example"] = HOME_PAGE
    result = runner.invoke(app, config_args + ["--base-url", "https://mirror.example", "catalog", "--json"])

    assert result.exit_code == 0, result.output
    assert fetcher.calls == ["https://mirror.example"]
    assert json.loads(result.stdout)[0]["entries"][0]["url"] == "https://mirror.example/movie/alpha"


def test_config_set_and_get(config_args):
    result = runner.invoke(app, config_args + ["config", "set", "provider.timeout", "60"])
    assert result.exit_code == 0, result.output

    result = runner.invoke(app, config_args + ["config", "get", "provider.timeout"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "60"


def test_config_get_unknown_key(config_args):
    result = runner.invoke(app, config_args + ["config", "get", "provider.nope"])
    assert result.exit_code == 1


def test_config_set_invalid_value(config_args):
    result = runner.invoke(app, config_args + ["config", "set", "provider.timeout", "1"])
    assert result.exit_code == 1


def test_config_reset(config_args):
    runner.invoke(app, config_args + ["config", "set", "search.max_results", "5"])
    result = runner.invoke(app, config_args + ["config", "reset", "--yes"])
    assert result.exit_code == 0

    result = runner.invoke(app, config_args + ["config", "get", "search.max_results"])
    assert result.stdout.strip() == "50"


def test_invalid_base_url_override(config_args, fetcher):
    result = runner.invoke(app, config_args + ["--base-url", "mirror.example", "catalog"])

    assert result.exit_code == 1
    assert fetcher.calls == []


@pytest.mark.parametrize("command", ["detail", "links"])
def test_blank_url_is_rejected(config_args, fetcher, command):
    result = runner.invoke(app, config_args + [command, "  "])

    assert result.exit_code == 1
    assert fetcher.calls == []
