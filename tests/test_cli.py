from __future__ import annotations

import httpx
import pytest
from typer.testing import CliRunner

from cli import doctor
from cli import main as cli_main
from conftest import COLLECTION_XML, ERRORS_XML, HOT_XML, SEARCH_XML


@pytest.fixture(scope="session")
def runner():
    """Provides a Typer CliRunner instance."""
    return CliRunner()


@pytest.fixture
def serve(monkeypatch, make_api):
    """Points the CLI at a mock server answering with `handler`."""

    def _serve(handler):
        api, server = make_api(handler)
        monkeypatch.setattr(cli_main, "_build_api", lambda: api)
        return server

    return _serve


def test_hot_command(runner, serve):
    serve(lambda request: httpx.Response(200, text=HOT_XML))

    result = runner.invoke(cli_main.app, ["hot"])

    assert result.exit_code == 0, result.output
    assert "Ark Nova" in result.output


def test_collection_command(runner, serve):
    server = serve(lambda request: httpx.Response(200, text=COLLECTION_XML))

    result = runner.invoke(cli_main.app, ["collection", "alice"])

    assert result.exit_code == 0, result.output
    assert "Catan" in result.output
    assert server.requests[0].url.params["own"] == "1"


def test_collection_wishlist_brief(runner, serve):
    server = serve(lambda request: httpx.Response(200, text=COLLECTION_XML))

    result = runner.invoke(cli_main.app, ["collection", "alice", "--wishlist", "--brief"])

    assert result.exit_code == 0, result.output
    params = server.requests[0].url.params
    assert params["wishlist"] == "1"
    assert params["brief"] == "1"


def test_collection_unknown_user(runner, serve):
    serve(lambda request: httpx.Response(200, text=ERRORS_XML))

    result = runner.invoke(cli_main.app, ["collection", "nobody"])

    assert result.exit_code == 1
    assert "Invalid username specified" in result.output


def test_search_command(runner, serve):
    server = serve(lambda request: httpx.Response(200, text=SEARCH_XML))

    result = runner.invoke(cli_main.app, ["search", "catan", "--exact", "--type", "boardgameexpansion"])

    assert result.exit_code == 0, result.output
    assert server.requests[0].url.params["type"] == "boardgameexpansion"
    assert server.requests[0].url.params["exact"] == "1"


def test_server_error_exits_with_code_1(runner, serve):
    serve(lambda request: httpx.Response(503))

    result = runner.invoke(cli_main.app, ["hot"])

    assert result.exit_code == 1
    assert "HTTP 503" in result.output


def test_doctor_reports_connectivity(runner, monkeypatch, make_api):
    api, _ = make_api(lambda request: httpx.Response(200, text=HOT_XML))
    monkeypatch.setattr(doctor, "BoardGameGeekApi", lambda settings: api)

    result = runner.invoke(cli_main.app, ["doctor", "run"])

    assert result.exit_code == 0, result.output
    assert "2 hot items" in result.output


def test_doctor_fails_when_api_is_down(runner, monkeypatch, make_api):
    api, _ = make_api(lambda request: httpx.Response(500))
    monkeypatch.setattr(doctor, "BoardGameGeekApi", lambda settings: api)

    result = runner.invoke(cli_main.app, ["doctor", "run"])

    assert result.exit_code == 1
    assert "FAIL" in result.output


def test_hot_command_with_list_type(runner, serve):
    server = serve(lambda request: httpx.Response(200, text=HOT_XML))

    result = runner.invoke(cli_main.app, ["hot", "--type", "rpg"])

    assert result.exit_code == 0, result.output
    assert server.requests[0].url.params["type"] == "rpg"


def test_hot_command_rejects_thing_types(runner, serve):
    server = serve(lambda request: httpx.Response(200, text=HOT_XML))

    result = runner.invoke(cli_main.app, ["hot", "--type", "rpgitem"])

    assert result.exit_code == 2
    assert server.requests == []
