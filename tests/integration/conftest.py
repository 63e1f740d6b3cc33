"""
Integration Test Fixtures.

Runs the Typer application end to end with the HTTP client bound to a
recording mock transport instead of the network.
"""

from collections.abc import Callable

import httpx
import pytest
from typer.testing import CliRunner

import curlite.cli.app as app_module
from curlite.cli.client import HTTPClient


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def stub_server(monkeypatch, recording_transport) -> Callable[..., object]:
    """
    Bind the CLI's HTTP client to a stubbed handler.

    Usage:
        def test_get(runner, stub_server):
            transport = stub_server(lambda request: httpx.Response(200, text="hi"))
            runner.invoke(app, ["get", "https://example.test/"])
            assert transport.requests[0].method == "GET"
    """

    def _bind(handler: Callable[[httpx.Request], httpx.Response]):
        transport = recording_transport(handler)
        monkeypatch.setattr(app_module, "HTTPClient", lambda: HTTPClient(transport=transport))
        return transport

    return _bind
