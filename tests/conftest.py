"""
Root Pytest Fixtures.

Shared fixtures available to all test types. Nothing here touches the
network: HTTP exchanges go through httpx.MockTransport.
"""

import io
import logging
from collections.abc import Callable, Generator

import httpx
import pytest
from rich.console import Console

from curlite.core.logging import setup_logging


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(autouse=True, scope="session")
def _quiet_logging() -> None:
    """Route structlog through stdlib at WARNING so debug records stay out of output."""
    setup_logging(level="WARNING")


@pytest.fixture
def restore_root_logging() -> Generator[None, None, None]:
    """Restore root logger handlers and level after a test reconfigures logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


# =============================================================================
# Console Fixtures
# =============================================================================


class CapturedConsole:
    """Rich console writing into a buffer, plain text unless styled=True."""

    def __init__(self, styled: bool = False) -> None:
        self.buffer = io.StringIO()
        self.console = Console(
            file=self.buffer,
            color_system="truecolor" if styled else None,
            force_terminal=styled,
            width=80,
        )

    @property
    def text(self) -> str:
        return self.buffer.getvalue()

    @property
    def lines(self) -> list[str]:
        return self.text.splitlines()


@pytest.fixture
def captured() -> CapturedConsole:
    """
    Provide a console whose output can be inspected.

    Usage:
        def test_render(captured):
            render_response(view, captured.console)
            assert "200" in captured.lines[0]
    """
    return CapturedConsole()


@pytest.fixture
def styled() -> CapturedConsole:
    """
    Provide a truecolor terminal console so ANSI styling can be asserted.

    Usage:
        def test_colour(styled):
            render_response(view, styled.console)
            assert "\\x1b[34m" in styled.text
    """
    return CapturedConsole(styled=True)


# =============================================================================
# HTTP Fixtures
# =============================================================================


@pytest.fixture
def make_response() -> Callable[..., httpx.Response]:
    """
    Factory for loaded httpx responses.

    Usage:
        response = make_response(200, [("Content-Type", "application/json")], '{"a": 1}')
    """

    def _make(
        status_code: int = 200,
        headers: list[tuple[str, str]] | None = None,
        body: str = "",
        url: str = "https://example.test/",
    ) -> httpx.Response:
        return httpx.Response(
            status_code,
            headers=headers or [],
            content=body.encode("utf-8"),
            request=httpx.Request("GET", url),
        )

    return _make


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it handled."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def recording_transport() -> Callable[..., RecordingTransport]:
    """
    Factory for a recording mock transport.

    Usage:
        transport = recording_transport(lambda request: httpx.Response(204))
        async with HTTPClient(transport=transport) as client:
            await client.send(request)
        assert transport.requests[0].method == "GET"
    """
    return RecordingTransport
