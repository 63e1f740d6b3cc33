"""
Response Renderer.

Writes a received response for a human: status line, headers, then the
body through the media-type-aware formatters. Every step always runs, in
this order, whatever the status code.
"""

import json
from collections.abc import Iterable

import httpx
from pydantic import BaseModel, ConfigDict
from rich.console import Console
from rich.text import Text

from curlite.cli.formatters import MediaType, format_body, parse_media_type
from curlite.core.exceptions import ContentTypeUnparseableError
from curlite.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

console = Console()


class ResponseView(BaseModel):
    """Read-only view of a fully received HTTP response."""

    http_version: str
    status_code: int
    reason: str
    headers: tuple[tuple[str, str], ...] = ()
    content_type: MediaType | None = None
    body: str = ""

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ResponseView":
        """Build a view from an httpx response whose content is loaded."""
        encoding = response.headers.encoding
        headers = tuple(
            (name.decode(encoding), value.decode(encoding))
            for name, value in response.headers.raw
        )
        return cls(
            http_version=response.http_version,
            status_code=response.status_code,
            reason=response.reason_phrase,
            headers=headers,
            content_type=detect_content_type(headers),
            body=response.text,
        )


def detect_content_type(headers: Iterable[tuple[str, str]]) -> MediaType | None:
    """
    Find and parse the Content-Type header.

    Returns None when the header is absent or its value is malformed.
    """
    for name, value in headers:
        if name.lower() != "content-type":
            continue
        try:
            return parse_media_type(value)
        except ContentTypeUnparseableError as e:
            log_with_source(logger, "render", "debug", "Ignoring Content-Type", value=e.value)
            return None
    return None


def render_status(view: ResponseView, out: Console) -> None:
    line = f"{view.http_version} {view.status_code} {view.reason}".rstrip()
    out.print(Text(line, style="blue"), soft_wrap=True)
    out.print()


def render_headers(view: ResponseView, out: Console) -> None:
    for name, value in view.headers:
        line = Text.assemble(
            (name, "green"),
            " => ",
            json.dumps(value, ensure_ascii=False),
        )
        out.print(line, soft_wrap=True)
    out.print()


def render_response(view: ResponseView, out: Console | None = None) -> None:
    """
    Render a response to the terminal.

    Args:
        view: Response to render
        out: Target console. Defaults to the module console (stdout).
    """
    out = out or console

    render_status(view, out)
    render_headers(view, out)
    format_body(view.content_type, view.body, out)

    log_with_source(
        logger,
        "render",
        "debug",
        "Response rendered",
        status_code=view.status_code,
        content_type=view.content_type.essence if view.content_type else None,
    )
