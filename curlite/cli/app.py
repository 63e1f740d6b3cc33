"""
curlite Commands.

Typer application exposing the `get` and `post` commands. Arguments are
validated by parameter callbacks before any network activity; a failing
callback is a usage error (exit 2) naming the offending token.

Usage:
    curlite get https://httpbin.org/get
    curlite post https://httpbin.org/post name=Ann age=30
"""

import asyncio
from typing import Optional

import structlog
import typer
from rich.console import Console

from curlite.cli.client import HTTPClient
from curlite.cli.render import ResponseView, render_response
from curlite.core.config import get_app_config
from curlite.core.exceptions import MalformedPairError, MalformedURLError, TransportError
from curlite.core.logging import get_logger, setup_logging
from curlite.schemas.request import (
    HttpMethod,
    KeyValue,
    RequestSpec,
    parse_key_value,
    validate_url,
)
from curlite.services.request_builder import build_request

app = typer.Typer(
    name="curlite",
    help="curlite - a tiny HTTP client that pretty-prints responses.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

err_console = Console(stderr=True)

logger = get_logger(__name__)


def _url_callback(value: str) -> str:
    try:
        return validate_url(value)
    except MalformedURLError as e:
        raise typer.BadParameter(e.message) from e


def _pairs_callback(values: Optional[list[str]]) -> list[KeyValue]:
    pairs = []
    for token in values or []:
        try:
            pairs.append(parse_key_value(token))
        except MalformedPairError as e:
            raise typer.BadParameter(e.message) from e
    return pairs


def _version_callback(value: bool) -> None:
    if value:
        config = get_app_config()
        typer.echo(f"{config.name} {config.version}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """
    curlite - a tiny HTTP client.

    Sends one GET or POST request and prints the status line, headers and
    body. JSON bodies are pretty-printed and highlighted.
    """
    setup_logging()
    structlog.contextvars.bind_contextvars(source="cli")


@app.command()
def get(
    url: str = typer.Argument(..., callback=_url_callback, help="Absolute URL to fetch."),
) -> None:
    """
    Send an HTTP GET request.

    Examples:
        curlite get https://httpbin.org/get
    """
    _run(RequestSpec(method=HttpMethod.GET, url=url))


@app.command()
def post(
    url: str = typer.Argument(..., callback=_url_callback, help="Absolute URL to post to."),
    body: Optional[list[str]] = typer.Argument(
        None,
        callback=_pairs_callback,
        metavar="[KEY=VALUE]...",
        help="Body fields, sent as a JSON object of strings.",
    ),
) -> None:
    """
    Send an HTTP POST request with a JSON body.

    Examples:
        curlite post https://httpbin.org/post name=Ann age=30
    """
    _run(RequestSpec(method=HttpMethod.POST, url=url, body=tuple(body or ())))


def _run(spec: RequestSpec) -> None:
    """Send the request and render the response. Exit 1 on transport failure."""
    logger.debug("Command invoked", method=spec.method.value, url=spec.url)
    try:
        view = asyncio.run(_send(spec))
    except TransportError as e:
        err_console.print(f"Error: {e.message}", style="red", markup=False, highlight=False)
        raise typer.Exit(1) from e

    render_response(view, Console())


async def _send(spec: RequestSpec) -> ResponseView:
    """Async implementation of a single request/response cycle."""
    async with HTTPClient() as client:
        response = await client.send(build_request(spec))
    return ResponseView.from_response(response)


def run() -> None:
    """Console script entry point."""
    app()
