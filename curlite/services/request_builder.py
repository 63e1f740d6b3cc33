"""
Request Builder.

Turns a RequestSpec into an httpx.Request. Pure transform: nothing here
touches the network. Sending is HTTPClient's job (curlite.cli.client).

Usage:
    spec = RequestSpec(method=HttpMethod.POST, url="https://example.test", body=pairs)
    request = build_request(spec)
"""

from collections.abc import Iterable

import httpx

from curlite.core.logging import get_logger, log_with_source
from curlite.schemas.request import HttpMethod, KeyValue, RequestSpec

logger = get_logger(__name__)


def build_body(pairs: Iterable[KeyValue]) -> dict[str, str]:
    """Collect pairs into a mapping. Last write wins for duplicate keys."""
    body: dict[str, str] = {}
    for pair in pairs:
        body[pair.key] = pair.value
    return body


def build_request(spec: RequestSpec) -> httpx.Request:
    """
    Build the HTTP request envelope for a spec.

    GET requests have no body. POST requests carry the pairs as a JSON
    object with Content-Type: application/json; values stay strings.
    """
    if spec.method is HttpMethod.GET:
        request = httpx.Request(spec.method.value, spec.url)
    else:
        request = httpx.Request(spec.method.value, spec.url, json=build_body(spec.body))

    log_with_source(
        logger,
        "http",
        "debug",
        "Request built",
        method=spec.method.value,
        url=spec.url,
        body_pairs=len(spec.body),
    )
    return request
