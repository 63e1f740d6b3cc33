"""Typed models for a validated curlite invocation."""

from curlite.schemas.request import (
    HttpMethod,
    KeyValue,
    RequestSpec,
    parse_key_value,
    validate_url,
)

__all__ = [
    "HttpMethod",
    "KeyValue",
    "RequestSpec",
    "parse_key_value",
    "validate_url",
]
