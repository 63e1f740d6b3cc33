"""
Request Schemas.

Typed representation of a validated CLI invocation. A RequestSpec is
built once from command-line arguments and is immutable afterwards.
"""

from enum import Enum

import httpx
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from curlite.core.exceptions import MalformedPairError, MalformedURLError


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"


class KeyValue(BaseModel):
    """A single key=value token destined for a POST body."""

    key: str
    value: str

    model_config = ConfigDict(frozen=True)


def parse_key_value(token: str) -> KeyValue:
    """
    Parse a key=value token.

    Splits on the first '=' only, so the value keeps any further '='
    characters. Keys and values are taken literally, without trimming.

    Raises:
        MalformedPairError: If the token contains no '='.
    """
    key, sep, value = token.partition("=")
    if not sep:
        raise MalformedPairError(token)
    return KeyValue(key=key, value=value)


def validate_url(raw: str) -> str:
    """
    Check that raw is an absolute URL with a scheme and a host.

    Returns the input unchanged.

    Raises:
        MalformedURLError: If the URL cannot be parsed or is not absolute.
    """
    try:
        url = httpx.URL(raw)
    except (httpx.InvalidURL, TypeError) as e:
        raise MalformedURLError(raw, str(e)) from e

    if not url.scheme:
        raise MalformedURLError(raw, "missing scheme")
    if not url.host:
        raise MalformedURLError(raw, "missing host")
    return raw


class RequestSpec(BaseModel):
    """
    Validated, immutable description of the request to send.

    GET carries no body. POST may carry zero or more pairs; zero pairs
    sends an empty JSON object.
    """

    method: HttpMethod
    url: str
    body: tuple[KeyValue, ...] = ()

    model_config = ConfigDict(frozen=True)

    @field_validator("url")
    @classmethod
    def _check_url(cls, value: str) -> str:
        return validate_url(value)

    @model_validator(mode="after")
    def _check_body(self) -> "RequestSpec":
        if self.method is HttpMethod.GET and self.body:
            raise ValueError("GET requests carry no body")
        return self
