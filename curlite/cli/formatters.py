"""
Body Formatters.

Decides how a response payload is rendered from its media type. Each
formatter handles one media type; the registry maps a media-type essence
("type/subtype") to its formatter and anything unregistered is written
verbatim. Supporting a new media type means registering a new formatter.

Usage:
    from curlite.cli.formatters import format_body, parse_media_type

    format_body(parse_media_type("application/json; charset=utf-8"), '{"a": 1}', console)
"""

import json
import re
from functools import lru_cache
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from rich.console import Console
from rich.syntax import Syntax, SyntaxTheme

from curlite.core.config import get_app_config
from curlite.core.exceptions import BodyNotValidJsonError, ContentTypeUnparseableError
from curlite.core.logging import get_logger, log_with_source

logger = get_logger(__name__)


# =============================================================================
# Media types
# =============================================================================

# RFC 9110 token characters
_TOKEN = r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+"
_QUOTED = r'"(?:[^"\\]|\\.)*"'
_MEDIA_TYPE_RE = re.compile(rf"\s*({_TOKEN})/({_TOKEN})\s*")
_PARAMETER_RE = re.compile(rf";\s*({_TOKEN})=({_TOKEN}|{_QUOTED})\s*")
_EMPTY_PARAMETER_RE = re.compile(r";\s*")


class MediaType(BaseModel):
    """Parsed Content-Type header value."""

    type: str
    subtype: str
    parameters: dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @property
    def essence(self) -> str:
        """'type/subtype' without parameters."""
        return f"{self.type}/{self.subtype}"

    def __str__(self) -> str:
        params = "".join(f"; {name}={value}" for name, value in self.parameters.items())
        return f"{self.essence}{params}"


def parse_media_type(value: str) -> MediaType:
    """
    Parse a Content-Type header value.

    type and subtype are lower-cased, as are parameter names. Quoted
    parameter values are unquoted.

    Raises:
        ContentTypeUnparseableError: If value is not a valid media type.
    """
    match = _MEDIA_TYPE_RE.match(value)
    if match is None:
        raise ContentTypeUnparseableError(value)

    parameters: dict[str, str] = {}
    pos = match.end()
    while pos < len(value):
        param = _PARAMETER_RE.match(value, pos)
        if param is None:
            # Trailing empty parameter, e.g. "text/plain;"
            empty = _EMPTY_PARAMETER_RE.match(value, pos)
            if empty is not None and empty.end() == len(value):
                break
            raise ContentTypeUnparseableError(value)
        name, raw = param.group(1), param.group(2)
        if raw.startswith('"'):
            raw = re.sub(r"\\(.)", r"\1", raw[1:-1])
        parameters[name.lower()] = raw
        pos = param.end()

    return MediaType(
        type=match.group(1).lower(),
        subtype=match.group(2).lower(),
        parameters=parameters,
    )


# =============================================================================
# Highlighting resources
# =============================================================================


@lru_cache
def get_syntax_theme() -> SyntaxTheme:
    """Load the highlighting theme once per process."""
    return Syntax.get_theme(get_app_config().syntax_theme)


def pretty_json(body: str, indent: int | None = None) -> str:
    """
    Re-serialize a JSON document with stable indentation.

    Key order is preserved and non-ASCII characters are kept as-is.

    Raises:
        BodyNotValidJsonError: If body is not valid JSON.
    """
    if indent is None:
        indent = get_app_config().json_indent
    try:
        document: Any = json.loads(body)
    except ValueError as e:
        raise BodyNotValidJsonError(f"Body is not valid JSON: {e}") from e
    return json.dumps(document, indent=indent, ensure_ascii=False)


# =============================================================================
# Formatters
# =============================================================================


class BodyFormatter:
    """Renders a response body of one media type."""

    def render(self, body: str, console: Console) -> None:
        raise NotImplementedError


class VerbatimFormatter(BodyFormatter):
    """Writes the body unmodified: no markup, highlighting or wrapping."""

    def render(self, body: str, console: Console) -> None:
        # Written as-is, bypassing Rich text processing
        console.file.write(body + "\n")
        console.file.flush()


class JsonFormatter(BodyFormatter):
    """Pretty-prints and highlights JSON, falling back to verbatim output."""

    def __init__(self, fallback: BodyFormatter | None = None) -> None:
        self.fallback = fallback or VerbatimFormatter()

    def render(self, body: str, console: Console) -> None:
        try:
            pretty = pretty_json(body)
        except BodyNotValidJsonError as e:
            log_with_source(logger, "render", "debug", "JSON body fallback", error=e.message)
            self.fallback.render(body, console)
            return

        syntax = Syntax(pretty, "json", theme=get_syntax_theme(), background_color="default")
        console.print(syntax.highlight(pretty), soft_wrap=True, highlight=False)


_FORMATTERS: dict[str, BodyFormatter] = {
    "application/json": JsonFormatter(),
}
_DEFAULT_FORMATTER: BodyFormatter = VerbatimFormatter()


def get_formatter(content_type: MediaType | None) -> BodyFormatter:
    """Return the formatter registered for content_type, or the verbatim one."""
    if content_type is None:
        return _DEFAULT_FORMATTER
    return _FORMATTERS.get(content_type.essence, _DEFAULT_FORMATTER)


def format_body(content_type: MediaType | None, body: str, console: Console) -> None:
    """Render body according to its (optional) media type."""
    get_formatter(content_type).render(body, console)
