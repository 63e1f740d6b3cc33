"""
HTTP Client for CLI.

Sends one built request and returns the fully read response. Every
failure of the exchange itself surfaces as TransportError; HTTP error
statuses are ordinary responses.
"""

import httpx

from curlite.core.config import get_app_config
from curlite.core.exceptions import TransportError
from curlite.core.logging import get_logger, log_with_source

logger = get_logger(__name__)


class HTTPClient:
    """
    Async HTTP client wrapper.

    Features:
    - One attempt per request, no retries
    - Timeout left to httpx's default policy
    - Structured logging of requests/responses
    - Transport failures mapped to TransportError

    Usage:
        async with HTTPClient() as client:
            response = await client.send(build_request(spec))
    """

    def __init__(
        self,
        follow_redirects: bool | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            follow_redirects: Follow 3xx redirects. If None, reads ClientConfig.
            transport: Custom httpx transport (e.g. httpx.MockTransport in tests).
        """
        config = get_app_config()
        self.follow_redirects = (
            follow_redirects if follow_redirects is not None else config.follow_redirects
        )
        self.user_agent = f"{config.name}/{config.version}"
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the underlying httpx client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                follow_redirects=self.follow_redirects,
                headers={"User-Agent": self.user_agent},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the underlying httpx client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "HTTPClient":
        await self._get_client()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def send(self, request: httpx.Request) -> httpx.Response:
        """
        Send a request and read the whole response body.

        Args:
            request: Request built by curlite.services.request_builder

        Returns:
            httpx.Response with content already loaded

        Raises:
            TransportError: On DNS, connection, TLS, timeout or protocol failure
        """
        client = await self._get_client()

        # Client defaults (User-Agent) are merged only by client.build_request
        for name, value in client.headers.items():
            request.headers.setdefault(name, value)

        log_with_source(
            logger,
            "http",
            "debug",
            "HTTP request",
            method=request.method,
            url=str(request.url),
        )

        try:
            response = await client.send(request)
        except httpx.HTTPError as e:
            log_with_source(
                logger,
                "http",
                "debug",
                "HTTP request failed",
                method=request.method,
                url=str(request.url),
                error=str(e) or type(e).__name__,
            )
            raise TransportError(_describe(e)) from e

        log_with_source(
            logger,
            "http",
            "debug",
            "HTTP response",
            method=request.method,
            url=str(request.url),
            status_code=response.status_code,
        )
        return response


def _describe(error: httpx.HTTPError) -> str:
    """Human-readable cause for a transport failure."""
    detail = str(error) or type(error).__name__
    try:
        url = error.request.url
    except RuntimeError:
        return detail
    return f"{detail} ({url})"
