"""Async HTTP transport for the Arcaea Unlimited API.

This module wraps an ``httpx.AsyncClient`` and provides the three kinds of GET
the endpoint callers need: JSON envelopes decoded into typed content, raw
bytes for image and audio assets, and UTF-8 text for chart files. Each call
performs exactly one request; failures are raised to the caller.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from httpx import AsyncClient, HTTPError, Response

from aua.client.envelope import parse_envelope, unwrap_envelope
from aua.client.exceptions import (
    AuaAPIError,
    AuaMalformedResponseError,
    AuaTransportError,
)
from aua.config import ClientConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AuaHTTPClient:
    """Async HTTP transport shared by all AUA endpoint callers.

    The transport either owns its ``httpx.AsyncClient`` (created by
    ``connect()`` and released by ``close()``) or borrows one passed in by
    the caller, which it never closes.

    Example:
        async with AuaHTTPClient(ClientConfig(base_url="https://aua.example/v5")) as http:
            body = await http.get_bytes("assets/icon", "?partner=0")
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        client: AsyncClient | None = None,
    ):
        """Initialize the transport.

        Args:
            config: Base URL, credentials and timeout.
            client: Optional externally managed httpx client. Its own base URL
                and headers are used as is.
        """
        self.config = config
        self._client: AsyncClient | None = client
        self._owns_client = client is None

    @property
    def base_url(self) -> str:
        return self.config.base_url

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    async def __aenter__(self) -> AuaHTTPClient:
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Async context manager exit."""
        await self.close()

    async def connect(self) -> None:
        """Create the underlying httpx client if there is none yet."""
        if self._client is None:
            self._client = AsyncClient(
                base_url=self.config.base_url + "/",
                timeout=self.config.timeout,
                headers=self.config.headers(),
            )
            self._owns_client = True
            logger.debug("HTTP client connected to %s", self.config.base_url)

    async def close(self) -> None:
        """Release the httpx client if this transport created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
            logger.debug("HTTP client closed")

    # =========================================================================
    # Request Methods
    # =========================================================================

    async def get_content(
        self,
        endpoint: str,
        query: str,
        content_type: type[T],
    ) -> T:
        """GET a JSON endpoint and return its envelope content.

        Args:
            endpoint: Path relative to the base URL (e.g. "song/info").
            query: Query suffix built by QueryBuilder ("" or "?...").
            content_type: Expected type of the envelope content.

        Returns:
            The validated envelope content.

        Raises:
            AuaAPIError: If the server reports a negative status.
            AuaMalformedResponseError: If the envelope is malformed.
            AuaTransportError: If the request fails or returns a non-2xx
                status without a failure envelope.
        """
        response = await self._get(endpoint, query)

        if not response.is_success:
            # The server may still explain the failure in an envelope.
            try:
                envelope = parse_envelope(response.content)
            except AuaMalformedResponseError:
                envelope = None
            if (
                envelope is not None
                and envelope.is_error
                and envelope.message is not None
            ):
                raise AuaAPIError(envelope.status, envelope.message)
            raise self._status_error(response)

        envelope = parse_envelope(response.content)
        return unwrap_envelope(envelope, content_type)

    async def get_bytes(self, endpoint: str, query: str) -> bytes:
        """GET a binary endpoint and return the body unchanged.

        Raises:
            AuaTransportError: If the request fails or returns a non-2xx status.
        """
        response = await self._get(endpoint, query)
        if not response.is_success:
            raise self._status_error(response)
        return response.content

    async def get_text(self, endpoint: str, query: str) -> str:
        """GET a text endpoint and return the body decoded as UTF-8.

        Raises:
            AuaTransportError: If the request fails or returns a non-2xx status.
            AuaMalformedResponseError: If the body is not valid UTF-8.
        """
        body = await self.get_bytes(endpoint, query)
        try:
            return body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise AuaMalformedResponseError(
                f"Response body is not UTF-8 text: {e}"
            ) from e

    # =========================================================================
    # Internal HTTP Methods
    # =========================================================================

    async def _get(self, endpoint: str, query: str) -> Response:
        if self._client is None:
            raise AuaTransportError("Client not connected. Call connect() first.")

        url = endpoint.lstrip("/") + query
        logger.debug("Request GET %s", url)
        try:
            response = await self._client.get(url)
        except HTTPError as e:
            raise AuaTransportError(f"HTTP error: {e}") from e

        logger.debug("Response %d for GET %s", response.status_code, url)
        return response

    @staticmethod
    def _status_error(response: Response) -> AuaTransportError:
        return AuaTransportError(
            f"HTTP {response.status_code}: {response.reason_phrase}",
            status_code=response.status_code,
        )
