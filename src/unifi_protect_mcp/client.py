"""Async HTTP client for the UniFi Protect Integration API.

This module provides a thin async client over httpx with connection
lifecycle management. Every call is a single attempt: there is no retry and
no caching at this layer.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any

import httpx
from loguru import logger

from unifi_protect_mcp.config import ProtectConfig


class ProtectClientError(Exception):
    """Base exception for Protect API client errors.

    Attributes:
        message: Human-readable error description.
        status_code: HTTP status code, when the controller answered.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ProtectAPIError(ProtectClientError):
    """The controller answered with a non-2xx status."""

    pass


class ProtectConnectionError(ProtectClientError):
    """The controller could not be reached or the request timed out."""

    pass


@dataclass(frozen=True)
class BinaryPayload:
    """Raw response body with its MIME type."""

    data: bytes
    mime_type: str


class ProtectClient:
    """Async client for the UniFi Protect Integration API.

    Example:
        >>> config = ProtectConfig.from_env()
        >>> async with ProtectClient(config) as client:
        ...     cameras = await client.get('/cameras')
    """

    def __init__(
        self,
        config: ProtectConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Protect API configuration.
            transport: Optional httpx transport, mainly for tests.
        """
        self.config = config
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._lock = asyncio.Lock()

    async def __aenter__(self) -> ProtectClient:
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    async def connect(self) -> None:
        """Create the underlying HTTP connection pool."""
        async with self._lock:
            if self._client is not None:
                return

            self._client = httpx.AsyncClient(
                base_url=self.config.api_base_url,
                headers={'X-API-KEY': self.config.api_key.get_secret_value()},
                verify=self.config.verify_ssl,
                timeout=httpx.Timeout(self.config.timeout),
                transport=self._transport,
            )
            logger.debug(f'Connected to Protect API at {self.config.api_base_url}')

    async def close(self) -> None:
        """Close the HTTP connection pool."""
        async with self._lock:
            if self._client is not None:
                await self._client.aclose()
                self._client = None
                logger.debug('Disconnected from Protect API')

    @property
    def is_connected(self) -> bool:
        """Check if client is connected."""
        return self._client is not None

    async def _send(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Send one request and reject any non-2xx answer.

        Raises:
            ProtectConnectionError: If the client is not connected, the
                controller is unreachable, or the request timed out.
            ProtectAPIError: If the controller answered with a non-2xx status.
        """
        if self._client is None:
            raise ProtectConnectionError('Client not connected')

        logger.debug(f'{method} {path}')
        try:
            response = await self._client.request(
                method,
                path,
                json=json,
                content=content,
                headers=headers,
            )
        except httpx.TimeoutException as e:
            raise ProtectConnectionError(f'Request timed out: {e}') from e
        except httpx.TransportError as e:
            raise ProtectConnectionError(f'Connection failed: {e}') from e

        if not response.is_success:
            raise ProtectAPIError(
                f'HTTP {response.status_code}: {response.text}',
                status_code=response.status_code,
            )

        return response

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        """Parse JSON responses; return anything else as text."""
        content_type = response.headers.get('content-type', '')
        if 'application/json' in content_type:
            return response.json()
        return response.text

    async def get(self, path: str) -> Any:
        """Make a GET request."""
        return self._decode(await self._send('GET', path))

    async def post(self, path: str, body: Any = None) -> Any:
        """Make a POST request with an optional JSON body."""
        return self._decode(await self._send('POST', path, json=body))

    async def patch(self, path: str, body: Any) -> Any:
        """Make a PATCH request with a JSON body."""
        return self._decode(await self._send('PATCH', path, json=body))

    async def delete(self, path: str) -> Any:
        """Make a DELETE request."""
        return self._decode(await self._send('DELETE', path))

    async def get_binary(self, path: str) -> BinaryPayload:
        """Fetch a binary resource such as a camera snapshot."""
        response = await self._send('GET', path)
        mime_type = response.headers.get('content-type', 'application/octet-stream')
        return BinaryPayload(data=response.content, mime_type=mime_type)

    async def post_binary(self, path: str, data: bytes, content_type: str) -> Any:
        """Upload a raw binary body."""
        response = await self._send(
            'POST',
            path,
            content=data,
            headers={'Content-Type': content_type},
        )
        return self._decode(response)
