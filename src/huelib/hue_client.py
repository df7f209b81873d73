"""Async HTTP transport for the Hue bridge with connection pooling."""

import logging
from contextlib import asynccontextmanager
from typing import Any, Optional, Tuple

import httpx

from .config import HueConfig
from .exceptions import HueConnectionError, HueTimeoutError

logger = logging.getLogger(__name__)

SUPPORTED_METHODS = ("GET", "PUT", "POST", "DELETE")


class AsyncHueClient:
    """Async HTTP client for one Hue bridge.

    ``send`` performs exactly one round trip and never looks at the payload.
    HTTP status codes are handed back unchanged; only failures to complete
    the exchange are turned into exceptions.
    """

    def __init__(self, config: HueConfig):
        self.base_url = config.base_url
        self.timeout = httpx.Timeout(
            connect=config.timeout_connect,
            read=config.timeout_read,
            write=5.0,
            pool=5.0,
        )
        self.limits = httpx.Limits(
            max_connections=config.max_connections,
            max_keepalive_connections=config.max_keepalive_connections,
        )
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        """Async context manager entry."""
        self._client = httpx.AsyncClient(timeout=self.timeout, limits=self.limits)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self._client:
            await self._client.aclose()
            self._client = None

    @asynccontextmanager
    async def _get_client(self):
        """Get HTTP client (context manager for standalone usage)."""
        if self._client:
            yield self._client
        else:
            async with httpx.AsyncClient(
                timeout=self.timeout, limits=self.limits
            ) as client:
                yield client

    def url_for(self, path: str) -> str:
        """Build the absolute URL of an API path."""
        path = path.strip("/")
        return f"{self.base_url}/{path}" if path else self.base_url

    async def send(
        self, method: str, path: str, body: Optional[Any] = None
    ) -> Tuple[int, bytes]:
        """Send one request and return the status code and raw body."""
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported method: {method}")

        url = self.url_for(path)
        logger.debug(f"{method} /{path.strip('/')} body={body!r}")

        try:
            async with self._get_client() as client:
                if body is None:
                    response = await client.request(method, url)
                else:
                    response = await client.request(method, url, json=body)
        except httpx.TimeoutException as e:
            raise HueTimeoutError(f"Request to bridge timed out: {e}") from e
        except httpx.RequestError as e:
            raise HueConnectionError(f"Request to bridge failed: {e}") from e

        logger.debug(f"{method} /{path.strip('/')} -> {response.status_code}")
        return response.status_code, response.content
