"""HTTP client helper."""

from __future__ import annotations

import asyncio
from typing import Any

import aiohttp

from ...config import DEFAULT_HTTP_TIMEOUT
from ...core.exceptions import FormatError, TransportError


class HTTPClient:
    """Async HTTP client wrapper.

    Request timeouts are owned here; the retrieval and refresh layers impose none.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.headers = {"Content-Type": "application/json", **(headers or {})}
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout, headers=self.headers)
        return self._session

    def build_url(self, url: str) -> str:
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url.rstrip('/')}/{url.lstrip('/')}"
        return url

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET request returning the decoded JSON body.

        Raises:
            TransportError: Network failure, timeout or non-2xx status
            FormatError: Body is not valid JSON
        """
        url = self.build_url(url)
        try:
            async with self.session.get(url, params=params, headers=headers) as response:
                if response.status >= 400:
                    raise TransportError(
                        f"Request failed: {response.status} {response.reason or ''}".rstrip(),
                        status_code=response.status,
                    )
                try:
                    return await response.json(content_type=None)
                except ValueError as e:
                    raise FormatError(status_code=response.status) from e
        except aiohttp.ClientError as e:
            raise TransportError(f"Request failed: {e}") from e
        except asyncio.TimeoutError as e:
            raise TransportError(f"Request timed out after {self.timeout.total}s") from e

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
