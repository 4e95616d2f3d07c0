"""HTTP client helper."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Sequence
from typing import Any

import aiohttp

from ...config import DEFAULT_TIMEOUT
from ...core.exceptions import TransportError

logger = logging.getLogger(__name__)

QueryParams = Sequence[tuple[str, str]]


class HTTPClient:
    """Async HTTP client wrapper.

    Query parameters are ordered ``(key, value)`` pairs so that duplicate keys
    reach the server in the order given.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.headers = dict(headers or {})
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

    async def request(
        self,
        method: str,
        url: str,
        params: QueryParams | None = None,
        json_body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Issue a request and return the decoded JSON body.

        Returns:
            Decoded JSON, or None when the response has no body

        Raises:
            TransportError: On connection failures, timeouts, non-2xx statuses
                and bodies that are not JSON
        """
        method = method.upper()
        url = self.build_url(url)
        try:
            async with self.session.request(
                method,
                url,
                params=list(params) if params else None,
                json=json_body,
                headers=headers,
            ) as response:
                try:
                    body = await response.text()
                except UnicodeDecodeError as e:
                    raise TransportError(
                        f"{method} {url} returned an undecodable body",
                        status_code=response.status,
                        method=method,
                        url=url,
                    ) from e
                if response.status >= 400:
                    raise TransportError(
                        f"{method} {url} returned {response.status}: {body[:200]}",
                        status_code=response.status,
                        method=method,
                        url=url,
                    )
        except aiohttp.ClientError as e:
            raise TransportError(f"{method} {url} failed: {e}", method=method, url=url) from e
        except asyncio.TimeoutError as e:
            raise TransportError(f"{method} {url} timed out", method=method, url=url) from e

        logger.debug("http_response", extra={"method": method, "url": url, "status": response.status})

        if not body.strip():
            return None
        try:
            return json.loads(body)
        except ValueError as e:
            raise TransportError(
                f"{method} {url} returned invalid JSON",
                status_code=response.status,
                method=method,
                url=url,
            ) from e

    async def get(
        self,
        url: str,
        params: QueryParams | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET request."""
        return await self.request("GET", url, params=params, headers=headers)

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
