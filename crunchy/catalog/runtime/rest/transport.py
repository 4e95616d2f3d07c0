"""REST transport delegating to HTTPClient."""

from __future__ import annotations

from typing import Any

from ...config import DEFAULT_TIMEOUT
from .http_client import HTTPClient, QueryParams


class RESTTransport:
    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
    ) -> None:
        self._http = HTTPClient(base_url=base_url, timeout=timeout, headers=headers)

    async def request(
        self,
        method: str,
        path: str,
        params: QueryParams | None = None,
        json_body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self._http.request(
            method, path, params=params, json_body=json_body, headers=headers
        )

    async def close(self) -> None:
        await self._http.close()
