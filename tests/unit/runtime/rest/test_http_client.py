"""Precise unit tests for HTTPClient.

Tests focus on session management, URL building, JSON decoding and the
mapping of HTTP failures onto TransportError.
"""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from crunchy.catalog.core import TransportError
from crunchy.catalog.runtime.rest import HTTPClient


def mock_session_with(status: int = 200, body: str = "{}") -> tuple[MagicMock, AsyncMock]:
    mock_response = AsyncMock()
    mock_response.status = status
    mock_response.text = AsyncMock(return_value=body)
    mock_response.__aenter__ = AsyncMock(return_value=mock_response)
    mock_response.__aexit__ = AsyncMock(return_value=None)

    mock_session = MagicMock()
    mock_session.closed = False
    mock_session.request = MagicMock(return_value=mock_response)
    return mock_session, mock_response


class TestHTTPClientSessionManagement:
    """Test HTTPClient session management."""

    def test_init(self):
        client = HTTPClient(timeout=10.0, headers={"Authorization": "Bearer x"})
        assert client.timeout.total == 10.0
        assert client.headers == {"Authorization": "Bearer x"}
        assert client._session is None

    @pytest.mark.asyncio
    async def test_session_property_creates_session(self):
        """Test session property creates session when needed."""
        client = HTTPClient()
        session = client.session
        assert isinstance(session, aiohttp.ClientSession)
        assert client._session is session
        await client.close()

    @pytest.mark.asyncio
    async def test_session_property_recreates_closed_session(self):
        client = HTTPClient()
        session1 = client.session
        await session1.close()

        session2 = client.session
        assert session1 is not session2
        assert not session2.closed
        await client.close()

    @pytest.mark.asyncio
    async def test_close_idempotent(self):
        client = HTTPClient()
        await client.close()
        await client.close()

    @pytest.mark.asyncio
    async def test_context_manager(self):
        async with HTTPClient() as client:
            assert client.session is not None

        assert client._session is None or client._session.closed


class TestHTTPClientBuildUrl:
    """Test URL building."""

    @pytest.mark.parametrize(
        "base_url,url,expected",
        [
            ("https://api.example.com", "/content/v2/x", "https://api.example.com/content/v2/x"),
            ("https://api.example.com/", "content/v2/x", "https://api.example.com/content/v2/x"),
            ("https://api.example.com", "https://other.example.com/x", "https://other.example.com/x"),
            (None, "/content/v2/x", "/content/v2/x"),
        ],
    )
    def test_build_url(self, base_url, url, expected):
        assert HTTPClient(base_url=base_url).build_url(url) == expected


class TestHTTPClientRequest:
    """Test request execution."""

    @pytest.mark.asyncio
    async def test_request_returns_json(self):
        client = HTTPClient(base_url="https://api.example.com")
        mock_session, _ = mock_session_with(body='{"total": 1, "data": []}')
        client._session = mock_session

        result = await client.request(
            "get", "/items", params=[("n", "20"), ("locale", "en-US")], headers={"X-Test": "1"}
        )

        assert result == {"total": 1, "data": []}
        mock_session.request.assert_called_once_with(
            "GET",
            "https://api.example.com/items",
            params=[("n", "20"), ("locale", "en-US")],
            json=None,
            headers={"X-Test": "1"},
        )

    @pytest.mark.asyncio
    async def test_request_sends_json_body(self):
        client = HTTPClient()
        mock_session, _ = mock_session_with(body='{"rating": "5s"}')
        client._session = mock_session

        await client.request("PUT", "https://api.example.com/rating", json_body={"rating": "5s"})

        kwargs = mock_session.request.call_args.kwargs
        assert kwargs["json"] == {"rating": "5s"}
        assert kwargs["params"] is None

    @pytest.mark.asyncio
    async def test_empty_body_returns_none(self):
        """Test responses without a body decode to None."""
        client = HTTPClient()
        mock_session, _ = mock_session_with(status=204, body="")
        client._session = mock_session

        assert await client.request("DELETE", "https://api.example.com/review") is None

    @pytest.mark.asyncio
    async def test_error_status_raises(self):
        client = HTTPClient()
        mock_session, _ = mock_session_with(status=404, body='{"error": "not found"}')
        client._session = mock_session

        with pytest.raises(TransportError) as exc_info:
            await client.get("https://api.example.com/missing")

        assert exc_info.value.status_code == 404
        assert exc_info.value.method == "GET"
        assert exc_info.value.url == "https://api.example.com/missing"

    @pytest.mark.asyncio
    async def test_invalid_json_raises(self):
        client = HTTPClient()
        mock_session, _ = mock_session_with(body="<html>")
        client._session = mock_session

        with pytest.raises(TransportError) as exc_info:
            await client.get("https://api.example.com/page")

        assert exc_info.value.status_code == 200

    @pytest.mark.asyncio
    async def test_undecodable_body_raises(self):
        """Test a body that is not valid text surfaces as TransportError."""
        client = HTTPClient()
        mock_session, mock_response = mock_session_with()
        mock_response.text = AsyncMock(
            side_effect=UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
        )
        client._session = mock_session

        with pytest.raises(TransportError) as exc_info:
            await client.get("https://api.example.com/page")

        assert exc_info.value.status_code == 200
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    @pytest.mark.asyncio
    async def test_client_error_wrapped(self):
        client = HTTPClient()
        mock_session = MagicMock()
        mock_session.closed = False
        mock_session.request = MagicMock(side_effect=aiohttp.ClientConnectionError("refused"))
        client._session = mock_session

        with pytest.raises(TransportError) as exc_info:
            await client.get("https://api.example.com/x")

        assert isinstance(exc_info.value.__cause__, aiohttp.ClientConnectionError)
        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_timeout_wrapped(self):
        client = HTTPClient()
        mock_session = MagicMock()
        mock_session.closed = False
        mock_session.request = MagicMock(side_effect=asyncio.TimeoutError())
        client._session = mock_session

        with pytest.raises(TransportError, match="timed out"):
            await client.get("https://api.example.com/x")
