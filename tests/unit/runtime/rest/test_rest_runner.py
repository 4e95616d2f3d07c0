"""Precise unit tests for RestRunner.

Tests focus on endpoint execution and parameter building.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from crunchy.catalog.core import TransportError
from crunchy.catalog.runtime.rest import ResponseAdapter, RestEndpointSpec, RestRunner, RESTTransport


class TestRestRunner:
    """Test RestRunner endpoint execution."""

    @pytest.fixture
    def mock_transport(self):
        transport = MagicMock(spec=RESTTransport)
        transport.request = AsyncMock(return_value={"data": "test"})
        return transport

    @pytest.fixture
    def runner(self, mock_transport):
        return RestRunner(mock_transport)

    @pytest.fixture
    def mock_adapter(self):
        adapter = MagicMock(spec=ResponseAdapter)
        adapter.parse = MagicMock(return_value={"parsed": "data"})
        return adapter

    @pytest.mark.asyncio
    async def test_run_get_endpoint(self, runner, mock_transport, mock_adapter):
        spec = RestEndpointSpec(
            id="test",
            method="get",
            build_path=lambda p: f"/test/{p['id']}",
            build_query=lambda p: [("param", p["param"]), ("param", "again")],
        )
        params = {"id": "123", "param": "value"}

        result = await runner.run(spec=spec, adapter=mock_adapter, params=params)

        assert result == {"parsed": "data"}
        mock_transport.request.assert_called_once_with(
            "GET",
            "/test/123",
            params=[("param", "value"), ("param", "again")],
            json_body=None,
            headers=None,
        )
        mock_adapter.parse.assert_called_once_with({"data": "test"}, params)

    @pytest.mark.asyncio
    async def test_run_body_and_headers(self, runner, mock_transport, mock_adapter):
        spec = RestEndpointSpec(
            id="test",
            method="PATCH",
            build_path=lambda p: "/test",
            build_body=lambda p: {"data": p["data"]},
            build_headers=lambda p: {"X-Locale": "en-US"},
        )

        await runner.run(spec=spec, adapter=mock_adapter, params={"data": "value"})

        mock_transport.request.assert_called_once_with(
            "PATCH", "/test", params=None, json_body={"data": "value"}, headers={"X-Locale": "en-US"}
        )

    @pytest.mark.asyncio
    async def test_default_adapter_passes_response_through(self, runner):
        spec = RestEndpointSpec(id="test", method="GET", build_path=lambda p: "/test")

        assert await runner.run(spec=spec, adapter=ResponseAdapter(), params={}) == {"data": "test"}

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self, runner, mock_transport, mock_adapter):
        mock_transport.request = AsyncMock(side_effect=TransportError("down", status_code=503))
        spec = RestEndpointSpec(id="test", method="GET", build_path=lambda p: "/test")

        with pytest.raises(TransportError):
            await runner.run(spec=spec, adapter=mock_adapter, params={})

        mock_adapter.parse.assert_not_called()
