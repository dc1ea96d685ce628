"""Unit tests for HTTPClient against a local aiohttp server."""

from __future__ import annotations

import asyncio

import aiohttp
import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer as AiohttpTestServer

from reportkit.sync.core import FormatError, TransportError
from reportkit.sync.runtime.rest import HTTPClient


async def _leads(request: web.Request) -> web.Response:
    return web.json_response({"success": True, "page": request.query.get("page")})


async def _boom(request: web.Request) -> web.Response:
    return web.Response(status=503, reason="Service Unavailable")


async def _not_json(request: web.Request) -> web.Response:
    return web.Response(text="<html>login</html>", content_type="text/html")


async def _slow(request: web.Request) -> web.Response:
    await asyncio.sleep(1.0)
    return web.json_response({})


@pytest_asyncio.fixture
async def server():
    app = web.Application()
    app.router.add_get("/leads", _leads)
    app.router.add_get("/boom", _boom)
    app.router.add_get("/html", _not_json)
    app.router.add_get("/slow", _slow)
    srv = AiohttpTestServer(app)
    await srv.start_server()
    yield srv
    await srv.close()


class TestHTTPClientSessionManagement:
    """Test HTTPClient session management."""

    def test_init(self):
        """Test HTTPClient initialization."""
        client = HTTPClient(timeout=10.0, headers={"Authorization": "Bearer t"})
        assert client.timeout.total == 10.0
        assert client._session is None
        assert client.headers["Authorization"] == "Bearer t"
        assert client.headers["Content-Type"] == "application/json"

    def test_build_url(self):
        """Test relative paths are joined to base_url."""
        client = HTTPClient(base_url="https://dash.example.com/")
        assert client.build_url("/api/admin/leads") == "https://dash.example.com/api/admin/leads"
        assert client.build_url("https://other.example.com/x") == "https://other.example.com/x"

    @pytest.mark.asyncio
    async def test_session_property_recreates_closed_session(self):
        """Test session property recreates closed session."""
        client = HTTPClient()
        session1 = client.session
        await session1.close()

        session2 = client.session
        assert session1 is not session2
        assert isinstance(session2, aiohttp.ClientSession)
        await client.close()

    @pytest.mark.asyncio
    async def test_close_idempotent(self):
        """Test close() can be called multiple times."""
        client = HTTPClient()
        await client.close()
        await client.close()


class TestHTTPClientRequests:
    """Test HTTPClient.get error mapping."""

    @pytest.mark.asyncio
    async def test_get_returns_json(self, server):
        """Test a 200 JSON response is decoded."""
        async with HTTPClient(base_url=str(server.make_url("/"))) as client:
            body = await client.get("/leads", params={"page": "2"})

        assert body == {"success": True, "page": "2"}

    @pytest.mark.asyncio
    async def test_non_2xx_raises_transport_error(self, server):
        """Test a 503 maps to TransportError with status code."""
        async with HTTPClient(base_url=str(server.make_url("/"))) as client:
            with pytest.raises(TransportError) as exc_info:
                await client.get("/boom")

        assert exc_info.value.status_code == 503
        assert "Service Unavailable" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_invalid_json_raises_format_error(self, server):
        """Test a non-JSON body maps to FormatError."""
        async with HTTPClient(base_url=str(server.make_url("/"))) as client:
            with pytest.raises(FormatError):
                await client.get("/html")

    @pytest.mark.asyncio
    async def test_timeout_raises_transport_error(self, server):
        """Test a request exceeding the timeout maps to TransportError."""
        async with HTTPClient(base_url=str(server.make_url("/")), timeout=0.1) as client:
            with pytest.raises(TransportError) as exc_info:
                await client.get("/slow")

        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_connection_error_raises_transport_error(self):
        """Test an unreachable host maps to TransportError."""
        async with HTTPClient(base_url="http://127.0.0.1:9", timeout=2.0) as client:
            with pytest.raises(TransportError):
                await client.get("/leads")
