"""
Tests for the remote color name lookup and its fallback behaviour.
"""

import asyncio
import json
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import httpx
import pytest

from huewheel.services.colors.model import create_color
from huewheel.services.colors.naming import (
    ColorNameResolver, get_color_name, get_name_resolver, set_name_resolver,
)
from huewheel.services.observability import get_metrics_collector


FALLBACK = "Custom Color"


def respond_with(status_code=200, **kwargs):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, **kwargs)
    return handler


@pytest.fixture
def local_color_api(monkeypatch):
    """A real HTTP server on localhost that names every color Red."""
    for var in ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY", "http_proxy", "https_proxy", "all_proxy"):
        monkeypatch.delenv(var, raising=False)

    class Handler(BaseHTTPRequestHandler):
        protocol_version = "HTTP/1.1"  # keep-alive, so the client pools connections

        def do_GET(self):
            body = json.dumps({"name": {"value": "Red"}}).encode()
            self.send_response(200)
            self.send_header("Content-Type", "application/json")
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)

        def log_message(self, format, *args):
            pass

    server = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}/id"
    server.shutdown()
    server.server_close()


class TestSuccessfulLookup:

    @pytest.mark.asyncio
    async def test_strips_hash_and_queries_by_hex(self, resolver_factory):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url)
            return httpx.Response(200, json={"name": {"value": "Red"}})

        resolver = resolver_factory(handler)
        assert await resolver.resolve("#ff0000") == "Red"
        assert seen[0].params["hex"] == "ff0000"
        assert seen[0].path == "/id"

    @pytest.mark.asyncio
    async def test_shared_resolver(self, color_service):
        assert await get_color_name("#00ffff") == "Cyan"
        assert color_service.requested == ["00ffff"]

    @pytest.mark.asyncio
    async def test_records_resolved_metric(self):
        await get_color_name("#ff0000")
        metrics = get_metrics_collector()
        assert metrics.get_sample("name_lookups_total", {"outcome": "resolved"}) == 1
        assert metrics.get_sample("name_lookup_duration_ms_count") == 1


class TestFallback:
    """Every failure path yields the fallback label instead of raising."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [404, 429, 500, 503])
    async def test_non_success_status(self, resolver_factory, status_code):
        resolver = resolver_factory(respond_with(status_code, json={"name": {"value": "Red"}}))
        assert await resolver.resolve("#ff0000") == FALLBACK

    @pytest.mark.asyncio
    async def test_transport_error(self, resolver_factory):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        resolver = resolver_factory(handler)
        assert await resolver.resolve("#ff0000") == FALLBACK

    @pytest.mark.asyncio
    async def test_timeout(self, resolver_factory):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        resolver = resolver_factory(handler)
        assert await resolver.resolve("#ff0000") == FALLBACK

    @pytest.mark.asyncio
    async def test_unexpected_exception(self, resolver_factory):
        def handler(request: httpx.Request) -> httpx.Response:
            raise RuntimeError("boom")

        resolver = resolver_factory(handler)
        assert await resolver.resolve("#ff0000") == FALLBACK

    @pytest.mark.asyncio
    async def test_invalid_json(self, resolver_factory):
        resolver = resolver_factory(respond_with(200, content=b"<html>not json</html>"))
        assert await resolver.resolve("#ff0000") == FALLBACK

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [
        {},
        {"name": None},
        {"name": {}},
        {"name": {"value": ""}},
        {"name": {"value": 42}},
        ["not", "an", "object"],
    ])
    async def test_missing_name_field(self, resolver_factory, payload):
        resolver = resolver_factory(respond_with(200, json=payload))
        assert await resolver.resolve("#ff0000") == FALLBACK

    @pytest.mark.asyncio
    async def test_custom_fallback_label(self):
        client = httpx.AsyncClient(transport=httpx.MockTransport(respond_with(500)))
        resolver = ColorNameResolver(base_url="https://colors.test/id", fallback_name="Unnamed", client=client)
        assert await resolver.resolve("#ff0000") == "Unnamed"

    @pytest.mark.asyncio
    async def test_records_fallback_metric(self, resolver_factory):
        set_name_resolver(resolver_factory(respond_with(503)))
        await get_color_name("#ff0000")
        metrics = get_metrics_collector()
        assert metrics.get_sample("name_lookups_total", {"outcome": "fallback"}) == 1
        assert metrics.get_sample("name_lookups_total", {"outcome": "resolved"}) == 0

    @pytest.mark.asyncio
    async def test_color_construction_survives_service_outage(self, resolver_factory):
        set_name_resolver(resolver_factory(respond_with(502)))
        color = await create_color("#ff0000")
        assert color.name == FALLBACK
        assert color.rgb == (255, 0, 0)

    @pytest.mark.asyncio
    async def test_slow_service_hits_timeout(self):
        async def stalled(request: httpx.Request) -> httpx.Response:
            await asyncio.sleep(10)
            return httpx.Response(200, json={"name": {"value": "Red"}})

        client = httpx.AsyncClient(transport=httpx.MockTransport(stalled))
        resolver = ColorNameResolver(base_url="https://colors.test/id", timeout=0.05, client=client)
        assert await resolver.resolve("#ff0000") == FALLBACK


class TestResolverLifecycle:

    def test_defaults_from_config(self):
        resolver = ColorNameResolver()
        assert resolver.base_url == "https://www.thecolorapi.com/id"
        assert resolver.fallback_name == FALLBACK
        assert resolver.timeout > 0

    def test_set_none_restores_default(self):
        set_name_resolver(None)
        assert isinstance(get_name_resolver(), ColorNameResolver)
        assert get_name_resolver() is get_name_resolver()

    @pytest.mark.asyncio
    async def test_aclose_keeps_injected_client_open(self):
        client = httpx.AsyncClient(transport=httpx.MockTransport(respond_with(200, json={})))
        resolver = ColorNameResolver(client=client)
        await resolver.aclose()
        assert not client.is_closed
        await client.aclose()

    def test_rejects_invalid_timeout(self):
        with pytest.raises(ValueError):
            ColorNameResolver(timeout=0)
        with pytest.raises(ValueError):
            ColorNameResolver(timeout=-1.0)

    def test_shared_resolver_works_across_event_loops(self, local_color_api):
        """Each asyncio.run gets a fresh loop; the owned client must follow it."""
        set_name_resolver(ColorNameResolver(base_url=local_color_api, timeout=2.0))

        names = [asyncio.run(create_color("#ff0000")).name for _ in range(3)]

        assert names == ["Red", "Red", "Red"]

    def test_owned_client_rebuilt_per_loop(self):
        resolver = ColorNameResolver()

        async def current_client():
            return resolver.client, resolver.client

        first, same = asyncio.run(current_client())
        second, _ = asyncio.run(current_client())
        assert first is same
        assert second is not first
