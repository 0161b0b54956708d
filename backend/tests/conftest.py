"""
Test configuration and fixtures for HueWheel tests.
"""
import httpx
import pytest
from fastapi.testclient import TestClient

from huewheel.services.colors.naming import ColorNameResolver, set_name_resolver
from huewheel.services.observability import reset_metrics

# Import the main app
from main import app


KNOWN_NAMES = {
    "ff0000": "Red",
    "00ffff": "Cyan",
    "ff8000": "Flush Orange",
    "00ff00": "Green",
    "0000ff": "Blue",
}


class FakeColorService:
    """Stand-in for The Color API; records every requested hex."""

    def __init__(self):
        self.requested = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        hex_digits = request.url.params["hex"]
        self.requested.append(hex_digits)
        name = KNOWN_NAMES.get(hex_digits.lower(), f"Color {hex_digits}")
        return httpx.Response(200, json={"hex": {"value": f"#{hex_digits}"}, "name": {"value": name}})


def _make_resolver(handler) -> ColorNameResolver:
    """Resolver whose HTTP client is served by ``handler``."""
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return ColorNameResolver(base_url="https://colors.test/id", timeout=1.0, client=client)


@pytest.fixture
def resolver_factory():
    """Build resolvers backed by a request handler instead of the network."""
    return _make_resolver


@pytest.fixture(autouse=True)
def color_service():
    """Route every name lookup to the fake service."""
    service = FakeColorService()
    set_name_resolver(_make_resolver(service))
    yield service
    set_name_resolver(None)


@pytest.fixture
def test_client():
    """Create test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture(autouse=True)
def fresh_metrics():
    """Start each test with an empty metrics registry."""
    reset_metrics()
    yield
    reset_metrics()
