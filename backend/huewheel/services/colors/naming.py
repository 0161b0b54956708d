"""
Color Name Resolver

Looks up a human-readable name for a hex color through The Color API. The
lookup never fails outward: any HTTP, transport or payload problem is logged
and mapped to the fallback label.
"""

import asyncio
from typing import Any, Optional

import httpx

from huewheel.config import config
from huewheel.utils.logging import get_logger
from huewheel.services.observability import get_metrics_collector, timed


class ColorNameResolver:
    """Async client for the remote color naming service."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        fallback_name: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url or config.COLOR_API_URL
        self.timeout = timeout if timeout is not None else config.NAME_LOOKUP_TIMEOUT
        if not config.validate_timeout(self.timeout):
            raise ValueError(f"Invalid name lookup timeout: {self.timeout}")
        self.fallback_name = fallback_name or config.FALLBACK_NAME
        self._client = client
        self._owns_client = client is None
        self._client_loop: Optional[asyncio.AbstractEventLoop] = None

    @property
    def client(self) -> httpx.AsyncClient:
        """
        HTTP client for the current event loop.

        An owned client is rebuilt when the running loop changes, since its
        connection pool is bound to the loop that opened it.
        """
        if self._owns_client:
            loop = asyncio.get_running_loop()
            if self._client is None or self._client_loop is not loop:
                # the old pool cannot be closed from a different loop
                self._client = httpx.AsyncClient(timeout=self.timeout)
                self._client_loop = loop
        return self._client

    async def resolve(self, hex_color: str) -> str:
        """
        Resolve a display name for a hex color.

        Args:
            hex_color: Color such as '#ff0000'; the '#' is stripped for the query

        Returns:
            The service's name, or the fallback label on any failure
        """
        hex_digits = hex_color.replace("#", "")
        metrics = get_metrics_collector()

        with timed() as elapsed:
            name = await self._lookup(hex_digits)

        if name is None:
            metrics.record_name_lookup("fallback", elapsed["ms"])
            return self.fallback_name

        metrics.record_name_lookup("resolved", elapsed["ms"])
        get_logger().name_resolved(hex_digits, name, elapsed["ms"])
        return name

    async def _lookup(self, hex_digits: str) -> Optional[str]:
        try:
            # The client timeout only covers network phases; bound the whole call too
            async with asyncio.timeout(self.timeout):
                response = await self.client.get(self.base_url, params={"hex": hex_digits})
            if not response.is_success:
                get_logger().name_fallback(
                    hex_digits, f"Color API error: {response.status_code}", self.fallback_name
                )
                return None
            name = _extract_name(response.json())
        except Exception as e:
            # Transport errors, timeouts and undecodable bodies all degrade to the fallback
            get_logger().name_fallback(hex_digits, repr(e), self.fallback_name)
            return None

        if not name:
            get_logger().name_fallback(hex_digits, "response has no name", self.fallback_name)
            return None
        return name

    async def aclose(self):
        if self._client is not None and self._owns_client and self._client_loop is asyncio.get_running_loop():
            await self._client.aclose()
        self._client = None
        self._client_loop = None


def _extract_name(payload: Any) -> Optional[str]:
    if not isinstance(payload, dict):
        return None
    name = payload.get("name")
    if not isinstance(name, dict):
        return None
    value = name.get("value")
    return value if isinstance(value, str) else None


# Process-wide resolver
_resolver: Optional[ColorNameResolver] = None


def get_name_resolver() -> ColorNameResolver:
    global _resolver
    if _resolver is None:
        _resolver = ColorNameResolver()
    return _resolver


def set_name_resolver(resolver: Optional[ColorNameResolver]):
    """Swap the shared resolver; None restores the default on next use."""
    global _resolver
    _resolver = resolver


async def close_name_resolver():
    global _resolver
    if _resolver is not None:
        await _resolver.aclose()
        _resolver = None


async def get_color_name(hex_color: str) -> str:
    """Resolve a color name with the shared resolver."""
    return await get_name_resolver().resolve(hex_color)
