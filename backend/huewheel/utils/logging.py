"""
HueWheel Structured Logging
Centralized loguru configuration plus helpers for the color pipeline events.
"""
import sys
from typing import Any, Optional

from loguru import logger

from huewheel.config import config

_configured = False


def configure_logging(level: Optional[str] = None, serialize: bool = False) -> None:
    """Replace loguru's default sink with the HueWheel format."""
    global _configured
    logger.remove()
    logger.add(
        sys.stdout,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message} | {extra}",
        level=level or config.LOG_LEVEL,
        serialize=serialize,
    )
    _configured = True


class StructuredLogger:
    """Event logger for color construction and name lookups."""

    def __init__(self, component: str = "huewheel"):
        if not _configured:
            configure_logging()
        self._log = logger.bind(component=component)

    def name_resolved(self, hex_digits: str, name: str, duration_ms: float):
        self._log.bind(hex=hex_digits, duration_ms=round(duration_ms, 2)).debug(
            f"Resolved color name '{name}'"
        )

    def name_fallback(self, hex_digits: str, reason: Any, fallback: str):
        """A lookup failed and the fallback label is used instead."""
        self._log.bind(hex=hex_digits, fallback=fallback).warning(
            f"Falling back color name for #{hex_digits}: {reason}"
        )

    def analysis_complete(self, request_id: str, base_hex: str, duration_ms: float, card_count: int):
        self._log.bind(
            request_id=request_id,
            base_hex=base_hex,
            duration_ms=round(duration_ms, 2),
            cards=card_count,
        ).info("Color analysis complete")

    def harmony_generated(self, relation: str, base_hex: str, hexes: Any):
        self._log.bind(relation=relation, base_hex=base_hex).debug(f"Derived {list(hexes)}")


# Global logger instance
_logger: Optional[StructuredLogger] = None


def get_logger() -> StructuredLogger:
    """Get or create global logger instance."""
    global _logger
    if _logger is None:
        _logger = StructuredLogger()
    return _logger
