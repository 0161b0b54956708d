"""
HueWheel Color Harmony Engine

Derives complementary, analogous, triadic and tetradic colors by rotating the
hue of a base color in steps of 30° (one twelfth of the color wheel), and
tints/shades by moving its lightness. Saturation and lightness are held
constant during rotations.

Each relation comes in two forms: a pure one returning hex strings and an
async one returning named ``Color`` objects.
"""

import asyncio
from typing import Awaitable, Callable, Dict, List

from huewheel.config import config
from huewheel.services.observability import get_metrics_collector
from huewheel.utils.logging import get_logger
from .conversions import HSL, hsl_to_rgb, rgb_to_hex
from .model import Color, create_color


HUE_DELTA = 360 // config.HUE_STEPS  # 30°
LIGHTNESS_STEP = config.TINT_SHADE_STEP

# Hue offsets in units of HUE_DELTA
COMPLEMENTARY_UNITS = 6
ANALOGOUS_UNITS = (1, -1)
TRIADIC_UNITS = (4, -4)
TETRADIC_UNITS = (4, 6, -2)


class UnknownRelationError(KeyError):
    """Raised when a harmony relation name is not registered."""


def rotate_hue(h: int, units: int) -> int:
    """
    Rotate hue by a number of HUE_DELTA steps.

    Args:
        h: Hue in degrees
        units: Number of 30° steps (can be negative)

    Returns:
        Rotated hue normalized into [0, 360)
    """
    return (h + units * HUE_DELTA + 360) % 360


def hsl_to_hex(hsl: HSL) -> str:
    return rgb_to_hex(*hsl_to_rgb(hsl.h, hsl.s, hsl.l))


def _rotated_hex(hsl: HSL, units: int) -> str:
    return hsl_to_hex(hsl._replace(h=rotate_hue(hsl.h, units)))


# ---------------------------------------------------------------------------
# Pure relations (hex only, no naming)
# ---------------------------------------------------------------------------

def complementary_hex(hsl: HSL) -> str:
    """Hex of the color opposite on the wheel (+180°)."""
    return _rotated_hex(hsl, COMPLEMENTARY_UNITS)


def analogous_hexes(hsl: HSL) -> List[str]:
    """Hexes at +30° and -30°, in that order."""
    return [_rotated_hex(hsl, units) for units in ANALOGOUS_UNITS]


def triadic_hexes(hsl: HSL) -> List[str]:
    """Hexes at +120° and -120° (base not included)."""
    return [_rotated_hex(hsl, units) for units in TRIADIC_UNITS]


def tetradic_hexes(hsl: HSL) -> List[str]:
    """Hexes at +120°, +180° and -60° (base not included)."""
    return [_rotated_hex(hsl, units) for units in TETRADIC_UNITS]


def tint_hex(hsl: HSL) -> str:
    """Hex with lightness raised by 30, capped at 100."""
    return hsl_to_hex(hsl._replace(l=min(100, hsl.l + LIGHTNESS_STEP)))


def shade_hex(hsl: HSL) -> str:
    """Hex with lightness lowered by 30, floored at 0."""
    return hsl_to_hex(hsl._replace(l=max(0, hsl.l - LIGHTNESS_STEP)))


# ---------------------------------------------------------------------------
# Named relations
# ---------------------------------------------------------------------------

async def _create_all(hexes: List[str]) -> List[Color]:
    # Sibling lookups run concurrently; gather keeps argument order
    return list(await asyncio.gather(*(create_color(h) for h in hexes)))


async def get_complementary(color: Color) -> Color:
    return await create_color(complementary_hex(color.hsl))


async def get_analogous(color: Color) -> List[Color]:
    """Two analogous colors; the base color is not included."""
    return await _create_all(analogous_hexes(color.hsl))


async def get_triadic(color: Color) -> List[Color]:
    """Base color followed by the +120° and -120° colors."""
    return [color] + await _create_all(triadic_hexes(color.hsl))


async def get_tetradic(color: Color) -> List[Color]:
    """Base color followed by the +120°, +180° and -60° colors."""
    return [color] + await _create_all(tetradic_hexes(color.hsl))


async def get_tint(color: Color) -> Color:
    return await create_color(tint_hex(color.hsl))


async def get_shade(color: Color) -> Color:
    return await create_color(shade_hex(color.hsl))


RELATIONS: Dict[str, Callable[[Color], Awaitable]] = {
    "complementary": get_complementary,
    "analogous": get_analogous,
    "triadic": get_triadic,
    "tetradic": get_tetradic,
    "tint": get_tint,
    "shade": get_shade,
}


async def get_harmony(color: Color, relation: str) -> List[Color]:
    """
    Run one named relation and always return a list of colors.

    Raises:
        UnknownRelationError: If ``relation`` is not in RELATIONS
    """
    try:
        func = RELATIONS[relation]
    except KeyError:
        raise UnknownRelationError(relation) from None

    get_metrics_collector().record_harmony(relation)
    result = await func(color)
    colors = result if isinstance(result, list) else [result]
    get_logger().harmony_generated(relation, color.hex, (c.hex for c in colors))
    return colors
