"""
Color value type.

``derive_color`` is pure and synchronous; naming is a separate async step
(``with_name``) so harmony arithmetic never has to await anything.
"""

from dataclasses import dataclass, replace
from typing import Optional

from .conversions import RGB, HSL, hex_to_rgb, rgb_to_hsl, normalize_hex
from .naming import get_color_name


@dataclass(frozen=True)
class Color:
    """A color in hex, RGB and HSL form, plus an optional display name."""
    hex: str
    rgb: RGB
    hsl: HSL
    name: Optional[str] = None

    @property
    def rgb_string(self) -> str:
        return f"rgb({self.rgb.r}, {self.rgb.g}, {self.rgb.b})"

    @property
    def hsl_string(self) -> str:
        return f"hsl({self.hsl.h}, {self.hsl.s}%, {self.hsl.l}%)"

    def to_dict(self) -> dict:
        return {
            "hex": self.hex,
            "rgb": self.rgb._asdict(),
            "hsl": self.hsl._asdict(),
            "name": self.name,
            "rgb_string": self.rgb_string,
            "hsl_string": self.hsl_string,
        }


def derive_color(hex_color: str) -> Color:
    """Build an unnamed Color; rgb and hsl both come from the normalized hex."""
    hex_norm = normalize_hex(hex_color)
    rgb = hex_to_rgb(hex_norm)
    return Color(hex=hex_norm, rgb=rgb, hsl=rgb_to_hsl(*rgb))


async def with_name(color: Color) -> Color:
    """Return a copy of ``color`` carrying its resolved name."""
    return replace(color, name=await get_color_name(color.hex))


async def create_color(hex_color: str) -> Color:
    """Derive a Color from hex and resolve its name."""
    return await with_name(derive_color(hex_color))
