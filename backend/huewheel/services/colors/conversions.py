"""
HueWheel Color Conversions

Conversions between the three color representations used by the harmony
engine: ``#RRGGBB`` hex strings, 8-bit RGB triples and integer-rounded HSL
(hue in degrees, saturation and lightness in percent).
"""

import math
import re
from typing import NamedTuple


HEX_PATTERN = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE)


class RGB(NamedTuple):
    """8-bit RGB channels in [0, 255]."""
    r: int
    g: int
    b: int


class HSL(NamedTuple):
    """Hue in degrees [0, 360], saturation and lightness in percent [0, 100]."""
    h: int
    s: int
    l: int


class InvalidChannelError(ValueError):
    """Raised when an RGB channel is not an integer in [0, 255]."""


def _round_half_up(value: float) -> int:
    # round() rounds half to even; 76.5 must become 77
    return int(math.floor(value + 0.5))


def is_valid_hex(hex_color: str) -> bool:
    """Check for six hex digits with an optional leading '#'."""
    return isinstance(hex_color, str) and HEX_PATTERN.match(hex_color) is not None


def hex_to_rgb(hex_color: str) -> RGB:
    """
    Parse a hex color into RGB channels.

    Args:
        hex_color: Six hex digits, optionally prefixed with '#', any case

    Returns:
        RGB triple; malformed input yields RGB(0, 0, 0) instead of an error
    """
    match = HEX_PATTERN.match(hex_color) if isinstance(hex_color, str) else None
    if match is None:
        return RGB(0, 0, 0)

    return RGB(*(int(group, 16) for group in match.groups()))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """
    Pack RGB channels into a lowercase ``#rrggbb`` string.

    Raises:
        InvalidChannelError: If any channel is not an integer in [0, 255]
    """
    for channel_name, value in (("r", r), ("g", g), ("b", b)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidChannelError(f"Channel {channel_name} must be an integer, got {value!r}")
        if not 0 <= value <= 255:
            raise InvalidChannelError(f"Channel {channel_name} out of range [0, 255]: {value}")

    return f"#{r:02x}{g:02x}{b:02x}"


def normalize_hex(hex_color: str) -> str:
    """Canonical lowercase ``#rrggbb``; malformed input becomes ``#000000``."""
    return rgb_to_hex(*hex_to_rgb(hex_color))


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    """
    Convert RGB channels to integer-rounded HSL.

    When several channels share the maximum, the hue formula is picked in
    the order red, green, blue.
    """
    r, g, b = r / 255.0, g / 255.0, b / 255.0

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    l = (max_c + min_c) / 2

    if max_c == min_c:
        h = s = 0.0  # achromatic
    else:
        d = max_c - min_c
        s = d / (2 - max_c - min_c) if l > 0.5 else d / (max_c + min_c)

        if max_c == r:
            h = (g - b) / d + (6 if g < b else 0)
        elif max_c == g:
            h = (b - r) / d + 2
        else:
            h = (r - g) / d + 4
        h /= 6

    return HSL(
        _round_half_up(h * 360),
        _round_half_up(s * 100),
        _round_half_up(l * 100),
    )


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """
    Convert HSL (degrees, percent, percent) to 8-bit RGB.

    Args:
        h: Hue in degrees
        s: Saturation in percent
        l: Lightness in percent

    Returns:
        RGB triple with channels rounded to the nearest integer
    """
    h, s, l = h / 360.0, s / 100.0, l / 100.0

    if s == 0:
        r = g = b = l  # achromatic
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_rgb(p, q, h + 1 / 3)
        g = _hue_to_rgb(p, q, h)
        b = _hue_to_rgb(p, q, h - 1 / 3)

    return RGB(
        _round_half_up(r * 255),
        _round_half_up(g * 255),
        _round_half_up(b * 255),
    )
