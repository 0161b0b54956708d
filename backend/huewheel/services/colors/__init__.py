"""
HueWheel Colors Module

Hex/RGB/HSL conversion, the Color value type, harmony relations derived by
hue rotation, remote color naming and the page section analysis.
"""

from .conversions import (
    RGB, HSL, InvalidChannelError,
    hex_to_rgb, rgb_to_hex, rgb_to_hsl, hsl_to_rgb, normalize_hex, is_valid_hex,
)
from .model import Color, derive_color, with_name, create_color
from .harmony import (
    HUE_DELTA, RELATIONS, UnknownRelationError,
    get_complementary, get_analogous, get_triadic, get_tetradic,
    get_tint, get_shade, get_harmony,
)
from .naming import ColorNameResolver, get_color_name

__version__ = "1.0.0"
