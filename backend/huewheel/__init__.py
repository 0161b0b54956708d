"""
HueWheel: color-theory relationships (complementary, analogous, triadic,
tetradic, tint, shade) served to the color wheel UI.
"""

__version__ = "1.0.0"
