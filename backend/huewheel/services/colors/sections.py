"""
Page sections rendered by the UI, in display order. Each section names the
container its cards go into and how many cards it holds.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Section:
    id: str
    icon: str
    title: str
    content_id: str
    card_count: int
    relation: Optional[str] = None  # harmony relation feeding this section
    description: Optional[str] = None


SECTIONS: Tuple[Section, ...] = (
    Section(
        id="selected-section",
        icon="🎨",
        title="Selected Color",
        content_id="selected-color-card",
        card_count=1,
    ),
    Section(
        id="complementary-section",
        icon="🔄",
        title="Complementary",
        description="The opposite color on the color wheel, creating maximum contrast.",
        content_id="complementary-color-card",
        card_count=1,
        relation="complementary",
    ),
    Section(
        id="analogous-section",
        icon="📐",
        title="Analogous Colors",
        description="Adjacent colors on the color wheel, creating natural harmony.",
        content_id="analogous-colors",
        card_count=2,
        relation="analogous",
    ),
    Section(
        id="triadic-section",
        icon="🔺",
        title="Triadic",
        description="Three colors evenly spaced on the color wheel, offering vibrant contrast.",
        content_id="triadic-colors",
        card_count=3,
        relation="triadic",
    ),
    Section(
        id="tetradic-section",
        icon="🔲",
        title="Tetradic",
        description="Two pairs of complementary colors, giving rich and varied combinations.",
        content_id="tetradic-colors",
        card_count=4,
        relation="tetradic",
    ),
    Section(
        id="tints-section",
        icon="⚪",
        title="Tints",
        description="The color mixed with white, raising its lightness.",
        content_id="tints-container",
        card_count=1,
        relation="tint",
    ),
    Section(
        id="shades-section",
        icon="⚫",
        title="Shades",
        description="The color mixed with black, lowering its lightness.",
        content_id="shades-container",
        card_count=1,
        relation="shade",
    ),
)


def get_section(section_id: str) -> Section:
    """Look up a section by id; raises KeyError when absent."""
    for section in SECTIONS:
        if section.id == section_id:
            return section
    raise KeyError(section_id)
