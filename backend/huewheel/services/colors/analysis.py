"""
HueWheel Color Analysis Orchestrator

Fills every page section from one base hex: the selected color itself plus
each harmony relation, all relations computed concurrently.
"""

import asyncio
import time
from dataclasses import dataclass, field
from typing import Dict, List

from huewheel.services.observability import get_metrics_collector
from huewheel.utils.ids import generate_request_id
from huewheel.utils.logging import get_logger
from .harmony import get_harmony
from .model import Color, create_color
from .sections import SECTIONS, Section


@dataclass
class SectionCards:
    section: Section
    colors: List[Color]


@dataclass
class ColorAnalysis:
    """Result of analyzing one base color."""
    request_id: str
    base: Color
    sections: List[SectionCards] = field(default_factory=list)
    duration_ms: float = 0.0

    def by_section(self) -> Dict[str, List[Color]]:
        return {cards.section.id: cards.colors for cards in self.sections}

    @property
    def card_count(self) -> int:
        return sum(len(cards.colors) for cards in self.sections)


async def analyze_color(hex_color: str) -> ColorAnalysis:
    """
    Build the base color and every relation section for it.

    Args:
        hex_color: Base color, '#rrggbb' (malformed input analyzes as black)

    Returns:
        ColorAnalysis with one SectionCards per entry of SECTIONS, in order
    """
    start_time = time.perf_counter()
    request_id = generate_request_id()

    base = await create_color(hex_color)

    relation_sections = [s for s in SECTIONS if s.relation]
    results = await asyncio.gather(
        *(get_harmony(base, s.relation) for s in relation_sections)
    )
    derived = {s.id: colors for s, colors in zip(relation_sections, results)}

    sections = [
        SectionCards(section=s, colors=derived.get(s.id, [base]))
        for s in SECTIONS
    ]

    duration_ms = (time.perf_counter() - start_time) * 1000
    analysis = ColorAnalysis(
        request_id=request_id,
        base=base,
        sections=sections,
        duration_ms=duration_ms,
    )

    get_metrics_collector().record_analysis(duration_ms)
    get_logger().analysis_complete(request_id, base.hex, duration_ms, analysis.card_count)
    return analysis
