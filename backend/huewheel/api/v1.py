"""
HueWheel v1 API Routes
Color cards, single harmony relations and full section analysis.
"""
from typing import List
from fastapi import APIRouter, HTTPException, Path, Query

from huewheel.services.colors.conversions import is_valid_hex
from huewheel.services.colors.harmony import RELATIONS, get_harmony
from huewheel.services.colors.model import create_color
from huewheel.services.colors.sections import SECTIONS
from huewheel.services.colors.analysis import analyze_color
from huewheel.schemas import (
    AnalysisResponse, ColorCard, ErrorResponse, HarmonyResponse, SectionInfo,
)

router = APIRouter(prefix="/v1", tags=["Colors"])

HEX_QUERY_PATTERN = r"^#?[0-9A-Fa-f]{6}$"


def _require_hex(hex_color: str) -> str:
    if not is_valid_hex(hex_color):
        raise HTTPException(status_code=422, detail=f"Invalid hex color: {hex_color}")
    return hex_color if hex_color.startswith("#") else f"#{hex_color}"


@router.get("/sections", response_model=List[SectionInfo])
async def list_sections() -> List[SectionInfo]:
    """Sections in display order."""
    return [SectionInfo.from_section(s) for s in SECTIONS]


@router.get(
    "/colors/{hex_color}",
    response_model=ColorCard,
    responses={422: {"model": ErrorResponse}},
    summary="Describe one color",
)
async def get_color(
    hex_color: str = Path(..., description="Six hex digits, '#' optional (URL-encode as %23)")
) -> ColorCard:
    color = await create_color(_require_hex(hex_color))
    return ColorCard.from_color(color)


@router.get(
    "/colors/{hex_color}/{relation}",
    response_model=HarmonyResponse,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
    summary="Colors related to a base color",
)
async def get_relation(
    hex_color: str = Path(..., description="Base color, six hex digits"),
    relation: str = Path(..., description=f"One of: {', '.join(RELATIONS)}"),
) -> HarmonyResponse:
    """
    Derive one harmony relation.

    Triadic and tetradic results start with the base color; analogous
    excludes it.
    """
    hex_color = _require_hex(hex_color)
    if relation not in RELATIONS:
        raise HTTPException(status_code=404, detail=f"Unknown relation: {relation}")

    base = await create_color(hex_color)
    colors = await get_harmony(base, relation)

    return HarmonyResponse(
        relation=relation,
        base=ColorCard.from_color(base),
        colors=[ColorCard.from_color(c) for c in colors],
    )


@router.get(
    "/analysis",
    response_model=AnalysisResponse,
    summary="Fill every page section from one base color",
)
async def get_analysis(
    hex: str = Query(..., pattern=HEX_QUERY_PATTERN, description="Base color '#rrggbb'")
) -> AnalysisResponse:
    analysis = await analyze_color(_require_hex(hex))
    return AnalysisResponse.from_analysis(analysis)
