"""
HueWheel API Schemas
Pydantic models for color cards, harmony relations and section analysis.
"""
from typing import List, Optional
from pydantic import BaseModel, Field

from huewheel.services.colors.model import Color
from huewheel.services.colors.sections import Section
from huewheel.services.colors.analysis import ColorAnalysis


class RGBModel(BaseModel):
    """8-bit RGB channels."""
    r: int = Field(..., ge=0, le=255)
    g: int = Field(..., ge=0, le=255)
    b: int = Field(..., ge=0, le=255)


class HSLModel(BaseModel):
    """Integer HSL; hue may reach 360 through rounding."""
    h: int = Field(..., ge=0, le=360, description="Hue in degrees")
    s: int = Field(..., ge=0, le=100, description="Saturation in percent")
    l: int = Field(..., ge=0, le=100, description="Lightness in percent")


class ColorCard(BaseModel):
    """One color as displayed on a card, with the strings its copy buttons use."""
    hex: str = Field(
        ...,
        pattern=r"^#[0-9a-f]{6}$",
        description="Lowercase hex color code"
    )
    rgb: RGBModel
    hsl: HSLModel
    name: Optional[str] = Field(None, description="Human-readable color name")
    rgb_string: str = Field(..., description="CSS form, e.g. 'rgb(255, 0, 0)'")
    hsl_string: str = Field(..., description="CSS form, e.g. 'hsl(0, 100%, 50%)'")

    @classmethod
    def from_color(cls, color: Color) -> "ColorCard":
        return cls(**color.to_dict())


class HarmonyResponse(BaseModel):
    """Colors derived from a base color by one relation."""
    relation: str
    base: ColorCard
    colors: List[ColorCard]


class SectionInfo(BaseModel):
    """A page section the UI renders cards into."""
    id: str
    icon: str
    title: str
    description: Optional[str] = None
    content_id: str
    card_count: int = Field(..., ge=1)
    relation: Optional[str] = None

    @classmethod
    def from_section(cls, section: Section) -> "SectionInfo":
        return cls(
            id=section.id,
            icon=section.icon,
            title=section.title,
            description=section.description,
            content_id=section.content_id,
            card_count=section.card_count,
            relation=section.relation,
        )


class SectionCardsResponse(BaseModel):
    section: SectionInfo
    colors: List[ColorCard]


class AnalysisResponse(BaseModel):
    """Every section filled from one base color."""
    request_id: str
    base: ColorCard
    sections: List[SectionCardsResponse]
    duration_ms: float = Field(..., ge=0.0)

    @classmethod
    def from_analysis(cls, analysis: ColorAnalysis) -> "AnalysisResponse":
        return cls(
            request_id=analysis.request_id,
            base=ColorCard.from_color(analysis.base),
            sections=[
                SectionCardsResponse(
                    section=SectionInfo.from_section(cards.section),
                    colors=[ColorCard.from_color(c) for c in cards.colors],
                )
                for cards in analysis.sections
            ],
            duration_ms=round(analysis.duration_ms, 2),
        )


class HealthResponse(BaseModel):
    """Health check response."""
    ok: bool = Field(True, description="Service health status")
    version: str = Field(..., description="Service version")
    service: str = Field("huewheel", description="Service name")


class ErrorResponse(BaseModel):
    """Error response."""
    detail: str = Field(..., description="Error message")
