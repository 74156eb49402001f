# =============================================================================
# app/routers/planner.py - Event Planner Endpoints
# =============================================================================
# Turns a free-text event description into builder selections.
# =============================================================================

from fastapi import APIRouter
from pydantic import BaseModel, Field

from core.models.builder import Recommendation
from lib.recommendation_parser import has_valid_recommendation, parse_recommendations

router = APIRouter()


class ParseRequest(BaseModel):
    """Text to parse."""
    text: str = Field(
        ...,
        max_length=5000,
        examples=["A romantic garden wedding for 150 guests, around 1.2m naira"],
    )


class ParseResponse(BaseModel):
    """Parsed builder selections."""
    recommendation: Recommendation
    is_valid: bool = Field(..., description="True when the builder can be pre-filled")


@router.post("/parse", response_model=ParseResponse)
async def parse_description(request: ParseRequest):
    """Extract event type, theme, palette, guest size, venue and budget ids."""
    recommendation = parse_recommendations(request.text)
    return ParseResponse(
        recommendation=recommendation,
        is_valid=has_valid_recommendation(recommendation),
    )
