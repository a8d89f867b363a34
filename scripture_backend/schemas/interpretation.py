"""
Pydantic schemas for POST /api/generate-interpretation.
"""

from typing import Optional

from pydantic import Field

from scripture_backend.schemas.common import CamelModel, GenerationRequest


class InterpretationRequest(GenerationRequest):
    """Request for a verse interpretation, optionally in another language."""
    language: Optional[str] = Field(
        "en",
        description="Language code (en, es, fr, de, pt, zh, vi, ko, th, tl, ja); unknown codes mean English",
        examples=["es"]
    )


class InterpretationResponse(CamelModel):
    """Response for POST /api/generate-interpretation."""
    interpretation: str = Field(..., description="Reflection or scholarly analysis, plain text")
    hero_image_prompt: str = Field(..., alias="heroImagePrompt")
