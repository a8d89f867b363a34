"""
Pydantic schemas for POST /api/generate-imagery.
"""

from typing import List

from pydantic import Field, field_validator

from scripture_backend.schemas.common import CamelModel, GenerationRequest

SYMBOL_COUNT = 4


class ImageryRequest(GenerationRequest):
    """Request for the symbols in a verse. Uses only the shared generation fields."""


class Symbol(CamelModel):
    """One symbol or metaphor found in the verse."""
    title: str = Field(..., description="Symbol name", examples=["The Seed"])
    sub: str = Field(..., description="Explanation of the symbol")
    icon: str = Field("auto_awesome", description="Material icon name", examples=["water_drop"])
    image_prompt: str = Field(..., alias="imagePrompt", description="Visual description of the symbol")


class ImageryResponse(CamelModel):
    """
    Response for POST /api/generate-imagery.

    Always exactly four symbols: extras from the model are dropped, fewer is
    a validation failure.
    """
    imagery: List[Symbol] = Field(..., min_length=SYMBOL_COUNT)

    @field_validator("imagery")
    @classmethod
    def keep_first_four(cls, value: List[Symbol]) -> List[Symbol]:
        return value[:SYMBOL_COUNT]
