"""
Pydantic schemas for POST /api/generate-poem.
"""

from typing import Optional

from pydantic import Field

from scripture_backend.schemas.common import CamelModel, GenerationRequest


class PoemRequest(GenerationRequest):
    """Request for a poem inspired by a verse."""
    poem_type: Optional[str] = Field(
        None,
        alias="poemType",
        description='"classic" for hymn style; anything else gives free verse',
        examples=["classic", "free"]
    )


class Poem(CamelModel):
    title: str
    type: str = Field(..., description='"Hymn Style" or "Free Verse"')
    text: str = Field(..., description="Poem text with line and stanza breaks")
    image_prompt: str = Field(..., alias="imagePrompt")


class PoemResponse(CamelModel):
    """Response for POST /api/generate-poem."""
    poem: Poem
