"""
Pydantic schemas for POST /api/generate-story.

The story endpoint never answers with a bare error: even failures carry a
renderable title/text/imagePrompt placeholder, because the client displays
the story unconditionally.
"""

from typing import Optional

from pydantic import Field

from scripture_backend.schemas.common import CamelModel, GenerationRequest

STORY_UNAVAILABLE_TITLE = "Story Unavailable"


class StoryRequest(GenerationRequest):
    """Request for a story. verseReference, verseText and storyType are required by the endpoint."""
    story_type: Optional[str] = Field(
        None,
        alias="storyType",
        description="contemporary or historical",
        examples=["contemporary", "historical"]
    )


class StoryResponse(CamelModel):
    """Response for POST /api/generate-story (also used for the 200 failure placeholder)."""
    title: str
    text: str
    image_prompt: str = Field(..., alias="imagePrompt")


class StoryErrorResponse(StoryResponse):
    """400 response when required fields are missing; still renderable."""
    error: str


def missing_fields_placeholder() -> StoryErrorResponse:
    return StoryErrorResponse(
        error="Missing required fields",
        title=STORY_UNAVAILABLE_TITLE,
        text="Unable to generate story due to missing information.",
        image_prompt="A peaceful scene",
    )


def generation_failed_placeholder() -> StoryResponse:
    return StoryResponse(
        title=STORY_UNAVAILABLE_TITLE,
        text="We encountered an issue generating this story. Please try again later.",
        image_prompt="A peaceful, contemplative scene",
    )
