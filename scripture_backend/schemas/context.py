"""
Pydantic schemas for POST /api/generate-context.

The response model doubles as the validator for Gemini's JSON reply: a reply
that does not fill every field is rejected rather than partially returned.
"""

from pydantic import Field

from scripture_backend.schemas.common import CamelModel, GenerationRequest


class ContextRequest(GenerationRequest):
    """Request for a verse backstory. Uses only the shared generation fields."""


class VerseContext(CamelModel):
    """Seven prose sections describing the background of a verse."""
    who_is_speaking: str = Field(..., alias="whoIsSpeaking")
    original_listeners: str = Field(..., alias="originalListeners")
    why_the_conversation: str = Field(..., alias="whyTheConversation")
    historical_backdrop: str = Field(..., alias="historicalBackdrop")
    immediate_impact: str = Field(..., alias="immediateImpact")
    long_term_impact: str = Field(..., alias="longTermImpact")
    setting: str = Field(...)


class ContextResponse(CamelModel):
    """Response for POST /api/generate-context."""
    context: VerseContext
    context_image_prompt: str = Field(
        ...,
        alias="contextImagePrompt",
        description="Cinematic scene description for the backstory illustration"
    )
