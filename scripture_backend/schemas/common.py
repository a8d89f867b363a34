"""
Shared request/response building blocks for the generation endpoints.

The web client sends and expects camelCase keys (verseReference, contentMode,
imagePrompt, ...). Models use snake_case attributes with camelCase aliases;
FastAPI serializes responses by alias.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from scripture_backend.agents.types import ContentMode, normalize_content_mode


class CamelModel(BaseModel):
    """Base model accepting both camelCase aliases and snake_case names."""
    model_config = ConfigDict(populate_by_name=True)


# ============================================================================
# REQUEST MODELS
# ============================================================================

class GenerationRequest(CamelModel):
    """
    Fields shared by every personalized generation endpoint.

    Every field is optional: a missing or null value never makes the request
    fail validation. Endpoints that genuinely need a field (story) check for it
    themselves and answer with a structured error.
    """
    verse_reference: Optional[str] = Field(
        None,
        alias="verseReference",
        description="Verse reference as displayed to the user",
        examples=["Alma 32:21", "John 3:16", "D&C 121:7-8"]
    )
    verse_text: Optional[str] = Field(
        None,
        alias="verseText",
        description="Full text of the verse"
    )
    age_range: Optional[str] = Field(
        None,
        alias="ageRange",
        description="Age bracket: teens, youth, adult or senior (unknown values behave as adult)",
        examples=["youth"]
    )
    gender: Optional[str] = Field(
        None,
        description="female or male add a personalization clause; any other value adds nothing",
        examples=["female"]
    )
    stage_situation: Optional[str] = Field(
        None,
        alias="stageSituation",
        description="Life stage or situation label",
        examples=["New calling", "Nothing special"]
    )
    source: Optional[str] = Field(
        None,
        description="Optional standard-work label; takes priority over reference-based classification",
        examples=["Book of Mormon"]
    )
    content_mode: ContentMode = Field(
        "casual",
        alias="contentMode",
        description="casual or academic; any other value is treated as casual"
    )

    @field_validator("content_mode", mode="before")
    @classmethod
    def coerce_content_mode(cls, value: Any) -> ContentMode:
        """Unknown or missing modes fall back to casual instead of failing validation."""
        return normalize_content_mode(value if isinstance(value, str) else None)


# ============================================================================
# RESPONSE MODELS
# ============================================================================

class ErrorResponse(BaseModel):
    """Generic failure payload. Never carries internal diagnostic detail."""
    error: str = Field(..., description="User-facing error message", examples=["Failed to generate context"])
