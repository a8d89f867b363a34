"""
Pydantic schemas for POST /api/generate-verse.
"""

from typing import Optional

from pydantic import BaseModel, Field

from scripture_backend.schemas.common import CamelModel


class VerseRequest(CamelModel):
    """
    Request for a verse of the day or a specific verse.

    - verseQuery set: direct lookup of that reference (no fallback)
    - otherwise: verse of the day from `source`, falling back to Come, Follow Me
    """
    source: Optional[str] = Field(
        None,
        description="ComeFollowMe, BookOfMormon, DoctrineCovenants or Bible",
        examples=["BookOfMormon"]
    )
    verse_query: Optional[str] = Field(
        None,
        alias="verseQuery",
        description="Free-text reference the user searched for",
        examples=["Moroni 10:4"]
    )


class VerseResponse(BaseModel):
    """A single verse as returned to the client (and as expected from Gemini)."""
    reference: str = Field(..., examples=["Alma 32:21"])
    version: str = Field(..., examples=["LDS", "KJV"])
    text: str
    source: str = Field(..., examples=["Book of Mormon"])
