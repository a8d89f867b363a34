"""
Verse-of-the-Day Prompt Templates

One prompt per verse source plus a direct lookup prompt for a user query.
Every prompt asks for the same small JSON object:

    {"reference": ..., "version": ..., "text": ..., "source": ...}

Verse prompts carry no system instruction.
"""

from datetime import date
from typing import Optional

from scripture_backend.agents.types import LLMRequest
from scripture_backend.utils.constants import VERSE_TOKEN_BUDGET

# Source keys accepted by POST /api/generate-verse
COME_FOLLOW_ME = "ComeFollowMe"
BOOK_OF_MORMON = "BookOfMormon"
DOCTRINE_AND_COVENANTS = "DoctrineCovenants"
BIBLE = "Bible"

_ANY_SOURCE_LABEL = '"Book of Mormon" or "Doctrine and Covenants" or "Pearl of Great Price" or "Bible (KJV)"'


def _verse_json_shape(reference_hint: str, version: str, text_hint: str, source_label: str) -> str:
    return f"""{{
  "reference": "{reference_hint}",
  "version": {version},
  "text": "{text_hint}",
  "source": {source_label}
}}"""


def _format_date(today: date) -> str:
    # e.g. "October 19, 2026"
    return f"{today:%B} {today.day}, {today.year}"


def build_come_follow_me_prompt(today: Optional[date] = None) -> str:
    today = today or date.today()
    shape = _verse_json_shape(
        "Book Chapter:Verse (e.g., '1 Nephi 3:7' or 'D&C 4:2')",
        '"LDS"',
        "The exact text of the scripture",
        _ANY_SOURCE_LABEL,
    )
    return f"""Today is {_format_date(today)}. Select a meaningful scripture from the current Come, Follow Me curriculum for The Church of Jesus Christ of Latter-day Saints.

Return ONLY a JSON object with this structure:
{shape}

Choose from any of the Standard Works. Return only the JSON, no explanation."""


def build_book_of_mormon_prompt() -> str:
    shape = _verse_json_shape(
        "Book Chapter:Verse (e.g., '1 Nephi 3:7', 'Alma 32:21', 'Moroni 10:4-5')",
        '"LDS"',
        "The exact text of the scripture",
        '"Book of Mormon"',
    )
    return f"""Select a powerful, well-known scripture from the Book of Mormon that would be meaningful for daily study.

Return ONLY a JSON object with this structure:
{shape}

Choose scriptures that are frequently quoted in General Conference or are particularly meaningful for Latter-day Saints. Return only the JSON, no explanation."""


def build_doctrine_and_covenants_prompt() -> str:
    shape = _verse_json_shape(
        "D&C Section:Verse (e.g., 'D&C 4:2', 'D&C 121:7-8', 'D&C 58:27')",
        '"LDS"',
        "The exact text of the scripture",
        '"Doctrine and Covenants"',
    )
    return f"""Select a meaningful scripture from the Doctrine and Covenants that would be uplifting for daily study.

Return ONLY a JSON object with this structure:
{shape}

Choose scriptures that are frequently quoted or particularly relevant to modern-day Saints. Return only the JSON, no explanation."""


def build_bible_prompt() -> str:
    shape = _verse_json_shape(
        "Book Chapter:Verse (e.g., 'John 3:16', 'James 1:5', 'Isaiah 53:5')",
        '"KJV"',
        "The exact KJV text of the scripture",
        '"Bible (KJV)"',
    )
    return f"""Select a meaningful scripture from the King James Version of the Bible that would be particularly meaningful for Latter-day Saints.

Return ONLY a JSON object with this structure:
{shape}

Choose scriptures that are frequently quoted in LDS contexts or connect to Restoration truths. Return only the JSON, no explanation."""


def build_verse_query_prompt(verse_query: str) -> str:
    shape = _verse_json_shape(
        "Book Chapter:Verse (exactly as requested or corrected if needed)",
        '"LDS" or "KJV"',
        "The exact text of the verse",
        _ANY_SOURCE_LABEL,
    )
    return f"""Return ONLY a JSON object for the LDS scripture: {verse_query}

This could be from the Bible (KJV), Book of Mormon, Doctrine and Covenants, or Pearl of Great Price.

Return ONLY this JSON structure, no markdown, no explanation:
{shape}"""


def build_verse_request(prompt: str) -> LLMRequest:
    """Wrap a verse prompt in an LLMRequest (no system instruction, fixed budget)."""
    return LLMRequest(system_prompt="", user_prompt=prompt, max_tokens=VERSE_TOKEN_BUDGET)
