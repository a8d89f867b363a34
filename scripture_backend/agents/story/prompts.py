"""
Story Prompt Templates

Builds the Gemini request for a short story that brings a verse to life,
either contemporary or historical. The model answers with delimited fields:

    TITLE===...===TITLE
    STORY===...===STORY
    IMAGE===...===IMAGE
"""

from typing import Optional

from scripture_backend.agents.personalization import build_personalization_context
from scripture_backend.agents.types import ContentMode, LLMRequest
from scripture_backend.utils.constants import token_budget

TITLE_MARKERS = ("TITLE===", "===TITLE")
STORY_MARKERS = ("STORY===", "===STORY")
IMAGE_MARKERS = ("IMAGE===", "===IMAGE")

DEFAULT_STORY_TYPE = "contemporary"

STORY_PROMPTS = {
    "casual": {
        "contemporary": (
            "Write a modern-day story set in today's world within an LDS context: a family home, the "
            "ward building, temple grounds, the mission field, a YSA ward, a hospital room with a "
            "priesthood blessing, youth camp. Focus on realistic situations such as callings, missionary "
            "work, covenants, family challenges, service and temple attendance, using natural LDS vernacular."
        ),
        "historical": (
            "Write a story in a historical setting tied to this scripture. For the Book of Mormon, take "
            "the perspective of someone in the narrative. For the Bible, use the original biblical "
            "setting. For the D&C, use the early Restoration: Joseph Smith's era, Kirtland, Nauvoo or the "
            "pioneer trek. Make it historically vivid."
        ),
    },
    "academic": {
        "contemporary": (
            "Write a modern narrative that explores the theological and doctrinal implications of this "
            "scripture, with realistic scenarios where Latter-day Saints grapple with applying its "
            "principles, informed by scholarly insight and deeper doctrinal understanding."
        ),
        "historical": (
            "Write a historically rigorous narrative set in the actual time and place of this scripture. "
            "For the Book of Mormon, use ancient American cultural details from scholarly theories. For "
            "the Bible, use accurate ancient Near Eastern context. For the D&C, use precise details from "
            "the Joseph Smith Papers and early Church documents. Include accurate cultural practices, "
            "material culture and historical figures."
        ),
    },
}

STORYTELLER_ROLES = {
    "casual": (
        "You are a gifted storyteller for Latter-day Saints. Write stories that feel authentic to LDS "
        "culture, like ones shared at a fireside or in a Come, Follow Me discussion.\n\n"
        "Stories should be genuine and relatable, use LDS terminology naturally, never be preachy, "
        "show characters growing in testimony and be appropriate for all ages."
    ),
    "academic": (
        "You are a historical fiction writer with deep expertise in religious history and LDS "
        "scholarship. Write stories that are both engaging and historically and doctrinally rigorous."
    ),
}

STORY_FORMAT_INSTRUCTION = (
    "CRITICAL: Write ONLY plain prose. NO URLs, NO links, NO citations, NO bracketed text, NO markdown "
    "formatting, NO asterisks or underscores for emphasis."
)

WORD_COUNTS = {"casual": "500", "academic": "800-1000"}


def get_story_prompt(content_mode: ContentMode, story_type: Optional[str]) -> str:
    """Story guidance for a mode and type; unknown types fall back to casual, then contemporary."""
    by_type = STORY_PROMPTS[content_mode]
    if story_type in by_type:
        return by_type[story_type]
    return STORY_PROMPTS["casual"].get(story_type or "", STORY_PROMPTS["casual"][DEFAULT_STORY_TYPE])


def build_story_request(
    verse_reference: str,
    verse_text: str,
    story_type: str,
    age_range: Optional[str] = None,
    gender: Optional[str] = None,
    stage_situation: Optional[str] = None,
    source: Optional[str] = None,
    content_mode: ContentMode = "casual",
) -> LLMRequest:
    """Build the Gemini request for one story."""
    personalization = build_personalization_context(age_range, gender, stage_situation, content_mode)

    system_prompt = f"""{STORYTELLER_ROLES[content_mode]}

{STORY_FORMAT_INSTRUCTION}

{personalization}"""

    source_line = f"(Scripture source: {source})" if source else ""

    user_prompt = f"""Create ONE powerful story that brings {verse_reference}: "{verse_text}" to life.
{source_line}

{get_story_prompt(content_mode, story_type)}

The story should be at least {WORD_COUNTS[content_mode]} words with detailed scene setting, dialogue, internal thoughts and a clear narrative arc.

Format response EXACTLY like this:
{TITLE_MARKERS[0]}Your Story Title{TITLE_MARKERS[1]}
{STORY_MARKERS[0]}Your full story text (plain prose, no formatting){STORY_MARKERS[1]}
{IMAGE_MARKERS[0]}Cinematic scene description for an image{IMAGE_MARKERS[1]}"""

    return LLMRequest(
        system_prompt=system_prompt,
        user_prompt=user_prompt,
        max_tokens=token_budget("story", content_mode),
    )
