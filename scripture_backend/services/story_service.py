"""
Story Service - short contemporary or historical story inspired by a verse.

Expected model output:

    TITLE=== ... ===TITLE
    STORY=== ... ===STORY
    IMAGE=== ... ===IMAGE

verseReference, verseText and storyType are required; the route turns a
MissingFieldsError into a renderable placeholder.
"""

import logging

from scripture_backend.agents.story import (
    IMAGE_MARKERS,
    STORY_MARKERS,
    TITLE_MARKERS,
    build_story_request,
)
from scripture_backend.exceptions import MissingFieldsError
from scripture_backend.schemas.story import StoryRequest, StoryResponse
from scripture_backend.services.llm_client import generate_text
from scripture_backend.utils.llm_parsing import (
    clean_text,
    extract_clean_field,
    extract_field,
    remove_field,
    strip_markers,
)

logger = logging.getLogger(__name__)

DEFAULT_STORY_TITLE = "A Story of Faith"
DEFAULT_STORY_TEXT = "Unable to generate story."
STORY_IMAGE_PROMPT_TEMPLATE = "A warm, uplifting scene depicting {verse_reference}"


def _require_fields(request: StoryRequest) -> None:
    missing = [
        alias
        for alias, value in (
            ("verseReference", request.verse_reference),
            ("verseText", request.verse_text),
            ("storyType", request.story_type),
        )
        if not value
    ]
    if missing:
        raise MissingFieldsError(missing)


def _story_body(text: str) -> str:
    body = extract_field(text, *STORY_MARKERS)
    if body is None:
        logger.warning("STORY block missing from model output, using whole reply as story body")
        body = remove_field(text, *TITLE_MARKERS)
        body = remove_field(body, *IMAGE_MARKERS)
        body = strip_markers(body, *TITLE_MARKERS, *STORY_MARKERS, *IMAGE_MARKERS)
    return clean_text(body) or DEFAULT_STORY_TEXT


async def generate_story(request: StoryRequest) -> StoryResponse:
    """
    Generate a story for a verse.

    Raises:
        MissingFieldsError: If verseReference, verseText or storyType is
            empty. Raised before Gemini is called.
        ProviderError: If Gemini fails or returns nothing
    """
    _require_fields(request)

    logger.info(
        f"Generating {request.story_type} story for {request.verse_reference!r} "
        f"(mode={request.content_mode})"
    )

    llm_request = build_story_request(
        verse_reference=request.verse_reference,
        verse_text=request.verse_text,
        story_type=request.story_type,
        age_range=request.age_range,
        gender=request.gender,
        stage_situation=request.stage_situation,
        source=request.source,
        content_mode=request.content_mode,
    )

    text = await generate_text(llm_request)

    return StoryResponse(
        title=extract_clean_field(text, *TITLE_MARKERS, default=DEFAULT_STORY_TITLE),
        text=_story_body(text),
        image_prompt=extract_clean_field(
            text,
            *IMAGE_MARKERS,
            default=STORY_IMAGE_PROMPT_TEMPLATE.format(verse_reference=request.verse_reference),
        ),
    )
