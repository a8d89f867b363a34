"""
Poem Service - hymn-style or free-verse poem inspired by a verse.

Expected model output:

    TITLE=== ... ===TITLE
    POEM=== ... ===POEM
    IMAGE=== ... ===IMAGE

When the POEM block cannot be found, the whole reply minus the other
blocks is used as the poem body.
"""

import logging

from scripture_backend.agents.poem import (
    IMAGE_MARKERS,
    POEM_MARKERS,
    POEM_TYPE_LABELS,
    TITLE_MARKERS,
    build_poem_request,
    is_classic_poem,
)
from scripture_backend.schemas.poem import Poem, PoemRequest, PoemResponse
from scripture_backend.services.llm_client import generate_text
from scripture_backend.utils.llm_parsing import (
    clean_text,
    extract_clean_field,
    extract_field,
    remove_field,
    strip_markers,
)

logger = logging.getLogger(__name__)

DEFAULT_POEM_TITLE = "Untitled Poem"
DEFAULT_POEM_TEXT = "Unable to generate poem."
DEFAULT_POEM_IMAGE_PROMPT = "Uplifting artistic representation of faith, hope, and spiritual peace"


def _poem_body(text: str) -> str:
    body = extract_field(text, *POEM_MARKERS)
    if body is None:
        logger.warning("POEM block missing from model output, using whole reply as poem body")
        body = remove_field(text, *TITLE_MARKERS)
        body = remove_field(body, *IMAGE_MARKERS)
        body = strip_markers(body, *TITLE_MARKERS, *POEM_MARKERS, *IMAGE_MARKERS)
    return clean_text(body) or DEFAULT_POEM_TEXT


async def generate_poem(request: PoemRequest) -> PoemResponse:
    """
    Generate a poem for a verse.

    Raises:
        ProviderError: If Gemini fails or returns nothing
    """
    classic = is_classic_poem(request.poem_type)
    logger.info(
        f"Generating {POEM_TYPE_LABELS[classic]} poem for {request.verse_reference!r} "
        f"(mode={request.content_mode})"
    )

    llm_request = build_poem_request(
        verse_reference=request.verse_reference or "",
        verse_text=request.verse_text or "",
        age_range=request.age_range,
        gender=request.gender,
        stage_situation=request.stage_situation,
        poem_type=request.poem_type,
        source=request.source,
        content_mode=request.content_mode,
    )

    text = await generate_text(llm_request)

    poem = Poem(
        title=extract_clean_field(text, *TITLE_MARKERS, default=DEFAULT_POEM_TITLE),
        type=POEM_TYPE_LABELS[classic],
        text=_poem_body(text),
        image_prompt=extract_clean_field(text, *IMAGE_MARKERS, default=DEFAULT_POEM_IMAGE_PROMPT),
    )
    return PoemResponse(poem=poem)
