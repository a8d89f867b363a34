"""
Interpretation Service - devotional reflection or scholarly analysis of a verse.

The model answers with two delimited blocks:

    INTERPRETATION=== ... ===INTERPRETATION
    IMAGE_PROMPT=== ... ===IMAGE_PROMPT

Missing blocks fall back to fixed placeholders so the client always has
something to render.
"""

import logging

from scripture_backend.agents.interpretation import (
    DEFAULT_LANGUAGE,
    IMAGE_PROMPT_MARKERS,
    INTERPRETATION_MARKERS,
    build_interpretation_request,
)
from scripture_backend.schemas.interpretation import InterpretationRequest, InterpretationResponse
from scripture_backend.services.llm_client import generate_text
from scripture_backend.utils.llm_parsing import extract_clean_field

logger = logging.getLogger(__name__)

DEFAULT_INTERPRETATION = "Unable to generate interpretation."
DEFAULT_HERO_IMAGE_PROMPT = "A serene scene depicting faith and hope"


async def generate_interpretation(request: InterpretationRequest) -> InterpretationResponse:
    """
    Generate an interpretation of a verse in the requested language.

    Raises:
        ProviderError: If Gemini fails or returns nothing
    """
    logger.info(
        f"Generating interpretation for {request.verse_reference!r} "
        f"(mode={request.content_mode}, language={request.language})"
    )

    llm_request = build_interpretation_request(
        verse_reference=request.verse_reference or "",
        verse_text=request.verse_text or "",
        age_range=request.age_range,
        gender=request.gender,
        stage_situation=request.stage_situation,
        language=request.language or DEFAULT_LANGUAGE,
        source=request.source,
        content_mode=request.content_mode,
    )

    text = await generate_text(llm_request)

    interpretation = extract_clean_field(text, *INTERPRETATION_MARKERS, default=DEFAULT_INTERPRETATION)
    hero_image_prompt = extract_clean_field(text, *IMAGE_PROMPT_MARKERS, default=DEFAULT_HERO_IMAGE_PROMPT)

    if interpretation == DEFAULT_INTERPRETATION:
        logger.warning("Interpretation block missing from model output, using placeholder")

    return InterpretationResponse(
        interpretation=interpretation,
        hero_image_prompt=hero_image_prompt,
    )
