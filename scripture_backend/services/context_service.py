"""
Context Service - historical and cultural background for a verse.

Flow:
1. Build the (personalized) context request for the verse
2. Ask Gemini for a JSON object with the seven context sections
3. Parse, sanitize and validate into ContextResponse
"""

import logging

from scripture_backend.agents.context import build_context_request
from scripture_backend.schemas.context import ContextRequest, ContextResponse
from scripture_backend.services.llm_client import generate_text
from scripture_backend.utils.llm_parsing import parse_into

logger = logging.getLogger(__name__)


async def generate_context(request: ContextRequest) -> ContextResponse:
    """
    Generate the context sections for a verse.

    Raises:
        ProviderError: If Gemini fails or returns nothing
        ParseError: If the reply is not a complete context object
    """
    logger.info(f"Generating context for {request.verse_reference!r} (mode={request.content_mode})")

    llm_request = build_context_request(
        verse_reference=request.verse_reference or "",
        verse_text=request.verse_text or "",
        age_range=request.age_range,
        gender=request.gender,
        stage_situation=request.stage_situation,
        source=request.source,
        content_mode=request.content_mode,
    )

    text = await generate_text(llm_request)
    response = parse_into(text, ContextResponse)

    logger.info(f"Context generated for {request.verse_reference!r}")
    return response
