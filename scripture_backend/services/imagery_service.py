"""
Imagery Service - the four main symbols in a verse.
"""

import logging

from scripture_backend.agents.imagery import build_imagery_request
from scripture_backend.schemas.imagery import ImageryRequest, ImageryResponse
from scripture_backend.services.llm_client import generate_text
from scripture_backend.utils.llm_parsing import parse_into

logger = logging.getLogger(__name__)


async def generate_imagery(request: ImageryRequest) -> ImageryResponse:
    """
    Identify the symbols in a verse.

    The reply must hold at least four symbols; only the first four are kept.

    Raises:
        ProviderError: If Gemini fails or returns nothing
        ParseError: If the reply is not valid imagery JSON
    """
    logger.info(f"Generating imagery for {request.verse_reference!r} (mode={request.content_mode})")

    llm_request = build_imagery_request(
        verse_reference=request.verse_reference or "",
        verse_text=request.verse_text or "",
        age_range=request.age_range,
        gender=request.gender,
        stage_situation=request.stage_situation,
        source=request.source,
        content_mode=request.content_mode,
    )

    text = await generate_text(llm_request)
    response = parse_into(text, ImageryResponse)

    logger.info(f"Imagery generated: {[symbol.title for symbol in response.imagery]}")
    return response
