"""
FastAPI routes for the verse study generators.

Endpoints (all public, all POST):
- /api/generate-context: historical and cultural background (JSON)
- /api/generate-imagery: four symbols from the verse (JSON)
- /api/generate-interpretation: reflection or scholarly analysis (delimited)
- /api/generate-poem: hymn-style or free-verse poem (delimited)
- /api/generate-story: contemporary or historical story (delimited)

Every endpoint follows the same flow:
1. Parse/Validate: Pydantic request model (camelCase aliases)
2. Call service: build prompt, call Gemini, parse and sanitize
3. Map errors: any failure becomes a generic {"error": ...} 500

The story endpoint is the exception: failures still return a renderable
placeholder story (400 for missing fields, 200 for generation failures).
"""

import logging
from typing import Union

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from scripture_backend.exceptions import MissingFieldsError
from scripture_backend.schemas.common import ErrorResponse
from scripture_backend.schemas.context import ContextRequest, ContextResponse
from scripture_backend.schemas.imagery import ImageryRequest, ImageryResponse
from scripture_backend.schemas.interpretation import InterpretationRequest, InterpretationResponse
from scripture_backend.schemas.poem import PoemRequest, PoemResponse
from scripture_backend.schemas.story import (
    StoryErrorResponse,
    StoryRequest,
    StoryResponse,
    generation_failed_placeholder,
    missing_fields_placeholder,
)
from scripture_backend.services.context_service import generate_context
from scripture_backend.services.imagery_service import generate_imagery
from scripture_backend.services.interpretation_service import generate_interpretation
from scripture_backend.services.poem_service import generate_poem
from scripture_backend.services.story_service import generate_story

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["generation"]
)

ERROR_RESPONSES = {
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse, "description": "Generation failed"},
}


def _error_response(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(error=message).model_dump(),
    )


@router.post(
    "/generate-context",
    response_model=ContextResponse,
    responses=ERROR_RESPONSES,
    summary="Generate verse context",
    description="""
    Returns the historical, cultural and doctrinal background of a verse in
    seven sections plus an image prompt for the setting.

    Tone and depth follow contentMode (casual or academic) and the optional
    personalization fields (ageRange, gender, stageSituation).
    """
)
async def generate_context_endpoint(request: ContextRequest) -> Union[ContextResponse, JSONResponse]:
    logger.info(f"POST /api/generate-context for {request.verse_reference!r}")

    try:
        return await generate_context(request)
    except Exception as e:
        logger.error(f"Context generation failed: {e}", exc_info=True)
        return _error_response("Failed to generate context")


@router.post(
    "/generate-imagery",
    response_model=ImageryResponse,
    responses=ERROR_RESPONSES,
    summary="Generate verse imagery",
    description="Returns exactly four symbols from the verse, each with an icon and an image prompt."
)
async def generate_imagery_endpoint(request: ImageryRequest) -> Union[ImageryResponse, JSONResponse]:
    logger.info(f"POST /api/generate-imagery for {request.verse_reference!r}")

    try:
        return await generate_imagery(request)
    except Exception as e:
        logger.error(f"Imagery generation failed: {e}", exc_info=True)
        return _error_response("Failed to generate imagery")


@router.post(
    "/generate-interpretation",
    response_model=InterpretationResponse,
    responses=ERROR_RESPONSES,
    summary="Generate verse interpretation",
    description="""
    Returns a devotional reflection (casual) or scholarly analysis (academic)
    of the verse, written in the requested language, plus a hero image prompt.
    """
)
async def generate_interpretation_endpoint(
    request: InterpretationRequest
) -> Union[InterpretationResponse, JSONResponse]:
    logger.info(f"POST /api/generate-interpretation for {request.verse_reference!r} (language={request.language})")

    try:
        return await generate_interpretation(request)
    except Exception as e:
        logger.error(f"Interpretation generation failed: {e}", exc_info=True)
        return _error_response("Failed to generate interpretation")


@router.post(
    "/generate-poem",
    response_model=PoemResponse,
    responses=ERROR_RESPONSES,
    summary="Generate a poem",
    description='Returns a poem inspired by the verse. poemType "classic" gives hymn style, anything else free verse.'
)
async def generate_poem_endpoint(request: PoemRequest) -> Union[PoemResponse, JSONResponse]:
    logger.info(f"POST /api/generate-poem for {request.verse_reference!r} (poemType={request.poem_type})")

    try:
        return await generate_poem(request)
    except Exception as e:
        logger.error(f"Poem generation failed: {e}", exc_info=True)
        return _error_response("Failed to generate poem")


@router.post(
    "/generate-story",
    response_model=StoryResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": StoryErrorResponse, "description": "Missing required fields"},
    },
    summary="Generate a story",
    description="""
    Returns a contemporary or historical story inspired by the verse.

    verseReference, verseText and storyType are required. The response always
    carries a renderable title, text and imagePrompt:
    - Missing fields: 400 with an error message and a placeholder story
    - Generation failure: 200 with a placeholder story
    """
)
async def generate_story_endpoint(request: StoryRequest) -> Union[StoryResponse, JSONResponse]:
    logger.info(f"POST /api/generate-story for {request.verse_reference!r} (storyType={request.story_type})")

    try:
        return await generate_story(request)
    except MissingFieldsError as e:
        logger.warning(f"Story request rejected: {e}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=missing_fields_placeholder().model_dump(by_alias=True),
        )
    except Exception as e:
        logger.error(f"Story generation failed: {e}", exc_info=True)
        return generation_failed_placeholder()
