"""
FastAPI routes for verse of the day and verse lookup.

Endpoints:
- POST /api/generate-verse
    - with verseQuery: look up that verse (no fallback)
    - otherwise: verse of the day from `source`, falling back to Come, Follow Me
"""

import logging
from typing import Union

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from scripture_backend.schemas.common import ErrorResponse
from scripture_backend.schemas.verse import VerseRequest, VerseResponse
from scripture_backend.services.verse_service import get_verse_of_the_day, lookup_verse

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["verse"]
)


@router.post(
    "/generate-verse",
    response_model=VerseResponse,
    responses={
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse, "description": "No verse could be produced"},
    },
    summary="Get verse of the day or a specific verse",
    description="""
    **Verse of the day:** send `source` (ComeFollowMe, BookOfMormon,
    DoctrineCovenants or Bible). If that source fails, a verse from this
    week's Come, Follow Me reading is returned instead.

    **Lookup:** send `verseQuery` with a reference such as "Moroni 10:4".
    """
)
async def generate_verse_endpoint(request: VerseRequest) -> Union[VerseResponse, JSONResponse]:
    logger.info(f"POST /api/generate-verse (source={request.source}, verseQuery={request.verse_query!r})")

    try:
        if request.verse_query:
            return await lookup_verse(request.verse_query)

        verse = await get_verse_of_the_day(request.source)
        if verse is None:
            logger.error("All verse sources failed")
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=ErrorResponse(error="Unable to fetch verse of the day").model_dump(),
            )
        return verse
    except Exception as e:
        logger.error(f"Verse generation failed: {e}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error="Failed to generate verse").model_dump(),
        )
