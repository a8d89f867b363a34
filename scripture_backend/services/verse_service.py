"""
Verse Service - verse of the day and direct verse lookup.

Verse of the day:
- Try the requested source (ComeFollowMe, BookOfMormon, DoctrineCovenants, Bible)
- If that fails for any reason, try Come, Follow Me once more
- If both fail, return None and let the route answer with a 500

Direct lookup (verseQuery) has no fallback: errors propagate to the route.

Scripture text is returned exactly as the model quotes it, so verse replies
are validated but not run through clean_text.
"""

import logging
from typing import Awaitable, Callable, Dict, Optional

from scripture_backend.agents.verse import (
    BIBLE,
    BOOK_OF_MORMON,
    COME_FOLLOW_ME,
    DOCTRINE_AND_COVENANTS,
    build_bible_prompt,
    build_book_of_mormon_prompt,
    build_come_follow_me_prompt,
    build_doctrine_and_covenants_prompt,
    build_verse_query_prompt,
    build_verse_request,
)
from scripture_backend.exceptions import GenerationError
from scripture_backend.schemas.verse import VerseResponse
from scripture_backend.services.llm_client import generate_text
from scripture_backend.utils.llm_parsing import parse_into

logger = logging.getLogger(__name__)


async def _request_verse(prompt: str) -> VerseResponse:
    text = await generate_text(build_verse_request(prompt))
    return parse_into(text, VerseResponse, clean=False)


async def _fetch_or_none(label: str, prompt: str) -> Optional[VerseResponse]:
    try:
        verse = await _request_verse(prompt)
    except GenerationError as e:
        logger.error(f"{label} verse fetch failed: {e}")
        return None

    logger.info(f"{label} verse fetched: {verse.reference}")
    return verse


async def fetch_come_follow_me_verse() -> Optional[VerseResponse]:
    """Verse from this week's Come, Follow Me reading, or None on failure."""
    return await _fetch_or_none(COME_FOLLOW_ME, build_come_follow_me_prompt())


async def fetch_book_of_mormon_verse() -> Optional[VerseResponse]:
    """Uplifting Book of Mormon verse, or None on failure."""
    return await _fetch_or_none(BOOK_OF_MORMON, build_book_of_mormon_prompt())


async def fetch_doctrine_and_covenants_verse() -> Optional[VerseResponse]:
    """Uplifting Doctrine and Covenants verse, or None on failure."""
    return await _fetch_or_none(DOCTRINE_AND_COVENANTS, build_doctrine_and_covenants_prompt())


async def fetch_bible_verse() -> Optional[VerseResponse]:
    """Uplifting KJV Bible verse, or None on failure."""
    return await _fetch_or_none(BIBLE, build_bible_prompt())


VERSE_FETCHERS: Dict[str, Callable[[], Awaitable[Optional[VerseResponse]]]] = {
    COME_FOLLOW_ME: fetch_come_follow_me_verse,
    BOOK_OF_MORMON: fetch_book_of_mormon_verse,
    DOCTRINE_AND_COVENANTS: fetch_doctrine_and_covenants_verse,
    BIBLE: fetch_bible_verse,
}


async def get_verse_of_the_day(source: Optional[str]) -> Optional[VerseResponse]:
    """
    Fetch a verse of the day with the Come, Follow Me fallback.

    Unknown or missing sources go straight to Come, Follow Me. The fallback
    runs even when the primary source was Come, Follow Me itself, giving it a
    second attempt.

    Returns:
        The verse, or None if both attempts failed
    """
    verse = None

    fetcher = VERSE_FETCHERS.get(source or "")
    if fetcher is not None:
        verse = await fetcher()
    else:
        logger.info(f"Unknown verse source {source!r}, using Come, Follow Me")

    if verse is None:
        logger.info("Primary verse source failed, trying Come, Follow Me")
        verse = await fetch_come_follow_me_verse()

    return verse


async def lookup_verse(verse_query: str) -> VerseResponse:
    """
    Look up the exact verse the user searched for.

    Raises:
        ProviderError: If Gemini fails or returns nothing
        ParseError: If the reply is not a valid verse object
    """
    logger.info(f"Looking up verse {verse_query!r}")
    return await _request_verse(build_verse_query_prompt(verse_query))
