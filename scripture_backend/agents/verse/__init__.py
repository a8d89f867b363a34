"""Verse-of-the-day and verse lookup prompts (JSON response)."""

from scripture_backend.agents.verse.prompts import (
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

__all__ = [
    "BIBLE",
    "BOOK_OF_MORMON",
    "COME_FOLLOW_ME",
    "DOCTRINE_AND_COVENANTS",
    "build_bible_prompt",
    "build_book_of_mormon_prompt",
    "build_come_follow_me_prompt",
    "build_doctrine_and_covenants_prompt",
    "build_verse_query_prompt",
    "build_verse_request",
]
