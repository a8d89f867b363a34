"""
Service layer for the Scripture Insights backend.

Each service:
- Builds the endpoint's LLM request from the (personalized) API request
- Calls Gemini through llm_client.generate_text
- Parses, sanitizes and maps the reply into Pydantic response models

Routes stay thin: they call one service and translate its errors.
"""

from .context_service import generate_context
from .imagery_service import generate_imagery
from .interpretation_service import generate_interpretation
from .llm_client import generate_text
from .poem_service import generate_poem
from .story_service import generate_story
from .verse_service import (
    fetch_bible_verse,
    fetch_book_of_mormon_verse,
    fetch_come_follow_me_verse,
    fetch_doctrine_and_covenants_verse,
    get_verse_of_the_day,
    lookup_verse,
)

__all__ = [
    "generate_context",
    "generate_imagery",
    "generate_interpretation",
    "generate_poem",
    "generate_story",
    "generate_text",
    "fetch_bible_verse",
    "fetch_book_of_mormon_verse",
    "fetch_come_follow_me_verse",
    "fetch_doctrine_and_covenants_verse",
    "get_verse_of_the_day",
    "lookup_verse",
]
