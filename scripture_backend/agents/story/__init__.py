"""Story prompts (delimited response)."""

from scripture_backend.agents.story.prompts import (
    IMAGE_MARKERS,
    STORY_MARKERS,
    TITLE_MARKERS,
    build_story_request,
)

__all__ = [
    "IMAGE_MARKERS",
    "STORY_MARKERS",
    "TITLE_MARKERS",
    "build_story_request",
]
