"""Poem prompts (delimited response)."""

from scripture_backend.agents.poem.prompts import (
    IMAGE_MARKERS,
    POEM_MARKERS,
    POEM_TYPE_LABELS,
    TITLE_MARKERS,
    build_poem_request,
    is_classic_poem,
)

__all__ = [
    "IMAGE_MARKERS",
    "POEM_MARKERS",
    "POEM_TYPE_LABELS",
    "TITLE_MARKERS",
    "build_poem_request",
    "is_classic_poem",
]
