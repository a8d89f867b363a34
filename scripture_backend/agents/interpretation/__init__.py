"""Verse interpretation prompts (delimited response, multi-language)."""

from scripture_backend.agents.interpretation.prompts import (
    DEFAULT_LANGUAGE,
    IMAGE_PROMPT_MARKERS,
    INTERPRETATION_MARKERS,
    build_interpretation_request,
    resolve_language_name,
)

__all__ = [
    "DEFAULT_LANGUAGE",
    "IMAGE_PROMPT_MARKERS",
    "INTERPRETATION_MARKERS",
    "build_interpretation_request",
    "resolve_language_name",
]
