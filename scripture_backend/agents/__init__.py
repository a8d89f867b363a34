"""
Prompt construction for every generation endpoint.

Each subpackage owns the templates for one endpoint and exposes a
``build_<endpoint>_request`` function returning an LLMRequest
(system prompt, user prompt, max output tokens). Shared pieces:

- personalization: age / gender / life-situation instructions
- scripture: standard-work classification of a verse reference
- types: LLMRequest, ScriptureCategory, ContentMode

Nothing in this package performs I/O; the Gemini call and response parsing
live in scripture_backend/services.
"""

from scripture_backend.agents.personalization import build_personalization_context
from scripture_backend.agents.scripture import classify_scripture
from scripture_backend.agents.types import (
    ContentMode,
    LLMRequest,
    ScriptureCategory,
    normalize_content_mode,
)

__all__ = [
    "build_personalization_context",
    "classify_scripture",
    "ContentMode",
    "LLMRequest",
    "ScriptureCategory",
    "normalize_content_mode",
]
