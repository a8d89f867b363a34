"""
Domain exceptions for the generation pipeline.

- ProviderError: the Gemini call failed (network, auth, quota, missing API key)
- ParseError: the model reply does not follow the requested JSON or delimiter format
- MissingFieldsError: required request fields are absent (checked before any model call)

Routes catch these at a single boundary per endpoint and translate them into
generic JSON error payloads. Exception messages are for server logs only.
"""

from typing import List


class GenerationError(Exception):
    """Base class for every failure in the generate → parse → clean pipeline."""


class ProviderError(GenerationError):
    """Raised when the LLM provider call fails or cannot be made."""


class ParseError(GenerationError):
    """Raised when model output cannot be parsed into the expected shape."""

    def __init__(self, message: str, raw_text: str = ""):
        super().__init__(message)
        self.raw_text = raw_text


class MissingFieldsError(GenerationError):
    """Raised when a request lacks fields the endpoint cannot work without."""

    def __init__(self, missing: List[str]):
        super().__init__(f"Missing required fields: {', '.join(missing)}")
        self.missing = missing
