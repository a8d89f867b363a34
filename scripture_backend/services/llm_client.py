"""
Gemini client adapter.

Thin wrapper around the Google Gen AI SDK (google-genai). Every endpoint goes
through generate_text(), which takes an LLMRequest and returns raw text.

- Model: settings.GEMINI_MODEL_ID (default gemini-2.5-flash)
- Temperature: settings.LLM_TEMPERATURE
- Output budget: LLMRequest.max_tokens
- One attempt per call; no retries at this layer

Any failure (missing API key, network, auth, quota, empty reply) is raised as
ProviderError. Callers decide whether that is fatal or triggers a fallback.
"""

import logging
import os
from typing import Optional

from google import genai
from google.genai import types

from scripture_backend.agents.types import LLMRequest
from scripture_backend.config import settings
from scripture_backend.exceptions import ProviderError

logger = logging.getLogger(__name__)

# Initialize Gemini client (lazy initialization)
_gemini_client: Optional[genai.Client] = None


def _get_gemini_client() -> Optional[genai.Client]:
    """
    Lazy initialization of Gemini client.

    Returns None when GOOGLE_API_KEY is not configured.
    """
    global _gemini_client

    if _gemini_client is not None:
        return _gemini_client

    api_key = settings.GOOGLE_API_KEY or os.getenv("GOOGLE_API_KEY", "")

    if not api_key:
        logger.warning(
            "GOOGLE_API_KEY not configured. Generation endpoints will not work. "
            "Please set GOOGLE_API_KEY in your .env file."
        )
        return None

    try:
        _gemini_client = genai.Client(api_key=api_key)
        logger.info("Gemini client initialized successfully")
        return _gemini_client
    except Exception as e:
        logger.error(f"Failed to initialize Gemini client: {e}")
        return None


def _build_config(request: LLMRequest) -> types.GenerateContentConfig:
    thinking_config = None
    if settings.GEMINI_THINKING_BUDGET >= 0:
        thinking_config = types.ThinkingConfig(thinking_budget=settings.GEMINI_THINKING_BUDGET)

    return types.GenerateContentConfig(
        system_instruction=request.system_prompt or None,
        temperature=settings.LLM_TEMPERATURE,
        max_output_tokens=request.max_tokens,
        thinking_config=thinking_config,
    )


def _extract_response_text(response) -> str:
    """Pull the reply text, falling back to candidate parts when .text is empty."""
    content = response.text
    if content:
        return content

    if response.candidates:
        candidate = response.candidates[0]
        if candidate.content and candidate.content.parts:
            for part in candidate.content.parts:
                if getattr(part, "text", None):
                    return part.text

    return ""


async def generate_text(request: LLMRequest) -> str:
    """
    Run a single Gemini generation.

    Args:
        request: System prompt, user prompt and max output tokens

    Returns:
        Raw model text (not parsed, not cleaned)

    Raises:
        ProviderError: If the client is not configured, the call fails or the
            reply has no text.
    """
    client = _get_gemini_client()
    if client is None:
        raise ProviderError("Gemini client is not configured (missing GOOGLE_API_KEY)")

    logger.info(
        f"Calling Gemini model={settings.GEMINI_MODEL_ID}, max_tokens={request.max_tokens}"
    )

    try:
        response = await client.aio.models.generate_content(
            model=settings.GEMINI_MODEL_ID,
            contents=request.user_prompt,
            config=_build_config(request),
        )
    except Exception as e:
        logger.error(f"Error calling Gemini API: {e}")
        raise ProviderError(f"Gemini call failed: {e}") from e

    text = _extract_response_text(response)
    if not text:
        logger.error("Empty text in Gemini response")
        raise ProviderError("Gemini returned an empty response")

    logger.debug(f"Gemini response preview: {text[:200]}...")
    return text
