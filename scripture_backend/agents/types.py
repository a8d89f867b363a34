"""
Shared type definitions for the prompt builders.

Strictly typed contracts passed from the agents layer (prompt construction)
to the services layer (Gemini call + parsing).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Optional

ContentMode = Literal["casual", "academic"]


class ScriptureCategory(str, Enum):
    """The four standard works a reference can belong to."""
    BOOK_OF_MORMON = "Book of Mormon"
    DOCTRINE_AND_COVENANTS = "Doctrine and Covenants"
    PEARL_OF_GREAT_PRICE = "Pearl of Great Price"
    BIBLE = "Bible (KJV)"


@dataclass(frozen=True)
class LLMRequest:
    """A single Gemini call: system instruction, user prompt and output token budget."""
    system_prompt: str
    user_prompt: str
    max_tokens: int


def normalize_content_mode(content_mode: Optional[str]) -> ContentMode:
    """Anything other than "academic" is treated as casual."""
    return "academic" if content_mode == "academic" else "casual"
