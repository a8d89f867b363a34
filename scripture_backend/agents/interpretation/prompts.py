"""
Interpretation Prompt Templates

Builds the Gemini request for a reflective monologue (casual) or scholarly
analysis (academic) of a verse, optionally in a language other than English.

The model answers with two delimited fields:

    INTERPRETATION===
    ...
    ===INTERPRETATION

    IMAGE_PROMPT===
    ...
    ===IMAGE_PROMPT

Non-English output: the language requirement is stated in the system prompt
AND restated next to the user prompt. Models tend to drift back to English
mid-answer when it is stated only once.
"""

from typing import Optional

from scripture_backend.agents.personalization import build_personalization_context
from scripture_backend.agents.types import ContentMode, LLMRequest
from scripture_backend.utils.constants import PLAIN_PROSE_INSTRUCTION, token_budget

INTERPRETATION_MARKERS = ("INTERPRETATION===", "===INTERPRETATION")
IMAGE_PROMPT_MARKERS = ("IMAGE_PROMPT===", "===IMAGE_PROMPT")

DEFAULT_LANGUAGE = "en"

LANGUAGE_NAMES = {
    "en": "English",
    "es": "Spanish (Español)",
    "fr": "French (Français)",
    "de": "German (Deutsch)",
    "pt": "Portuguese (Português)",
    "zh": "Chinese (中文)",
    "vi": "Vietnamese (Tiếng Việt)",
    "ko": "Korean (한국어)",
    "th": "Thai (ไทย)",
    "tl": "Tagalog",
    "ja": "Japanese (日本語)",
}

SYSTEM_ROLES = {
    "casual": """You are creating scripture study content for members of The Church of Jesus Christ of Latter-day Saints.

Key guidelines:
- Use LDS terminology naturally (testimony, covenant, priesthood, temple, calling, ward, stake, bishop)
- Reference modern prophets and General Conference when relevant
- Connect scriptures to the Restoration, the Plan of Salvation and latter-day context
- For Book of Mormon verses, mention who is speaking (Nephi, Alma, Mormon, etc.)
- For D&C verses, mention the historical context of the revelation when helpful
- Keep a tone consistent with Church publications: warm, testimony-building and doctrinally sound
- Say "Latter-day Saints" or "members of the Church" rather than using "Mormon" as a noun""",
    "academic": (
        "You are a religious studies scholar specializing in Latter-day Saint scripture and history. "
        "Provide rigorous academic analysis while maintaining a faith-affirming perspective."
    ),
}

TASK_INSTRUCTIONS = {
    "casual": (
        "Write a reflective monologue about this scripture in a warm, personal tone. It should feel "
        "like something a thoughtful member might share in testimony meeting or a Come, Follow Me "
        "discussion: genuine, heartfelt and connected to real life."
    ),
    "academic": (
        "Write a scholarly analysis of this scripture. Include linguistic insights (Hebrew, Greek or "
        "Hebraisms where relevant), historical-critical context, cross-references and academic "
        "perspective, naming LDS scholars such as Nibley or Welch where appropriate. Keep academic "
        "rigor while being spiritually insightful."
    ),
}

WORD_LIMITS = {"casual": "under 200 words", "academic": "300-400 words"}


def resolve_language_name(code: Optional[str]) -> str:
    """Human-readable label for a language code; unknown codes resolve to English."""
    return LANGUAGE_NAMES.get(code or DEFAULT_LANGUAGE, LANGUAGE_NAMES[DEFAULT_LANGUAGE])


def build_language_instruction(language: str) -> str:
    """System-prompt requirement for non-English output ("" for English)."""
    language_name = resolve_language_name(language)
    if language_name == LANGUAGE_NAMES[DEFAULT_LANGUAGE]:
        return ""
    return (
        f"CRITICAL LANGUAGE REQUIREMENT: You MUST write your entire interpretation in {language_name}. "
        f"Every single word of the interpretation content must be in {language_name}. Do NOT write in "
        f"English. The delimiters stay in English, but ALL content between them must be in {language_name}."
    )


def build_interpretation_request(
    verse_reference: str,
    verse_text: str,
    age_range: Optional[str] = None,
    gender: Optional[str] = None,
    stage_situation: Optional[str] = None,
    language: str = DEFAULT_LANGUAGE,
    source: Optional[str] = None,
    content_mode: ContentMode = "casual",
) -> LLMRequest:
    """
    Build the Gemini request for a verse interpretation.

    Args:
        language: Language code (e.g. "es"). Known non-English codes trigger the
            repeated language requirement; unknown codes behave as English.
    """
    personalization = build_personalization_context(age_range, gender, stage_situation, content_mode)
    language = language or DEFAULT_LANGUAGE
    language_instruction = build_language_instruction(language)

    system_parts = [SYSTEM_ROLES[content_mode], PLAIN_PROSE_INSTRUCTION]
    if language_instruction:
        system_parts.append(language_instruction)
    system_prompt = "\n\n".join(system_parts) + personalization

    reminder = ""
    if language_instruction:
        reminder = f"REMINDER: Write your interpretation in {resolve_language_name(language)}, NOT English.\n\n"

    is_academic = content_mode == "academic"
    piece = "scholarly analysis" if is_academic else "reflective monologue"
    flow = "analysis" if is_academic else "reflection"
    source_line = f"(Source: {source})" if source else ""
    begin, end = INTERPRETATION_MARKERS
    image_begin, image_end = IMAGE_PROMPT_MARKERS

    user_prompt = f"""{verse_reference}: "{verse_text}"
{source_line}

{reminder}{TASK_INSTRUCTIONS[content_mode]}

Write ONLY plain text - no URLs, no links, no citations, no brackets, no asterisks.

Format your response EXACTLY like this:

{begin}
Your {piece} here... ({WORD_LIMITS[content_mode]}, just flowing {flow})
{end}

{image_begin}
Cinematic description of an inspiring scene that captures the scripture's theme.
{image_end}"""

    return LLMRequest(
        system_prompt=system_prompt,
        user_prompt=user_prompt,
        max_tokens=token_budget("interpretation", content_mode),
    )
