"""
Imagery (Symbolism) Prompt Templates

Builds the Gemini request for four symbols or metaphors found in a verse.
The model answers with a JSON object holding an `imagery` array.
"""

from typing import Optional

from scripture_backend.agents.personalization import build_personalization_context
from scripture_backend.agents.scripture import classify_scripture
from scripture_backend.agents.types import ContentMode, LLMRequest, ScriptureCategory
from scripture_backend.utils.constants import PLAIN_PROSE_INSTRUCTION, token_budget

# Only these two works get symbol-specific guidance; others get none
SCRIPTURE_GUIDANCE = {
    (ScriptureCategory.BOOK_OF_MORMON, "casual"): (
        "This is from the Book of Mormon. Reference symbols like the Liahona, the iron rod, "
        "the tree of life and the waters of Mormon."
    ),
    (ScriptureCategory.BOOK_OF_MORMON, "academic"): (
        "This is from the Book of Mormon. Draw on scholarly analysis of its symbols: Nibley on "
        "temple imagery, Welch on chiastic symbolism, ancient Near Eastern parallels."
    ),
    (ScriptureCategory.DOCTRINE_AND_COVENANTS, "casual"): (
        "This is from the Doctrine and Covenants. Reference Restoration symbols like the Sacred "
        "Grove, the Kirtland Temple and priesthood keys."
    ),
    (ScriptureCategory.DOCTRINE_AND_COVENANTS, "academic"): (
        "This is from the Doctrine and Covenants. Reference Restoration symbolism with historical "
        "documentation, temple ordinance connections and prophetic commentary."
    ),
}

SYSTEM_ROLES = {
    "casual": (
        "You help Latter-day Saints discover beautiful symbolism in scripture. Write like you're "
        "sharing an insight in Gospel Doctrine class.\n\n{guidance}\n\n"
        "Reference temple symbolism, covenants, prophetic teachings and cross-references when appropriate."
    ),
    "academic": (
        "You are a religious studies scholar analyzing scriptural symbolism. Provide deep symbolic "
        "analysis with references to ancient texts, Hebrew and Greek meanings, temple typology and "
        "interpretations from LDS academics.\n\n{guidance}"
    ),
}

# Material icon names suggested to the model, one per symbol slot
SYMBOL_ICONS = ["auto_awesome", "water_drop", "spa", "wb_sunny"]


def build_imagery_request(
    verse_reference: str,
    verse_text: str,
    age_range: Optional[str] = None,
    gender: Optional[str] = None,
    stage_situation: Optional[str] = None,
    source: Optional[str] = None,
    content_mode: ContentMode = "casual",
) -> LLMRequest:
    """Build the Gemini request for four symbols in a verse."""
    category = classify_scripture(verse_reference, source)
    guidance = SCRIPTURE_GUIDANCE.get((category, content_mode), "")
    personalization = build_personalization_context(age_range, gender, stage_situation, content_mode)

    system_prompt = f"""{SYSTEM_ROLES[content_mode].format(guidance=guidance)}

{PLAIN_PROSE_INSTRUCTION}

{personalization}"""

    if content_mode == "academic":
        approach = (
            "Provide scholarly analysis of each symbol including linguistic origins, ancient "
            "parallels and theological significance."
        )
        sub_hint = "Scholarly analysis with linguistic and historical depth"
    else:
        approach = "Explain each symbol in a friendly, insightful way."
        sub_hint = "Plain text explanation of this symbol and how it applies to Latter-day Saints"

    entries = ",\n".join(
        f'    {{ "title": "Symbol Name", "sub": "{sub_hint}", "icon": "{icon}", "imagePrompt": "Visual description" }}'
        for icon in SYMBOL_ICONS
    )
    source_line = f"(From: {source})" if source else ""

    user_prompt = f"""Find 4 powerful symbols or metaphors in {verse_reference}: "{verse_text}"
{source_line}

{approach}

Return ONLY a JSON object, no markdown, no citations, no URLs:
{{
  "imagery": [
{entries}
  ]
}}"""

    return LLMRequest(
        system_prompt=system_prompt,
        user_prompt=user_prompt,
        max_tokens=token_budget("imagery", content_mode),
    )
