"""
Context (Backstory) Prompt Templates

Builds the Gemini request for the verse backstory: who is speaking, who
listened, why, the historical backdrop, immediate and long-term impact, and
the setting. The model answers with a JSON object.

Template selection:
- Scripture guidance: one branch per ScriptureCategory × content mode
- Tone: one branch per content mode
"""

from typing import Optional

from scripture_backend.agents.personalization import build_personalization_context
from scripture_backend.agents.scripture import classify_scripture
from scripture_backend.agents.types import ContentMode, LLMRequest, ScriptureCategory
from scripture_backend.utils.constants import PLAIN_PROSE_INSTRUCTION, token_budget

# (category, content_mode) -> guidance
SCRIPTURE_GUIDANCE = {
    (ScriptureCategory.BOOK_OF_MORMON, "casual"): (
        "This is from the Book of Mormon. Cover: the ancient American setting, the prophet or "
        "writer, Book of Mormon chronology, Joseph Smith's translation, and connections to the "
        "brass plates or other Book of Mormon elements."
    ),
    (ScriptureCategory.BOOK_OF_MORMON, "academic"): (
        "This is from the Book of Mormon. Provide scholarly analysis including Hebraisms and "
        "chiastic structures, Book of Mormon geography theories, archaeological connections, "
        "Royal Skousen's textual work and Brant Gardner's cultural commentary."
    ),
    (ScriptureCategory.DOCTRINE_AND_COVENANTS, "casual"): (
        "This is from the Doctrine and Covenants. Cover: what prompted the revelation, who was "
        "present, the location, the early Saints involved and how it shaped the Restoration."
    ),
    (ScriptureCategory.DOCTRINE_AND_COVENANTS, "academic"): (
        "This is from the Doctrine and Covenants. Provide scholarly analysis including historical "
        "documents and correspondence, specific dates and locations, the early Saints involved, "
        "manuscript history and the Joseph Smith Papers."
    ),
    (ScriptureCategory.PEARL_OF_GREAT_PRICE, "casual"): (
        "This is from the Pearl of Great Price. Cover: whether it comes from Moses, Abraham or "
        "Joseph Smith History, the translation context, unique doctrinal insights and temple "
        "connections if applicable."
    ),
    (ScriptureCategory.PEARL_OF_GREAT_PRICE, "academic"): (
        "This is from the Pearl of Great Price. Provide scholarly analysis including translation "
        "history, Egyptological context for the Book of Abraham, comparative ancient Near Eastern "
        "texts and Hugh Nibley's research."
    ),
    (ScriptureCategory.BIBLE, "casual"): (
        "This is from the Bible (KJV). Cover: the biblical setting, how Restoration doctrine "
        "illuminates it, connections to the Book of Mormon, and JST changes if significant."
    ),
    (ScriptureCategory.BIBLE, "academic"): (
        "This is from the Bible (KJV). Provide scholarly analysis including Hebrew (OT) or Greek "
        "(NT) word studies, Dead Sea Scrolls connections, JST variants and ancient Near Eastern context."
    ),
}

TONE_INSTRUCTIONS = {
    "casual": (
        "Write like a knowledgeable Gospel Doctrine teacher who makes history come alive. "
        "Keep it engaging and accessible."
    ),
    "academic": (
        "Write as a religious studies scholar. Be thorough, name your scholarly sources in the "
        "prose and include linguistic analysis."
    ),
}

# field -> extra hint appended in academic mode
CONTEXT_FIELDS = {
    "whoIsSpeaking": ("Plain text about the speaker or writer", " with scholarly detail"),
    "originalListeners": ("Plain text about who received these words", " with specific names and dates"),
    "whyTheConversation": ("Plain text about what prompted these words", " with historical documentation"),
    "historicalBackdrop": ("Plain text painting the bigger picture", " with archaeological and historical context"),
    "immediateImpact": ("Plain text about how people responded", " drawing on early sources"),
    "longTermImpact": ("Plain text about the lasting impact", " including scholarly reception"),
    "setting": ("Plain text describing the location and scene", " with geographical and archaeological detail"),
}


def build_context_request(
    verse_reference: str,
    verse_text: str,
    age_range: Optional[str] = None,
    gender: Optional[str] = None,
    stage_situation: Optional[str] = None,
    source: Optional[str] = None,
    content_mode: ContentMode = "casual",
) -> LLMRequest:
    """
    Build the Gemini request for the verse backstory.

    Returns:
        LLMRequest asking for a JSON object with a `context` object
        (7 prose fields) and a `contextImagePrompt` string.
    """
    category = classify_scripture(verse_reference, source)
    personalization = build_personalization_context(age_range, gender, stage_situation, content_mode)

    system_prompt = f"""{TONE_INSTRUCTIONS[content_mode]}

{SCRIPTURE_GUIDANCE[(category, content_mode)]}

{personalization}

{PLAIN_PROSE_INSTRUCTION}"""

    is_academic = content_mode == "academic"
    field_lines = ",\n".join(
        f'    "{name}": "{description}{academic_hint if is_academic else ""}"'
        for name, (description, academic_hint) in CONTEXT_FIELDS.items()
    )
    source_line = f"(Source: {source})" if source else ""

    user_prompt = f"""Give me the backstory for {verse_reference}: "{verse_text}"
{source_line}

Return ONLY a JSON object with this structure, no markdown, no citations, no URLs anywhere:
{{
  "context": {{
{field_lines}
  }},
  "contextImagePrompt": "Cinematic historical scene description"
}}"""

    return LLMRequest(
        system_prompt=system_prompt,
        user_prompt=user_prompt,
        max_tokens=token_budget("context", content_mode),
    )
