"""
Poem Prompt Templates

Builds the Gemini request for a hymn-style (classic) or free verse poem
inspired by a verse. The model answers with delimited fields:

    TITLE===...===TITLE
    POEM===
    ...
    ===POEM
    IMAGE===...===IMAGE
"""

from typing import Optional

from scripture_backend.agents.personalization import build_personalization_context
from scripture_backend.agents.types import ContentMode, LLMRequest
from scripture_backend.utils.constants import token_budget

TITLE_MARKERS = ("TITLE===", "===TITLE")
POEM_MARKERS = ("POEM===", "===POEM")
IMAGE_MARKERS = ("IMAGE===", "===IMAGE")

CLASSIC_POEM_TYPE = "classic"
POEM_TYPE_LABELS = {True: "Hymn Style", False: "Free Verse"}

# (content_mode, is_classic) -> style guide
STYLE_GUIDES = {
    ("casual", True): (
        "Write a HYMN-STYLE poem reminiscent of LDS hymns, with rhyme, meter and a traditional "
        "structure that could be sung."
    ),
    ("casual", False): (
        "Write a FREE VERSE poem with vivid imagery and testimony-building themes, no strict rhyme required."
    ),
    ("academic", True): (
        "Write a formally structured poem with attention to meter, rhyme scheme and classical poetic "
        "devices, drawing on the tradition of Herbert, Hopkins and LDS hymnody."
    ),
    ("academic", False): (
        "Write a literary free verse poem with sophisticated imagery, allusion to scriptural typology "
        "and theological depth, in the vein of Eliot's religious poetry or contemporary religious verse."
    ),
}

POET_ROLES = {
    "casual": (
        "You are a gifted Latter-day Saint poet. Your poems reflect hope, faith and testimony of the "
        "restored gospel with proper structure, line breaks and stanzas. Reference gospel themes "
        "naturally: covenants, the Savior, temples, families, the Restoration."
    ),
    "academic": (
        "You are a literary poet with expertise in religious verse and scriptural themes. Write poetry "
        "that combines literary sophistication with theological depth, drawing on both the LDS hymn "
        "tradition and broader religious poetry."
    ),
}

POETRY_FORMAT_INSTRUCTION = (
    "CRITICAL: Write ONLY plain text poetry. NO URLs, NO links, NO citations, NO bracketed text, "
    "NO markdown formatting, NO asterisks or underscores."
)

LINE_COUNTS = {"casual": "8-16", "academic": "16-24"}


def is_classic_poem(poem_type: Optional[str]) -> bool:
    """Only an explicit "classic" selects hymn style; everything else is free verse."""
    return poem_type == CLASSIC_POEM_TYPE


def build_poem_request(
    verse_reference: str,
    verse_text: str,
    age_range: Optional[str] = None,
    gender: Optional[str] = None,
    stage_situation: Optional[str] = None,
    poem_type: Optional[str] = None,
    source: Optional[str] = None,
    content_mode: ContentMode = "casual",
) -> LLMRequest:
    """Build the Gemini request for one poem."""
    personalization = build_personalization_context(age_range, gender, stage_situation, content_mode)
    classic = is_classic_poem(poem_type)

    system_prompt = f"""{POET_ROLES[content_mode]}

{POETRY_FORMAT_INSTRUCTION}

{personalization}"""

    form = "HYMN-STYLE (Classic)" if classic else "FREE VERSE"
    focus = "literary sophistication and theological depth" if content_mode == "academic" else "LDS testimony"
    setting = "literary appreciation" if content_mode == "academic" else "a Church setting"
    source_line = f"(From: {source})" if source else ""

    user_prompt = f"""Generate 1 beautiful {form} poem inspired by {verse_reference}: "{verse_text}"
{source_line}

{STYLE_GUIDES[(content_mode, classic)]}

Requirements: {LINE_COUNTS[content_mode]} lines, clear stanzas with blank lines between them, poetic devices, {focus}, appropriate for {setting}.

Respond in this EXACT format:
{TITLE_MARKERS[0]}Your Poem Title{TITLE_MARKERS[1]}
{POEM_MARKERS[0]}
First line of poem
Second line of poem

Third line (new stanza)
Fourth line
{POEM_MARKERS[1]}
{IMAGE_MARKERS[0]}Visual description for artwork to accompany this poem{IMAGE_MARKERS[1]}"""

    return LLMRequest(
        system_prompt=system_prompt,
        user_prompt=user_prompt,
        max_tokens=token_budget("poem", content_mode),
    )
