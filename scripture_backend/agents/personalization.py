"""
Personalization Prompt Templates

Builds the PERSONALIZATION INSTRUCTIONS block appended to every generation
system prompt. Pure functions, no I/O.

The block is assembled from, in order:
1. A base framing paragraph chosen by content mode (academic mode also gets
   the research-mode instruction block)
2. An age-bracket paragraph (teens / youth / adult / senior, unknown -> adult)
3. A gender clause, only for "female" or "male"
4. A life-situation paragraph, only when the situation has one
"""

from typing import Optional

from scripture_backend.agents.types import ContentMode

# =============================================================================
# AGE BRACKETS
# =============================================================================

DEFAULT_AGE_RANGE = "adult"

CASUAL_AGE_PROMPTS = {
    "teens": (
        "Write a reflection on this scripture that a Latter-day Saint teenager might share. "
        "Use contemporary but natural language and draw examples from school, friendships, "
        "social media, seminary, family home evening and youth activities. Touch on testimony, "
        "prayer, commandments and preparing for missions or the temple without forced slang. "
        "Keep sentences short and ideas relatable. No first-person voice and no direct address."
    ),
    "youth": (
        "Write a reflection on this scripture for a young single adult in the Church. "
        "Draw on mission preparation or returned-missionary life, dating, institute classes, "
        "finding a ward family away from home, and faith alongside school and career choices. "
        "Weave in temple worthiness, personal revelation and a growing testimony. "
        "No first-person voice and no direct address."
    ),
    "adult": (
        "Write a thoughtful reflection on this scripture in balanced, mature language for "
        "Latter-day Saint adults. Draw on temple covenants, callings, ward responsibilities, "
        "raising children in the gospel, ministering and keeping faith amid life's complexity. "
        "Use moderately sophisticated sentences with the occasional metaphor from family and "
        "Church life. No first-person voice and no direct address."
    ),
    "senior": (
        "Write a reflection on this scripture for seasoned Latter-day Saints. Draw on decades "
        "of Church service, temple worship, missionary work, children and grandchildren in the "
        "gospel, and the eternal perspective that comes with age. Speak of covenants kept, "
        "family sealings and the Plan of Salvation in slightly traditional but not dated phrasing. "
        "Acknowledge trials while testifying of God's faithfulness. No first-person voice and "
        "no direct address."
    ),
}

ACADEMIC_AGE_PROMPTS = {
    "teens": (
        "Write scholarly analysis a younger Latter-day Saint student can follow. Explain "
        "original-language insights simply, give historical context with dates and figures, "
        "and introduce textual analysis and archaeological discussion in an engaging way. "
        "Mention LDS scholars such as Nibley or Welch when relevant."
    ),
    "youth": (
        "Write analysis suited to an institute-level Latter-day Saint student. Include "
        "Hebrew and Greek linguistic notes, historical-critical scholarship, chiastic "
        "structures, D&C historical documents and JST comparisons. Draw on BYU Religious "
        "Education and Interpreter scholarship while staying engaging."
    ),
    "adult": (
        "Write thorough scholarly analysis for an educated Latter-day Saint reader. Include "
        "detailed linguistic analysis, manuscript traditions, textual criticism and "
        "archaeological evidence. Engage LDS scholarship (Nibley, Welch, Tvedtnes, Sorenson) "
        "and peer-reviewed religious studies, with JST variants and early Church documents "
        "where relevant."
    ),
    "senior": (
        "Write comprehensive scholarly analysis for a well-read Latter-day Saint with decades "
        "of gospel study. Include deep linguistic analysis, extensive historical documentation "
        "and thorough cross-referencing across the full range of LDS scholarship, with JST "
        "analysis and temple symbolism. Keep reverence alongside academic rigor."
    ),
}

# =============================================================================
# LIFE SITUATIONS
# =============================================================================

NO_SITUATION = "Nothing special"

SITUATION_PROMPTS = {
    # Missions
    "Preparing for a mission": (
        "Reflect the anticipation and spiritual preparation of a missionary-to-be: the mission "
        "call, temple preparation, studying Preach My Gospel, leaving family, and the mix of "
        "excitement and nerves. Include consecration, sacrifice and trusting the Lord's timing."
    ),
    "Currently serving a mission": (
        "Speak to full-time missionaries: teaching and finding, homesickness, hard companionships, "
        "rejection, small miracles and personal growth in consecrated service."
    ),
    "Recently returned missionary": (
        "Address the return home from a mission: readjusting, keeping spiritual momentum, dating, "
        "school and career decisions, and applying mission lessons to ordinary life."
    ),
    # Temple and marriage
    "Preparing for temple marriage": (
        "Include temple preparation, eternal covenants and the significance of sealing, balancing "
        "wedding logistics with an eternal perspective."
    ),
    "Newly sealed in the temple": (
        "Include new covenant responsibilities, building an eternal family, establishing family "
        "patterns and the sacred nature of the sealing ordinance."
    ),
    "Temple sealing anniversary": (
        "Include covenant renewal, gratitude for years together and the perspective that comes "
        "from keeping temple covenants side by side."
    ),
    # Family stages
    "Having a baby": (
        "Include welcoming a spirit child into an eternal family, baby blessings, raising children "
        "in the gospel, and love mixed with exhaustion, framed by the Plan of Salvation."
    ),
    "Raising young children": (
        "Include family home evening, family scripture study, Primary, teaching children to pray, "
        "and finding moments of connection in a busy home."
    ),
    "Raising teenagers": (
        "Include youth programs, seminary, mission preparation, dating standards, watching agency "
        "unfold, and knowing when to guide and when to trust them to the Lord."
    ),
    "Empty nester": (
        "Include the bittersweetness of children leaving for missions, school or marriage, "
        "continued temple worship, senior missionary opportunities and grandparenting."
    ),
    # Callings
    "New calling": (
        "Acknowledge the weight of a new calling and feelings of inadequacy, trusting that the "
        "Lord qualifies those He calls. Mention sustaining, being set apart and growth through service."
    ),
    "Demanding calling": (
        "Include balancing Church service with family and work, the sacrifice and blessings of "
        "leadership callings, and strength found in the Savior when overwhelmed."
    ),
    "Released from calling": (
        "Include transition, identity beyond a calling, gratitude for service and trust in the "
        "Lord's purposes in release and reassignment."
    ),
    # Challenges
    "Faith crisis": (
        "Gently include doubt, questions and the courage to stay engaged while continuing to "
        "study, pray and attend. Avoid judgment; questions are part of the journey."
    ),
    "Inactive family member": (
        "Include loving without pressure, praying for a family member's return, keeping hope and "
        "trusting the Lord's timeline, while acknowledging the heartache."
    ),
    "New convert": (
        "Include the excitement and challenges of being new to the Church: learning the culture, "
        "making friends in the ward, family opposition and the joy of a new testimony."
    ),
    "Grieving a loss": (
        "Gently include the Plan of Salvation, temple sealings and the hope of reunion, "
        "acknowledging the pain while keeping an eternal perspective."
    ),
    "Getting a divorce": (
        "Acknowledge broken expectations while keeping hope. Include healing through the Atonement, "
        "Church life as a single person, and finding identity and purpose."
    ),
    "Going through health challenges": (
        "Include priesthood blessings, relying on the Savior, ward support and faith amid "
        "uncertainty, and the Atonement's power to succor and heal."
    ),
    "Struggling financially": (
        "Include tithing, fast offerings and trusting the Lord with temporal needs, the dignity of "
        "work, and worth that does not depend on material stability."
    ),
    "Feeling lonely or isolated": (
        "Include finding belonging in the ward family, ministering relationships, the Savior's "
        "perfect understanding of loneliness, and both giving and receiving fellowship."
    ),
    NO_SITUATION: "",
}

# =============================================================================
# BASE FRAMING
# =============================================================================

CASUAL_BASE_CONTEXT = (
    "This reflection is for a member of The Church of Jesus Christ of Latter-day Saints. "
    "Use LDS terminology naturally (testimony, covenant, priesthood, Relief Society, temple, "
    "calling) without over-explaining; assume familiarity with Church culture and doctrine."
)

ACADEMIC_BASE_CONTEXT = (
    "This analysis is for a Latter-day Saint seeking scholarly, research-based content. "
    "Assume familiarity with Church doctrine, history and culture, and provide academic depth "
    "with linguistic analysis."
)

ACADEMIC_MODE_INSTRUCTIONS = """ACADEMIC/RESEARCH MODE INSTRUCTIONS:
Write as a religious studies scholar with expertise in Latter-day Saint scripture. Cover:

1. LINGUISTIC ANALYSIS: Hebrew (Old Testament) and Greek (New Testament) word studies with transliteration; Hebraisms, chiasmus and wordplay in the Book of Mormon; revelatory language patterns in the D&C.
2. HISTORICAL-CRITICAL CONTEXT: specific dates, places and figures; archaeological evidence and scholarly debate; manuscript traditions and JST comparisons.
3. SCHOLARSHIP: engage LDS scholars (Nibley, Welch, Tvedtnes, Sorenson, Skousen, Gardner) and venues such as BYU Studies and the Journal of Book of Mormon Studies by name in the prose.
4. INTERTEXTUAL CONNECTIONS: cross-references across the standard works, ancient Near Eastern texts, temple and covenant patterns.
5. TONE: scholarly but accessible, faithful while engaging critically, acknowledging differing interpretations."""

GENDER_PROMPTS = {
    "female": (
        "The reader is a woman. You may naturally reference Relief Society, Young Women "
        "experiences or motherhood where relevant."
    ),
    "male": (
        "The reader is a man. You may naturally reference priesthood responsibilities, "
        "Elders Quorum or fatherhood where relevant."
    ),
}


def get_age_prompt(age_range: str, content_mode: ContentMode = "casual") -> str:
    """Age-bracket paragraph; unknown brackets fall back to adult."""
    prompts = ACADEMIC_AGE_PROMPTS if content_mode == "academic" else CASUAL_AGE_PROMPTS
    return prompts.get(age_range, prompts[DEFAULT_AGE_RANGE])


def get_situation_prompt(situation: str) -> str:
    """Life-situation paragraph, or "" when the situation has none."""
    return SITUATION_PROMPTS.get(situation, "")


def build_personalization_context(
    age_range: Optional[str],
    gender: Optional[str],
    stage_situation: Optional[str],
    content_mode: ContentMode = "casual",
) -> str:
    """
    Build the personalization block for a system prompt.

    Args:
        age_range: "teens", "youth", "adult" or "senior" (anything else behaves as adult)
        gender: "female" or "male" add a clause; any other value adds nothing
        stage_situation: Key into SITUATION_PROMPTS ("Nothing special" adds nothing)
        content_mode: "casual" or "academic"

    Returns:
        str: "\\n\\nPERSONALIZATION INSTRUCTIONS:\\n..." or "" when nothing applies.
             Callers treat "" as "no personalization", never as an error.
    """
    parts = []

    if content_mode == "academic":
        parts.append(ACADEMIC_BASE_CONTEXT)
        parts.append(ACADEMIC_MODE_INSTRUCTIONS)
    else:
        parts.append(CASUAL_BASE_CONTEXT)

    if age_range:
        parts.append(get_age_prompt(age_range, content_mode))

    gender_prompt = GENDER_PROMPTS.get(gender or "")
    if gender_prompt:
        parts.append(gender_prompt)

    if stage_situation and stage_situation != NO_SITUATION:
        situation_prompt = get_situation_prompt(stage_situation)
        if situation_prompt:
            parts.append(situation_prompt)

    if not parts:
        return ""
    return "\n\nPERSONALIZATION INSTRUCTIONS:\n" + "\n\n".join(parts)
