"""
Tests for the per-endpoint prompt builders.

Covers:
- Output token budgets per endpoint and content mode
- Template branch selection (scripture category, mode, poem/story type)
- Personalization embedded in every system prompt
- Interpretation language requirement
- Verse prompts
"""

from datetime import date

import pytest

from scripture_backend.agents.context import CONTEXT_FIELDS, build_context_request
from scripture_backend.agents.context.prompts import SCRIPTURE_GUIDANCE as CONTEXT_GUIDANCE
from scripture_backend.agents.imagery import build_imagery_request
from scripture_backend.agents.imagery.prompts import SCRIPTURE_GUIDANCE as IMAGERY_GUIDANCE
from scripture_backend.agents.imagery.prompts import SYMBOL_ICONS
from scripture_backend.agents.interpretation import build_interpretation_request, resolve_language_name
from scripture_backend.agents.personalization import CASUAL_AGE_PROMPTS, SITUATION_PROMPTS
from scripture_backend.agents.poem import build_poem_request
from scripture_backend.agents.poem.prompts import STYLE_GUIDES
from scripture_backend.agents.story import build_story_request
from scripture_backend.agents.story.prompts import STORY_PROMPTS, get_story_prompt
from scripture_backend.agents.types import ScriptureCategory
from scripture_backend.agents.verse import (
    build_bible_prompt,
    build_book_of_mormon_prompt,
    build_come_follow_me_prompt,
    build_doctrine_and_covenants_prompt,
    build_verse_query_prompt,
    build_verse_request,
)
from scripture_backend.utils.constants import TOKEN_BUDGETS, token_budget

VERSE = ("Alma 32:21", "Faith is not to have a perfect knowledge of things")


# =============================================================================
# TOKEN BUDGETS
# =============================================================================

class TestTokenBudgets:
    """Tests for the per-endpoint output token budgets."""

    @pytest.mark.parametrize("endpoint", list(TOKEN_BUDGETS))
    def test_academic_gets_more_room(self, endpoint):
        assert token_budget(endpoint, "academic") > token_budget(endpoint, "casual")

    def test_unknown_mode_uses_casual_budget(self):
        assert token_budget("poem", "whimsical") == 1000

    @pytest.mark.parametrize("builder,endpoint", [
        (build_context_request, "context"),
        (build_imagery_request, "imagery"),
        (build_interpretation_request, "interpretation"),
        (build_poem_request, "poem"),
    ])
    def test_builders_use_endpoint_budget(self, builder, endpoint):
        casual = builder(*VERSE)
        academic = builder(*VERSE, content_mode="academic")
        assert casual.max_tokens == TOKEN_BUDGETS[endpoint]["casual"]
        assert academic.max_tokens == TOKEN_BUDGETS[endpoint]["academic"]

    def test_story_budget(self):
        assert build_story_request(*VERSE, story_type="historical").max_tokens == 4000
        assert build_story_request(*VERSE, story_type="historical", content_mode="academic").max_tokens == 6000

    def test_academic_poem_budget(self):
        assert build_poem_request(*VERSE, content_mode="academic").max_tokens == 1500


# =============================================================================
# CONTEXT AND IMAGERY
# =============================================================================

class TestContextRequest:
    """Tests for build_context_request."""

    @pytest.mark.parametrize("reference,category", [
        ("Alma 32:21", ScriptureCategory.BOOK_OF_MORMON),
        ("D&C 4:2", ScriptureCategory.DOCTRINE_AND_COVENANTS),
        ("Moses 1:39", ScriptureCategory.PEARL_OF_GREAT_PRICE),
        ("John 3:16", ScriptureCategory.BIBLE),
    ])
    @pytest.mark.parametrize("mode", ["casual", "academic"])
    def test_guidance_follows_category_and_mode(self, reference, category, mode):
        request = build_context_request(reference, "text", content_mode=mode)
        assert CONTEXT_GUIDANCE[(category, mode)] in request.system_prompt

    def test_asks_for_every_context_field(self):
        request = build_context_request(*VERSE)
        for field in CONTEXT_FIELDS:
            assert f'"{field}"' in request.user_prompt
        assert '"contextImagePrompt"' in request.user_prompt

    def test_personalization_in_system_prompt(self):
        request = build_context_request(*VERSE, age_range="teens", stage_situation="New calling")
        assert "PERSONALIZATION INSTRUCTIONS:" in request.system_prompt
        assert CASUAL_AGE_PROMPTS["teens"] in request.system_prompt
        assert SITUATION_PROMPTS["New calling"] in request.system_prompt

    def test_source_line(self):
        request = build_context_request(*VERSE, source="Book of Mormon")
        assert "(Source: Book of Mormon)" in request.user_prompt


class TestImageryRequest:
    """Tests for build_imagery_request."""

    def test_book_of_mormon_guidance(self):
        request = build_imagery_request(*VERSE)
        assert IMAGERY_GUIDANCE[(ScriptureCategory.BOOK_OF_MORMON, "casual")] in request.system_prompt

    def test_lists_four_icons(self):
        request = build_imagery_request(*VERSE)
        for icon in SYMBOL_ICONS:
            assert f'"icon": "{icon}"' in request.user_prompt

    def test_academic_approach(self):
        request = build_imagery_request("John 1:5", "And the light shineth in darkness", content_mode="academic")
        assert "linguistic origins" in request.user_prompt


# =============================================================================
# INTERPRETATION
# =============================================================================

class TestInterpretationRequest:
    """Tests for build_interpretation_request."""

    def test_english_has_no_language_requirement(self):
        request = build_interpretation_request(*VERSE)
        assert "LANGUAGE REQUIREMENT" not in request.system_prompt
        assert "REMINDER" not in request.user_prompt

    def test_spanish_requirement_in_both_prompts(self):
        request = build_interpretation_request(*VERSE, language="es")
        assert "CRITICAL LANGUAGE REQUIREMENT" in request.system_prompt
        assert "Spanish" in request.system_prompt
        assert f"REMINDER: Write your interpretation in {resolve_language_name('es')}, NOT English." in request.user_prompt
        assert "Spanish" in request.user_prompt

    def test_unknown_language_behaves_as_english(self):
        request = build_interpretation_request(*VERSE, language="xx")
        assert "LANGUAGE REQUIREMENT" not in request.system_prompt
        assert resolve_language_name("xx") == "English"

    def test_markers_in_user_prompt(self):
        request = build_interpretation_request(*VERSE)
        for marker in ("INTERPRETATION===", "===INTERPRETATION", "IMAGE_PROMPT===", "===IMAGE_PROMPT"):
            assert marker in request.user_prompt

    def test_academic_word_limit(self):
        request = build_interpretation_request(*VERSE, content_mode="academic")
        assert "300-400 words" in request.user_prompt


# =============================================================================
# POEM AND STORY
# =============================================================================

class TestPoemRequest:
    """Tests for build_poem_request."""

    def test_classic_selects_hymn_style(self):
        request = build_poem_request(*VERSE, poem_type="classic")
        assert STYLE_GUIDES[("casual", True)] in request.user_prompt
        assert "HYMN-STYLE (Classic)" in request.user_prompt

    @pytest.mark.parametrize("poem_type", [None, "free", "haiku"])
    def test_anything_else_is_free_verse(self, poem_type):
        request = build_poem_request(*VERSE, poem_type=poem_type)
        assert STYLE_GUIDES[("casual", False)] in request.user_prompt

    def test_academic_line_count(self):
        request = build_poem_request(*VERSE, poem_type="classic", content_mode="academic")
        assert STYLE_GUIDES[("academic", True)] in request.user_prompt
        assert "16-24 lines" in request.user_prompt


class TestStoryRequest:
    """Tests for build_story_request and get_story_prompt."""

    def test_story_type_selects_prompt(self):
        request = build_story_request(*VERSE, story_type="historical")
        assert STORY_PROMPTS["casual"]["historical"] in request.user_prompt

    def test_academic_story_prompt(self):
        assert get_story_prompt("academic", "contemporary") == STORY_PROMPTS["academic"]["contemporary"]

    def test_unknown_type_falls_back_to_contemporary(self):
        assert get_story_prompt("casual", "sci-fi") == STORY_PROMPTS["casual"]["contemporary"]
        assert get_story_prompt("academic", "sci-fi") == STORY_PROMPTS["casual"]["contemporary"]

    def test_markers_in_user_prompt(self):
        request = build_story_request(*VERSE, story_type="contemporary")
        for marker in ("TITLE===", "===TITLE", "STORY===", "===STORY", "IMAGE===", "===IMAGE"):
            assert marker in request.user_prompt


# =============================================================================
# VERSE
# =============================================================================

class TestVersePrompts:
    """Tests for the verse prompts."""

    def test_come_follow_me_includes_date(self):
        prompt = build_come_follow_me_prompt(date(2026, 10, 19))
        assert "Today is October 19, 2026." in prompt

    def test_source_labels(self):
        assert '"Book of Mormon"' in build_book_of_mormon_prompt()
        assert '"Doctrine and Covenants"' in build_doctrine_and_covenants_prompt()
        assert '"KJV"' in build_bible_prompt()

    def test_query_prompt_contains_query(self):
        assert "Moroni 10:4" in build_verse_query_prompt("Moroni 10:4")

    def test_verse_request(self):
        request = build_verse_request("prompt")
        assert request.system_prompt == ""
        assert request.user_prompt == "prompt"
        assert request.max_tokens == 500
