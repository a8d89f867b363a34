"""
Tests for request/response schema behavior shared by all endpoints.
"""

import pytest
from pydantic import ValidationError

from scripture_backend.schemas.common import GenerationRequest
from scripture_backend.schemas.imagery import ImageryResponse, Symbol
from scripture_backend.schemas.interpretation import InterpretationRequest
from scripture_backend.schemas.story import generation_failed_placeholder, missing_fields_placeholder


class TestGenerationRequest:
    """Tests for the shared request fields."""

    def test_accepts_camel_case(self):
        request = GenerationRequest.model_validate({
            "verseReference": "John 3:16",
            "verseText": "For God so loved the world",
            "ageRange": "senior",
            "stageSituation": "Empty nester",
            "contentMode": "academic",
        })
        assert request.verse_reference == "John 3:16"
        assert request.age_range == "senior"
        assert request.stage_situation == "Empty nester"
        assert request.content_mode == "academic"

    def test_everything_optional(self):
        request = GenerationRequest.model_validate({})
        assert request.verse_reference is None
        assert request.content_mode == "casual"

    @pytest.mark.parametrize("mode", ["poetic", "", None, 42])
    def test_unknown_content_mode_is_casual(self, mode):
        assert GenerationRequest.model_validate({"contentMode": mode}).content_mode == "casual"

    def test_interpretation_language_defaults_to_english(self):
        assert InterpretationRequest.model_validate({}).language == "en"


class TestImageryResponse:
    """Tests for the four-symbol invariant."""

    def _symbol(self, index: int) -> dict:
        return {"title": f"S{index}", "sub": "meaning", "imagePrompt": "scene"}

    def test_icon_defaults(self):
        assert Symbol.model_validate(self._symbol(0)).icon == "auto_awesome"

    def test_extra_symbols_dropped(self):
        response = ImageryResponse.model_validate({"imagery": [self._symbol(i) for i in range(6)]})
        assert [symbol.title for symbol in response.imagery] == ["S0", "S1", "S2", "S3"]

    def test_fewer_than_four_rejected(self):
        with pytest.raises(ValidationError):
            ImageryResponse.model_validate({"imagery": [self._symbol(i) for i in range(3)]})

    def test_serializes_camel_case(self):
        response = ImageryResponse.model_validate({"imagery": [self._symbol(i) for i in range(4)]})
        assert "imagePrompt" in response.model_dump(by_alias=True)["imagery"][0]


class TestStoryPlaceholders:
    """The story placeholders are always renderable."""

    def test_missing_fields_placeholder(self):
        data = missing_fields_placeholder().model_dump(by_alias=True)
        assert data["error"] == "Missing required fields"
        assert all(data[key] for key in ("title", "text", "imagePrompt"))

    def test_generation_failed_placeholder(self):
        data = generation_failed_placeholder().model_dump(by_alias=True)
        assert data["title"] == "Story Unavailable"
        assert "error" not in data
