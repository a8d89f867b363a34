"""
Tests for the /api/generate-* generation endpoints.

Tests cover:
- Happy path: camelCase JSON responses
- Failure path: generic {"error": ...} 500 without internal detail
- Story: 400 placeholder for missing fields, 200 placeholder for failures
- Validation: malformed bodies → 422, unknown contentMode → casual
"""

import json
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from scripture_backend.agents.poem.prompts import POET_ROLES
from scripture_backend.exceptions import ProviderError
from scripture_backend.main import app

VERSE_BODY = {
    "verseReference": "Alma 32:21",
    "verseText": "Faith is not to have a perfect knowledge of things",
    "ageRange": "youth",
    "gender": "female",
    "stageSituation": "New calling",
}


@pytest.fixture
def client():
    """Create test client for FastAPI app."""
    return TestClient(app)


def _patch_generate(service: str, **kwargs):
    return patch(f"scripture_backend.services.{service}.generate_text", new=AsyncMock(**kwargs))


class TestContextEndpoint:
    """Tests for POST /api/generate-context."""

    def test_success(self, client):
        reply = json.dumps({
            "context": {
                "whoIsSpeaking": "Alma",
                "originalListeners": "The Zoramite poor",
                "whyTheConversation": "They asked how to worship",
                "historicalBackdrop": "About 74 BC",
                "immediateImpact": "Many believed",
                "longTermImpact": "Enduring metaphor",
                "setting": "Antionum",
            },
            "contextImagePrompt": "A hillside sermon",
        })
        with _patch_generate("context_service", return_value=reply):
            response = client.post("/api/generate-context", json=VERSE_BODY)

        assert response.status_code == 200
        data = response.json()
        assert data["context"]["whoIsSpeaking"] == "Alma"
        assert data["context"]["historicalBackdrop"] == "About 74 BC"
        assert data["contextImagePrompt"] == "A hillside sermon"

    def test_unparseable_reply_is_500(self, client):
        with _patch_generate("context_service", return_value="Sorry, no JSON today"):
            response = client.post("/api/generate-context", json=VERSE_BODY)

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to generate context"}

    def test_provider_error_is_500_without_detail(self, client):
        with _patch_generate("context_service", side_effect=ProviderError("API key invalid: sk-secret")):
            response = client.post("/api/generate-context", json=VERSE_BODY)

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to generate context"}
        assert "secret" not in response.text


class TestImageryEndpoint:
    """Tests for POST /api/generate-imagery."""

    def test_success(self, client):
        symbols = [
            {"title": f"Symbol {i}", "sub": "Meaning", "icon": "spa", "imagePrompt": "Scene"}
            for i in range(4)
        ]
        with _patch_generate("imagery_service", return_value=json.dumps({"imagery": symbols})):
            response = client.post("/api/generate-imagery", json=VERSE_BODY)

        assert response.status_code == 200
        imagery = response.json()["imagery"]
        assert len(imagery) == 4
        assert imagery[0] == {"title": "Symbol 0", "sub": "Meaning", "icon": "spa", "imagePrompt": "Scene"}

    def test_failure(self, client):
        with _patch_generate("imagery_service", side_effect=ProviderError("timeout")):
            response = client.post("/api/generate-imagery", json=VERSE_BODY)

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to generate imagery"}


class TestInterpretationEndpoint:
    """Tests for POST /api/generate-interpretation."""

    def test_success(self, client):
        reply = "INTERPRETATION===La fe es una semilla.===INTERPRETATION\nIMAGE_PROMPT===Una semilla===IMAGE_PROMPT"
        with _patch_generate("interpretation_service", return_value=reply):
            response = client.post("/api/generate-interpretation", json={**VERSE_BODY, "language": "es"})

        assert response.status_code == 200
        assert response.json() == {
            "interpretation": "La fe es una semilla.",
            "heroImagePrompt": "Una semilla",
        }

    def test_failure(self, client):
        with _patch_generate("interpretation_service", side_effect=ProviderError("quota")):
            response = client.post("/api/generate-interpretation", json=VERSE_BODY)

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to generate interpretation"}


class TestPoemEndpoint:
    """Tests for POST /api/generate-poem."""

    def test_academic_classic_poem(self, client):
        reply = (
            "TITLE===Seeds of Light===TITLE\n"
            "POEM===\nA seed of **faith** within my breast,\nIt swells and grows [1].\n===POEM\n"
            "IMAGE===A seedling at dawn===IMAGE"
        )
        mock_generate = AsyncMock(return_value=reply)
        with patch("scripture_backend.services.poem_service.generate_text", new=mock_generate):
            response = client.post(
                "/api/generate-poem",
                json={**VERSE_BODY, "poemType": "classic", "contentMode": "academic"},
            )

        assert response.status_code == 200
        poem = response.json()["poem"]
        assert poem["title"] == "Seeds of Light"
        assert poem["type"] == "Hymn Style"
        assert poem["text"] == "A seed of faith within my breast,\nIt swells and grows."
        assert poem["imagePrompt"] == "A seedling at dawn"
        assert mock_generate.call_args.args[0].max_tokens == 1500
        assert POET_ROLES["academic"] in mock_generate.call_args.args[0].system_prompt

    def test_unknown_content_mode_is_casual(self, client):
        mock_generate = AsyncMock(return_value="POEM===Line===POEM")
        with patch("scripture_backend.services.poem_service.generate_text", new=mock_generate):
            response = client.post("/api/generate-poem", json={**VERSE_BODY, "contentMode": "poetic"})

        assert response.status_code == 200
        assert mock_generate.call_args.args[0].max_tokens == 1000

    def test_failure(self, client):
        with _patch_generate("poem_service", side_effect=ProviderError("quota")):
            response = client.post("/api/generate-poem", json=VERSE_BODY)

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to generate poem"}


class TestStoryEndpoint:
    """Tests for POST /api/generate-story."""

    def test_success(self, client):
        reply = "TITLE===The Garden===TITLE\nSTORY===Maria planted a seed.===STORY\nIMAGE===A garden===IMAGE"
        with _patch_generate("story_service", return_value=reply):
            response = client.post("/api/generate-story", json={**VERSE_BODY, "storyType": "contemporary"})

        assert response.status_code == 200
        assert response.json() == {
            "title": "The Garden",
            "text": "Maria planted a seed.",
            "imagePrompt": "A garden",
        }

    def test_missing_story_type_is_400_placeholder(self, client):
        mock_generate = AsyncMock()
        with patch("scripture_backend.services.story_service.generate_text", new=mock_generate):
            response = client.post("/api/generate-story", json=VERSE_BODY)

        assert response.status_code == 400
        assert response.json() == {
            "error": "Missing required fields",
            "title": "Story Unavailable",
            "text": "Unable to generate story due to missing information.",
            "imagePrompt": "A peaceful scene",
        }
        mock_generate.assert_not_called()

    def test_empty_body_is_400_placeholder(self, client):
        response = client.post("/api/generate-story", json={})

        assert response.status_code == 400
        data = response.json()
        assert data["title"] == "Story Unavailable"
        assert data["text"] == "Unable to generate story due to missing information."
        assert data["imagePrompt"] == "A peaceful scene"

    def test_generation_failure_is_200_placeholder(self, client):
        with _patch_generate("story_service", side_effect=ProviderError("quota")):
            response = client.post("/api/generate-story", json={**VERSE_BODY, "storyType": "historical"})

        assert response.status_code == 200
        assert response.json() == {
            "title": "Story Unavailable",
            "text": "We encountered an issue generating this story. Please try again later.",
            "imagePrompt": "A peaceful, contemplative scene",
        }


class TestRequestValidation:
    """Malformed bodies never reach the services."""

    def test_non_object_body_is_422(self, client):
        response = client.post("/api/generate-context", json=["not", "an", "object"])

        assert response.status_code == 422
        assert response.json()["error"] == "validation_error"

    def test_wrong_field_type_is_422(self, client):
        response = client.post("/api/generate-poem", json={**VERSE_BODY, "verseText": {"nested": True}})

        assert response.status_code == 422
