"""
Pytest configuration for Scripture Insights backend tests.

Sets up test environment and global fixtures. No test talks to Gemini:
services are exercised by patching `generate_text` in the module under test.
"""
import os

# Disable config validation during tests
# This allows tests to run without requiring real environment variables
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("GOOGLE_API_KEY", "test-google-api-key")

import pytest  # noqa: E402


@pytest.fixture
def verse_json():
    """Well-formed verse reply as Gemini returns it (fenced)."""
    return (
        "```json\n"
        '{"reference": "Alma 32:21", "version": "LDS", '
        '"text": "And now as I said concerning faith—faith is not to have a perfect knowledge of things", '
        '"source": "Book of Mormon"}\n'
        "```"
    )


@pytest.fixture
def come_follow_me_json():
    """Well-formed Come, Follow Me verse reply."""
    return (
        '{"reference": "D&C 121:7", "version": "LDS", '
        '"text": "My son, peace be unto thy soul; thine adversity and thine afflictions shall be but a small moment;", '
        '"source": "Doctrine and Covenants"}'
    )
