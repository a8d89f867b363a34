"""
Tests for scripture classification.
"""

import pytest

from scripture_backend.agents.scripture import classify_scripture
from scripture_backend.agents.types import ScriptureCategory


class TestClassifyScripture:
    """Tests for classify_scripture."""

    @pytest.mark.parametrize("reference", [
        "1 Nephi 3:7",
        "Alma 32:21",
        "Mosiah 2:17",
        "Helaman 5:12",
        "Mormon 9:21",
        "Ether 12:27",
        "Moroni 10:4-5",
        "alma 7:11",
    ])
    def test_book_of_mormon_references(self, reference):
        assert classify_scripture(reference) == ScriptureCategory.BOOK_OF_MORMON

    @pytest.mark.parametrize("reference", ["D&C 4:2", "d&c 121:7-8", "Doctrine and Covenants 58:27"])
    def test_doctrine_and_covenants_references(self, reference):
        assert classify_scripture(reference) == ScriptureCategory.DOCTRINE_AND_COVENANTS

    @pytest.mark.parametrize("reference", ["Moses 1:39", "Abraham 3:22", "JS-H 1:17", "JS-M 1:37", "Articles of Faith 1:13"])
    def test_pearl_of_great_price_references(self, reference):
        assert classify_scripture(reference) == ScriptureCategory.PEARL_OF_GREAT_PRICE

    @pytest.mark.parametrize("reference", ["John 3:16", "James 1:5", "Isaiah 53:5", "Psalm 23:1"])
    def test_bible_references(self, reference):
        assert classify_scripture(reference) == ScriptureCategory.BIBLE

    def test_empty_reference_is_bible(self):
        assert classify_scripture("") == ScriptureCategory.BIBLE
        assert classify_scripture(None) == ScriptureCategory.BIBLE

    def test_source_hint_alone(self):
        """A source label classifies even an unrecognizable reference."""
        assert classify_scripture("3:16", source="Book of Mormon") == ScriptureCategory.BOOK_OF_MORMON
        assert classify_scripture("4:2", source="Doctrine and Covenants") == ScriptureCategory.DOCTRINE_AND_COVENANTS
        assert classify_scripture("1:39", source="Pearl of Great Price") == ScriptureCategory.PEARL_OF_GREAT_PRICE

    def test_earlier_category_wins_over_later_source(self):
        """Categories are checked in order; either the source or the reference can match."""
        assert classify_scripture("Alma 32:21", source="Doctrine and Covenants") == ScriptureCategory.BOOK_OF_MORMON
        assert classify_scripture("Moses 1:39", source="Doctrine and Covenants") == ScriptureCategory.DOCTRINE_AND_COVENANTS

    def test_unrelated_source_falls_back_to_reference(self):
        assert classify_scripture("Alma 32:21", source="Bible (KJV)") == ScriptureCategory.BOOK_OF_MORMON

    def test_book_of_mormon_has_priority_within_reference(self):
        """A reference matching several patterns goes to the first in priority order."""
        assert classify_scripture("Moroni and Moses") == ScriptureCategory.BOOK_OF_MORMON
