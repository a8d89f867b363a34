"""
Scripture source classification.

Buckets a free-text verse reference into one of the four standard works.
Categories are checked in a fixed priority order: Book of Mormon, Doctrine and
Covenants, Pearl of Great Price. A category matches when either the ``source``
label or the reference names it. Anything unmatched is treated as Bible.
"""

import re
from typing import List, Optional, Pattern, Tuple

from scripture_backend.agents.types import ScriptureCategory

# (category, substring expected in `source`, pattern over the reference), in priority order
_CATEGORY_RULES: List[Tuple[ScriptureCategory, str, Pattern[str]]] = [
    (
        ScriptureCategory.BOOK_OF_MORMON,
        "Book of Mormon",
        re.compile(r"nephi|alma|mosiah|helaman|mormon|ether|moroni", re.IGNORECASE),
    ),
    (
        ScriptureCategory.DOCTRINE_AND_COVENANTS,
        "Doctrine",
        re.compile(r"D&C|Doctrine", re.IGNORECASE),
    ),
    (
        ScriptureCategory.PEARL_OF_GREAT_PRICE,
        "Pearl",
        re.compile(r"Moses|Abraham|JS-H|JS-M|Articles of Faith", re.IGNORECASE),
    ),
]


def classify_scripture(reference: Optional[str], source: Optional[str] = None) -> ScriptureCategory:
    """
    Classify a verse reference into a standard work.

    Args:
        reference: Verse reference as typed by the user (e.g. "Alma 32:21")
        source: Optional source label sent by the client (e.g. "Book of Mormon")

    Returns:
        Exactly one ScriptureCategory; BIBLE when nothing else matches.

    Examples:
        >>> classify_scripture("Alma 32:21")
        <ScriptureCategory.BOOK_OF_MORMON: 'Book of Mormon'>
        >>> classify_scripture("John 3:16")
        <ScriptureCategory.BIBLE: 'Bible (KJV)'>
    """
    reference = reference or ""
    source = source or ""

    for category, source_hint, pattern in _CATEGORY_RULES:
        if source_hint in source or pattern.search(reference):
            return category

    return ScriptureCategory.BIBLE
