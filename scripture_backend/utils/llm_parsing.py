"""
Parsing and cleanup of free-form Gemini output.

Gemini replies are not guaranteed to respect the requested format, so every
endpoint goes through one of two strategies:

- JSON strategy (context, imagery, verse): strip code fences and parse the
  remaining text as JSON. Failures raise ParseError; the caller decides
  whether that is fatal (context, imagery, direct verse query) or triggers a
  fallback (verse-of-the-day fetchers).
- Delimiter strategy (interpretation, poem, story): each field is wrapped in
  sentinel markers such as ``TITLE===...===TITLE``. Extraction first tries the
  full begin/end pair and then a looser pattern that stops at the next marker
  or end of text, which tolerates a missing closing sentinel.

Every prose value then goes through clean_text / clean_object, which strip
markdown, bracketed citations and URLs. The prompts already forbid these; the
cleanup here is the backstop.
"""

import json
import logging
import re
from typing import Any, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from scripture_backend.exceptions import ParseError

logger = logging.getLogger(__name__)


# =============================================================================
# JSON STRATEGY
# =============================================================================

_CODE_FENCE = re.compile(r"```(?:json)?", re.IGNORECASE)
_TRAILING_COMMA = re.compile(r",(\s*[}\]])")


def strip_code_fences(text: str) -> str:
    """Remove ```json / ``` markers wherever they appear."""
    return _CODE_FENCE.sub("", text or "").strip()


def _loads(json_content: str) -> Any:
    """Try the text as-is, then with trailing commas repaired, then cut after the last brace."""
    # strict=False accepts literal newlines/tabs inside strings (poems, verses)
    try:
        return json.loads(json_content, strict=False)
    except json.JSONDecodeError as e:
        first_error = e

    # Remove trailing commas before } or ] (common LLM mistake)
    repaired = _TRAILING_COMMA.sub(r"\1", json_content)
    candidates = [repaired]

    # Drop trailing chatter after the outermost closing brace
    end = max(repaired.rfind("}"), repaired.rfind("]"))
    if end > 0:
        candidates.append(repaired[:end + 1])

    for candidate in candidates:
        try:
            return json.loads(candidate, strict=False)
        except json.JSONDecodeError:
            continue

    raise first_error


def parse_structured(text: str) -> Any:
    """
    Parse a JSON value out of model output.

    Handles the usual LLM quirks: markdown code fences, a sentence of prose
    before the JSON, trailing commas and raw newlines inside string values.
    Well-formed JSON is returned exactly as written; repairs only apply when
    it fails to parse.

    Raises:
        ParseError: If no JSON value can be recovered.
    """
    json_content = strip_code_fences(text)
    if not json_content:
        raise ParseError("Empty model output", raw_text=text or "")

    # Skip any prose before the JSON. A "[" inside the prose can mislead the
    # earliest start, so the first "{" and the first "[" are both tried.
    starts = sorted({i for i in (json_content.find("{"), json_content.find("[")) if i >= 0}) or [0]

    first_error = None
    for start in starts:
        try:
            return _loads(json_content[start:])
        except json.JSONDecodeError as e:
            first_error = first_error or e

    logger.error(f"Failed to parse JSON response: {first_error}")
    logger.debug(f"Raw content preview: {(text or '')[:300]}")
    raise ParseError(f"Invalid JSON in model output: {first_error}", raw_text=text or "")


ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_into(text: str, model: Type[ModelT], clean: bool = True) -> ModelT:
    """
    Parse model output as JSON and validate it against a response model.

    Args:
        text: Raw model output
        model: Pydantic model the JSON must satisfy
        clean: Run clean_object over every string before validation

    Raises:
        ParseError: If the text is not JSON or does not match the model.
            Partial objects are never returned.
    """
    data = parse_structured(text)
    if clean:
        data = clean_object(data)

    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.error(f"Model output does not match {model.__name__}: {e.error_count()} validation errors")
        raise ParseError(f"Model output does not match {model.__name__}", raw_text=text) from e


# =============================================================================
# DELIMITER STRATEGY
# =============================================================================

# Any sentinel: "WORD===" or a bare "===" (closing marker of some field)
_NEXT_MARKER = r"(?=\b[A-Z_]+===|===|\Z)"


def extract_field(text: str, begin_marker: str, end_marker: str) -> Optional[str]:
    """
    Extract the value between two sentinel markers.

    Tries ``begin ... end`` first. If the model forgot the closing marker,
    falls back to ``begin ... next-marker-or-end-of-text``.

    Returns:
        The stripped field value, or None when the field is absent or blank.
    """
    if not text:
        return None

    begin = re.escape(begin_marker)
    primary = re.search(begin + r"(.*?)" + re.escape(end_marker), text, re.DOTALL)
    if primary:
        return primary.group(1).strip() or None

    fallback = re.search(begin + r"(.*?)" + _NEXT_MARKER, text, re.DOTALL)
    if fallback and fallback.group(1).strip():
        logger.info(f"Closing marker '{end_marker}' missing, used loose extraction")
        return fallback.group(1).strip()

    return None


def remove_field(text: str, begin_marker: str, end_marker: str) -> str:
    """Remove a whole ``begin ... end`` block from the text, if present."""
    pattern = re.escape(begin_marker) + r".+?" + re.escape(end_marker)
    return re.sub(pattern, "", text or "", flags=re.DOTALL).strip()


def strip_markers(text: str, *markers: str) -> str:
    """Drop stray sentinel markers, keeping the text around them."""
    for marker in markers:
        text = (text or "").replace(marker, "")
    return (text or "").strip()


# =============================================================================
# SANITIZER
# =============================================================================

_MARKDOWN_LINK = re.compile(r"\[([^\]\n]+)\]\((?:https?://|www\.)[^)\s]*\)")
_BRACKET_CITATION = re.compile(r"\[[^\[\]\n]*\]")
_URL = re.compile(r"\b(?:https?://|www\.)(?:[^\s<>()\[\]]*[^\s<>()\[\].,;:!?'\"])?", re.IGNORECASE)
_EMPTY_PARENS = re.compile(r"\(\s*\)")
# Asterisks always go; underscores only when they wrap words (icon names like "wb_sunny" stay)
_EMPHASIS = re.compile(r"\*+|(?<!\w)_+|_+(?!\w)")
_HEADING = re.compile(r"^[ \t]*#{1,6}[ \t]*", re.MULTILINE)
_INLINE_SPACES = re.compile(r"[ \t]+")
_LINE_EDGE_SPACES = re.compile(r"[ \t]*\n[ \t]*")
_EXTRA_BLANK_LINES = re.compile(r"\n{3,}")
_SPACE_BEFORE_PUNCT = re.compile(r" +([.,;:!?])")


def _clean_once(text: str) -> str:
    # Links keep their label; the URL part goes with the rest of the URLs
    text = _MARKDOWN_LINK.sub(r"\1", text)
    text = _BRACKET_CITATION.sub("", text)
    text = _URL.sub("", text)
    text = _EMPTY_PARENS.sub("", text)
    text = _EMPHASIS.sub("", text)
    text = _HEADING.sub("", text)

    # Collapse whitespace but keep line and stanza breaks
    text = _INLINE_SPACES.sub(" ", text)
    text = _LINE_EDGE_SPACES.sub("\n", text)
    text = _EXTRA_BLANK_LINES.sub("\n\n", text)
    text = _SPACE_BEFORE_PUNCT.sub(r"\1", text)
    return text.strip()


def clean_text(text: Optional[str]) -> str:
    """
    Strip formatting artifacts from model prose.

    Removes markdown emphasis markers and headings, bracketed citation
    tokens like ``[1]`` or ``[source]``, markdown links (keeping the label)
    and bare URLs, then tidies the leftover whitespace.

    Idempotent: clean_text(clean_text(s)) == clean_text(s).
    """
    if not text:
        return ""

    # Removing one artifact can expose another (e.g. "http*s://"), so run to a fixed point.
    # Passes never grow the string, so this terminates.
    previous = None
    cleaned = text
    while cleaned != previous:
        previous = cleaned
        cleaned = _clean_once(cleaned)
    return cleaned


def clean_object(value: Any) -> Any:
    """
    Apply clean_text to every string inside a parsed JSON value.

    Keys, list order, nesting and non-string values are left untouched.
    """
    if isinstance(value, str):
        return clean_text(value)
    if isinstance(value, dict):
        return {key: clean_object(item) for key, item in value.items()}
    if isinstance(value, list):
        return [clean_object(item) for item in value]
    return value


def extract_clean_field(text: str, begin_marker: str, end_marker: str, default: str) -> str:
    """
    Extract a delimited field, clean it and substitute a default when absent.

    The result is never empty: the client renders these fields directly.
    """
    return clean_text(extract_field(text, begin_marker, end_marker)) or default
