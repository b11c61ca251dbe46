"""Splitting of a canonical date phrase into alternatives and endpoints."""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

# "159-156? 157-156? BC": a doubtful value followed by another number
_QMK_SPACE_RE = re.compile(r"(?<=[0-9IVX]\?)\s+(?=[0-9])")
# "11th/beg. 12th c. AD": a slash between two words
_WORD_SLASH_RE = re.compile(r"(?<=[^0-9IVX])/(?=[^0-9IVX])")
# "and", "or", "oder", "od.", "&" or a comma outside of a {...} token
_CONJUNCTION_RE = re.compile(
    r"\s*,(?![^{]*\})\s*|(?<=\s)(?:and|or|oder|od\.|&)(?=\s)"
)

# "131/2" -> "131-132", "21/0" -> "21-20"
_SHORT_SPAN_RE = re.compile(r"(?<![0-9])(\d+)/(\d+)(?![0-9])")
# a slash between two numbers, ordinals or Roman numerals marks a range
_RANGE_SLASH_RE = re.compile(r"([0-9](?:st|nd|rd|th|\.)?\??|[IVX]\??)/(?=[0-9IVX])")
# a hyphen between the two endpoints of a range
_RANGE_DASH_RE = re.compile(r"(?<=[0-9A-Za-z.?])-(?=[0-9A-Za-z])")


def split_dates(text: str) -> list[str]:
    """Split a canonical date phrase into its alternative readings.

    Raises:
        ValueError: If text is None
    """
    if text is None:
        raise ValueError("text must not be None")
    if not text.strip():
        return []

    if _QMK_SPACE_RE.search(text):
        pieces = _QMK_SPACE_RE.split(text)
    elif _WORD_SLASH_RE.search(text):
        pieces = _WORD_SLASH_RE.split(text)
    else:
        pieces = _CONJUNCTION_RE.split(text)

    return [p.strip() for p in pieces if p and p.strip()]


def _expand_short_span(m: re.Match) -> str:
    first, second = m.group(1), m.group(2)
    if len(second) >= len(first):
        return m.group(0)
    # complete the abbreviated year with the leading digits of the first one
    full = first[:len(first) - len(second)] + second
    return f"{first}/{full}"


def split_alternatives(text: str) -> list[str]:
    """Split one alternative at the slashes which do not denote a range.

    A slash between two numbers (``430/410 a.``), ordinals (``3rd/4th``) or
    Roman numerals (``s. III/V``) is rewritten as a range hyphen; any other
    slash separates further alternatives.

    Raises:
        ValueError: If text is None
    """
    if text is None:
        raise ValueError("text must not be None")
    text = _SHORT_SPAN_RE.sub(_expand_short_span, text)
    text = _RANGE_SLASH_RE.sub(r"\1-", text)
    return [p.strip() for p in text.split("/") if p.strip()]


def split_datations(text: str) -> list[str] | None:
    """Split an alternative into its one or two endpoint phrases.

    Returns:
        The endpoint phrases, or None when the text has more than two endpoints

    Raises:
        ValueError: If text is None
    """
    if text is None:
        raise ValueError("text must not be None")
    if not text.strip():
        return []

    endpoints = [p.strip() for p in _RANGE_DASH_RE.split(text)]
    if len(endpoints) > 2:
        logger.info(f"Too many endpoints in date {text!r}")
        return None
    return endpoints
