"""Whitespace and shorthand canonicalization of a date phrase before splitting."""

from __future__ import annotations

import re

from date_parsing.hints import extract_hints

_DASH_VARIANTS = ("–", "—", "―", "−")  # en dash, em dash, horizontal bar, minus sign
_DASH_RE = re.compile(r"\s*-\s*")

_QMK_PAREN_RE = re.compile(r"\(\s*\?\s*\)")
_WITH_RE = re.compile(r"\bw//?")
_JULY_AUGUST_RE = re.compile(r"\bJuly/August\b")
_OR_LATER_RE = re.compile(
    r"\s*\b(?:or|od\.|oder)\s+(?:(?:shortly|slightly|sh\.)\s+)?"
    r"(?P<dir>later|lat\.|after|aft\.|später|earlier|früher)(?=\W|$)",
    re.IGNORECASE,
)
_AT_THE_EARLIEST_RE = re.compile(r"\s*\bat the earliest\b", re.IGNORECASE)
_EARLY_SUFFIX_RE = re.compile(r",\s*early\s*$", re.IGNORECASE)
_DAY_MONTH_RE = re.compile(
    r",\s*(?:(?P<day>\d{1,2})\s+)?"
    r"(?P<month>Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]*\.?\s*$"
)
_MID_RE = re.compile(r"\bmid-(?=\d)", re.IGNORECASE)

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def normalize_ws(text: str) -> str:
    """Collapse any run of whitespace into a single space and trim the ends."""
    if text is None:
        raise ValueError("text must not be None")
    return " ".join(text.split())


def normalize_dashes(text: str) -> str:
    """Turn dash variants into a hyphen and drop the spaces around hyphens."""
    for dash in _DASH_VARIANTS:
        text = text.replace(dash, "-")
    return _DASH_RE.sub("-", text)


def _or_later(m: re.Match) -> str:
    direction = m.group("dir").lower()
    if direction in ("earlier", "früher"):
        return " (or earlier)"
    return " (or later)"


def _day_month(m: re.Match) -> str:
    month = MONTHS.index(m.group("month")) + 1
    if m.group("day"):
        return f"{{d={int(m.group('day'))},m={month}}}"
    return f"{{m={month}}}"


def preprocess_for_split(text: str) -> tuple[str, list[str]]:
    """Canonicalize a raw date phrase.

    Returns the phrase ready for splitting and the list of hints pulled out of
    it. Open-ended qualifiers such as "or later" and "at the earliest" become
    hints; a trailing calendar day/month becomes a ``{d=D,m=M}`` token at the
    end of the phrase.

    Raises:
        ValueError: If text is None
    """
    text = normalize_dashes(normalize_ws(text))
    text = _QMK_PAREN_RE.sub("?", text)
    text, hints = extract_hints(text)

    text = _WITH_RE.sub("w", text)
    text = _JULY_AUGUST_RE.sub("July", text)
    text = _OR_LATER_RE.sub(_or_later, text)
    text = _AT_THE_EARLIEST_RE.sub(" (at the earliest)", text)
    text = _EARLY_SUFFIX_RE.sub(" (early)", text)
    text = _DAY_MONTH_RE.sub(_day_month, text)
    text = _MID_RE.sub("med. ", text)

    text, more_hints = extract_hints(text)
    hints.extend(more_hints)
    return normalize_ws(text), hints
