"""Extraction of letter counts from a stoichedon layout segment."""

from __future__ import annotations

import re

_ASIDE_RE = re.compile(r"\([^)]*\)")
_LEADING_CA_RE = re.compile(r"^\s*ca?\.\s*", re.IGNORECASE)
_RANGE_RE = re.compile(r"(\d+)\s*\??\s*[-/–]\s*(\d+)")
_NUMBER_RE = re.compile(r"\d+")


def extract_counts(text: str) -> tuple[int, int]:
    """Return the (min, max) letters per line written after a layout keyword.

    ``28`` gives (28, 28), ``28-30``, ``30/28`` and ``c.30/28`` give (28, 30);
    a doubt mark and parenthesised asides are ignored, and text without
    any number gives (0, 0).
    """
    if not text:
        return 0, 0

    text = text.replace("(?)", "?")
    text = _ASIDE_RE.sub(" ", text)
    text = _LEADING_CA_RE.sub("", text)

    m = _RANGE_RE.search(text)
    if m:
        a, b = int(m.group(1)), int(m.group(2))
        return min(a, b), max(a, b)

    m = _NUMBER_RE.search(text)
    if m:
        n = int(m.group(0))
        return n, n
    return 0, 0
