"""Extraction of bracketed and parenthesised asides ("hints") from date text."""

from __future__ import annotations

import re

_PAIRS = {")": "(", "]": "["}
# the whole hint must be the statement: "not a forgery" carries no level
_FORGERY_RE = re.compile(r"^\s*\[?\s*(?:(probable|perhaps)\s+)?forgery\s*\??\s*\]?\s*$", re.IGNORECASE)
_FORGERY_LEVELS = {None: "1", "probable": "2", "perhaps": "3"}


def extract_hints(text: str) -> tuple[str, list[str]]:
    """Remove every top-level ``(...)`` or ``[...]`` group from text.

    Groups may nest (``[hello (world)]`` yields the single hint
    ``hello (world)``). The text is scanned from right to left, and hints
    are returned in reading order. An unbalanced closer is left in place.

    Args:
        text: The text to scan

    Returns:
        A tuple of (text without the groups, list of hint contents)
    """
    if text is None:
        raise ValueError("text must not be None")

    hints = []
    end = len(text)
    i = end - 1
    while i >= 0:
        c = text[i]
        if c in _PAIRS:
            start = _find_opener(text, i)
            if start is not None:
                hint = " ".join(text[start + 1:i].split())
                if hint:
                    hints.append(hint)
                text = text[:start] + " " + text[i + 1:]
                i = start
        i -= 1

    hints.reverse()
    return " ".join(text.split()), hints


def _find_opener(text: str, close_index: int) -> int | None:
    stack = []
    for j in range(close_index, -1, -1):
        c = text[j]
        if c in _PAIRS:
            stack.append(_PAIRS[c])
        elif c in ("(", "["):
            if not stack or stack[-1] != c:
                return None
            stack.pop()
            if not stack:
                return j
    return None


def forgery_level(hints) -> str | None:
    """Return the forgery level ("1", "2" or "3") carried by any hint, if any.

    ``probable forgery`` is 2, ``perhaps forgery`` is 3, ``forgery`` or
    ``forgery?`` is 1. A hint which merely mentions forgery, like
    ``not a forgery``, carries no level.
    """
    for hint in hints:
        m = _FORGERY_RE.match(hint)
        if m:
            qualifier = m.group(1).lower() if m.group(1) else None
            return _FORGERY_LEVELS[qualifier]
    return None
