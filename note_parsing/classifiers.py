"""Segment classifiers for PHI notes.

Each classifier takes one segment of a note and returns the properties it
claims the segment for, or None when the segment is not of its kind.
Classifiers are pure: the note parser decides which one runs and in what
order.
"""

from __future__ import annotations

import re
from enum import Enum, auto

from date_parsing import DateParser
from date_parsing.hints import forgery_level
from note_parsing import props
from note_parsing.references import ReferencePrefixes
from note_parsing.stoichedon import extract_counts
from note_parsing.text_node_property import TextNodeProperty

_TYPE_RE = re.compile(r"^\s*\[([^\]]+)\]\s*$")
_LAYOUT_RE = re.compile(r"^\s*(non-stoich\.|stoich\.|boustr\.|retrogr\.|retr\.)(.*)$", re.IGNORECASE)


class SegmentKind(Enum):
    """Kinds of note segments, in the order they are tried."""
    TYPE = auto()
    LAYOUT = auto()
    DATE = auto()
    REFERENCE = auto()
    LOCATION = auto()


def is_forgery_wording(text: str) -> bool:
    """Tell whether text is only a forgery statement like ``[probable forgery]``."""
    return forgery_level([text]) is not None


def classify_type(text: str, node_id: int) -> list[TextNodeProperty] | None:
    """``[pottery]`` -> type=pottery."""
    m = _TYPE_RE.match(text)
    if not m or is_forgery_wording(text):
        return None
    return [TextNodeProperty(node_id, props.TYPE, m.group(1).strip())]


def classify_layout(text: str, node_id: int) -> list[TextNodeProperty] | None:
    """``stoich. 28`` -> layout, stoich-min and stoich-max."""
    m = _LAYOUT_RE.match(text)
    if not m:
        return None

    keyword = m.group(1).lower()
    value = text.strip()
    if keyword == "retr.":
        value = "retrogr." + value[len(m.group(1)):]
    result = [TextNodeProperty(node_id, props.LAYOUT, value)]

    if keyword in ("stoich.", "non-stoich."):
        low, high = extract_counts(m.group(2))
        if keyword == "stoich.":
            names = (props.STOICH_MIN, props.STOICH_MAX)
        else:
            names = (props.NON_STOICH_MIN, props.NON_STOICH_MAX)
        result.append(TextNodeProperty(node_id, names[0], str(low), props.TYPE_INT))
        result.append(TextNodeProperty(node_id, names[1], str(high), props.TYPE_INT))
    return result


def classify_date(text: str, node_id: int, parser: DateParser) -> list[TextNodeProperty] | None:
    """``440-410 a.`` -> date-phi, date-txt and date-val (one pair per alternative).

    A non-numeric date like ``early imp.`` yields date-phi and date-nan, a
    bare forgery statement only the forgery level.
    """
    if is_forgery_wording(text):
        level = forgery_level([text])
        return [TextNodeProperty(node_id, props.FORGERY, level, props.TYPE_INT)]

    result = parser.parse(text)
    if not result.is_date:
        return None

    phrase = text.strip()
    claimed = [TextNodeProperty(node_id, props.DATE_PHI, phrase)]
    if result.dates:
        for i, date in enumerate(result.dates, start=1):
            claimed.append(TextNodeProperty(node_id, props.suffixed(props.DATE_TXT, i), str(date)))
            claimed.append(TextNodeProperty(
                node_id, props.suffixed(props.DATE_VAL, i), str(date.sort_value()), props.TYPE_INT))
    else:
        claimed.append(TextNodeProperty(node_id, props.DATE_NAN, phrase))

    level = forgery_level(result.hints)
    if level:
        claimed.append(TextNodeProperty(node_id, props.FORGERY, level, props.TYPE_INT))
    return claimed


def classify_reference(text: str, node_id: int, prefixes: ReferencePrefixes) -> list[TextNodeProperty] | None:
    if not prefixes.is_reference(text):
        return None
    return [TextNodeProperty(node_id, props.REFERENCE, text.strip())]


def classify_location(text: str, node_id: int) -> list[TextNodeProperty]:
    return [TextNodeProperty(node_id, props.LOCATION, text.strip())]
