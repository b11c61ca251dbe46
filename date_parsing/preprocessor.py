"""Per-endpoint cleanup before grammar matching."""

from __future__ import annotations

import re
from dataclasses import dataclass

_GLUED_ERA_RE = re.compile(r"([0-9])(a\.|p\.)")
_LEADING_CA_RE = re.compile(r"^(?:ca?\.|ca\b|circa\b)\s*", re.IGNORECASE)
_N_DOT_RE = re.compile(r"([0-9])\.(?: ?Jh\.)?(?!\s*(?:H[äa]lfte|Drittel))\s*")
_LATER_THAN_RE = re.compile(r"\blater than the early\s*", re.IGNORECASE)


@dataclass(frozen=True)
class PreparedDatation:
    """An endpoint phrase with its approximation and doubt markers stripped."""
    text: str
    is_approximate: bool = False
    is_dubious: bool = False


def preprocess_datations(texts, *, approximate: bool = False, dubious: bool = False) -> list[PreparedDatation]:
    """Prepare the endpoint phrases of one alternative.

    A leading ``c.``/``ca.`` marks that endpoint as approximate; on the first
    endpoint it applies to every endpoint. A ``?`` marks its endpoint as
    dubious; at the very end of the last endpoint it applies to every
    endpoint. ``approximate`` and ``dubious`` are defaults coming from the
    whole phrase.

    Args:
        texts: The endpoint phrases, in reading order
        approximate: Default approximation flag
        dubious: Default doubt flag

    Returns:
        One PreparedDatation per endpoint phrase
    """
    texts = list(texts)
    if not texts:
        return []

    if texts[0].strip() and _LEADING_CA_RE.match(texts[0].strip()):
        approximate = True
    if texts[-1].rstrip().endswith("?"):
        dubious = True

    prepared = []
    for text in texts:
        text = " ".join(text.split())
        text = _LATER_THAN_RE.sub("", text)
        text = _GLUED_ERA_RE.sub(r"\1 \2", text)

        is_approximate = approximate
        m = _LEADING_CA_RE.match(text)
        if m:
            is_approximate = True
            text = text[m.end():]

        is_dubious = dubious or "?" in text
        text = text.replace("?", " ")

        text = _N_DOT_RE.sub(r"\1th ", text)
        prepared.append(PreparedDatation(" ".join(text.split()), is_approximate, is_dubious))
    return prepared
