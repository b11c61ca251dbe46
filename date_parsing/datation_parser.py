"""Parser for a single date endpoint such as ``init. s. VI a.`` or ``ante 450 a.``."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from date_parsing.datation import Century, Datation, Point, from_roman
from date_parsing.preprocessor import PreparedDatation

logger = logging.getLogger(__name__)

# modifier spelling -> key of datation.MODIFIER_OFFSETS
_MODIFIERS = (
    (r"init\.|beg\.|anf\.", "init"),
    (r"med\.|middle|mid", "med"),
    (r"fin\.|ende|end|wende", "fin"),
    (r"early|eher", "early"),
    (r"late", "late"),
    (r"1st\s+half|1\.\s*h[äa]lfte", "half1"),
    (r"2nd\s+half|2\.\s*h[äa]lfte", "half2"),
    (r"1st\s+third(?:\s+of(?:\s+the)?)?|1\.\s*drittel", "third1"),
)
_MODIFIER_PATTERNS = [(re.compile(rf"^(?:{p})$", re.IGNORECASE), key) for p, key in _MODIFIERS]

_BC_ERAS = ("a.", "ac", "bc", "bce", "v.chr.")

DATATION_RE = re.compile(
    r"^(?:(?P<term>ante|post)\s*)?"
    r"(?:(?P<approx>ca?\.|circa)\s*)?"
    r"(?:(?P<mod>" + "|".join(p for p, _ in _MODIFIERS) + r")\s*)?"
    r"(?:(?P<s>s\.)\s*)?"
    r"(?:(?P<num>\d+)(?P<ord>st|nd|rd|th)?|(?P<roman>(?-i:[IVX]+)))"
    r"(?:\s*(?:cent\.|century|c\.|jh\.))?"
    r"\s*(?P<qmk1>\?)?"
    r"\s*(?P<era>a\.|p\.|ac|pc|bce|bc|ad|ce|v\.\s*chr\.|n\.\s*chr\.)?"
    r"\s*(?P<qmk2>\?)?$",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class ParsedDatation:
    """Result of parsing one endpoint.

    ``role`` is "ante" or "post" for a terminus, None otherwise;
    ``has_era`` tells whether the era was written or defaulted.
    """
    datation: Datation
    role: str | None = None
    has_era: bool = False


class DatationParser:
    """Matches one prepared endpoint phrase against the datation grammar."""

    def parse(self, prepared: PreparedDatation | str, default_bc: bool = False) -> ParsedDatation | None:
        """Parse an endpoint phrase.

        Args:
            prepared: The endpoint, as returned by ``preprocess_datations`` or as plain text
            default_bc: Whether to assume BC when no era is written

        Returns:
            A ParsedDatation if the phrase matches the grammar, None otherwise
        """
        if isinstance(prepared, str):
            prepared = PreparedDatation(prepared)

        m = DATATION_RE.match(prepared.text.strip())
        if not m:
            return None

        era = m.group("era")
        if era:
            is_bc = "".join(era.lower().split()) in _BC_ERAS
        else:
            is_bc = default_bc

        if m.group("num"):
            value = int(m.group("num"))
        else:
            value = from_roman(m.group("roman").upper())
        if value == 0:
            logger.debug(f"Zero value in datation {prepared.text!r}")
            return None

        approximate = prepared.is_approximate or m.group("approx") is not None
        dubious = prepared.is_dubious or bool(m.group("qmk1") or m.group("qmk2"))
        signed = -value if is_bc else value

        if m.group("s") or m.group("ord") or m.group("roman"):
            datation = Century(signed, approximate, dubious)
            modifier = m.group("mod")
            if modifier:
                datation = datation.with_modifier(self._modifier_key(modifier))
        else:
            # century modifiers are meaningless on a plain year
            datation = Point(signed, approximate, dubious)

        role = m.group("term").lower() if m.group("term") else None
        return ParsedDatation(datation, role, era is not None)

    @staticmethod
    def _modifier_key(modifier: str) -> str:
        modifier = " ".join(modifier.split())
        for pattern, key in _MODIFIER_PATTERNS:
            if pattern.match(modifier):
                return key
        raise ValueError(f"Unknown century modifier: {modifier!r}")
