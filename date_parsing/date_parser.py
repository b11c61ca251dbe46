"""Parser turning a whole date phrase into its alternative historical dates."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from date_parsing.datation_parser import DatationParser
from date_parsing.historical_date import DateKind, HistoricalDate
from date_parsing.normalizer import preprocess_for_split
from date_parsing.periods import NamedPeriodResolver
from date_parsing.preprocessor import preprocess_datations
from date_parsing.splitter import split_alternatives, split_datations, split_dates

logger = logging.getLogger(__name__)

_DAY_MONTH_TOKEN_RE = re.compile(r"\s*\{(?:d=(?P<day>\d+),)?m=(?P<month>\d+)\}\s*$")
_LEADING_CA_RE = re.compile(r"^(?:ca?\.|ca\b|circa\b)", re.IGNORECASE)
# lowercase only: capitalised words at segment start are place names ("Laterza")
_NON_NUMERIC_RE = re.compile(r"^\s*(?:(?:early|late)(?=[\s.,?]|$)|aet\.)")


@dataclass(frozen=True)
class DateParseResult:
    """Outcome of parsing a date phrase.

    ``dates`` lists the alternative readings in reading order. ``is_nan`` is
    set for non-numeric phrases such as "early imp." which are recognized as
    dates but cannot be placed on the time line.
    """
    text: str
    dates: tuple[HistoricalDate, ...] = ()
    hints: tuple[str, ...] = ()
    is_nan: bool = False

    @property
    def is_date(self) -> bool:
        return bool(self.dates) or self.is_nan


class DateParser:
    """Parses PHI date phrases like ``440-410 a.`` or ``fin. s. VI/init. s. V a.``."""

    def __init__(self, period_resolver: NamedPeriodResolver | None = None):
        self.period_resolver = period_resolver or NamedPeriodResolver()
        self.datation_parser = DatationParser()

    def parse(self, text: str) -> DateParseResult:
        """Parse a date phrase.

        All alternatives must parse for the phrase to yield any date: a
        phrase like "SEG 12, 100" is not read as a date.

        Raises:
            ValueError: If text is None
        """
        if text is None:
            raise ValueError("text must not be None")

        phrase, hints = preprocess_for_split(text)
        phrase, day, month = self._pop_day_month(phrase)
        hints = tuple(hints)
        if not phrase:
            return DateParseResult(text, (), hints)

        dates = self._parse_phrase(phrase)
        if not dates:
            is_nan = bool(_NON_NUMERIC_RE.match(phrase))
            if not is_nan:
                logger.debug(f"Not a date: {text!r}")
            return DateParseResult(text, (), hints, is_nan)

        dates = tuple(d.with_details(hints, day, month) for d in dates)
        return DateParseResult(text, dates, hints)

    @staticmethod
    def _pop_day_month(phrase: str) -> tuple[str, int | None, int | None]:
        m = _DAY_MONTH_TOKEN_RE.search(phrase)
        if not m:
            return phrase, None, None
        day = int(m.group("day")) if m.group("day") else None
        return phrase[:m.start()].strip(), day, int(m.group("month"))

    def _parse_phrase(self, phrase: str) -> list[HistoricalDate]:
        period = self.period_resolver.resolve(phrase)
        if period is not None:
            return [period]

        approximate = bool(_LEADING_CA_RE.match(phrase))
        dubious = phrase.endswith("?")

        # Alternatives are resolved right to left: the era is usually written
        # only once, on the last one ("fin. s. VI/init. s. V a.").
        pieces = [split_alternatives(piece) for piece in split_dates(phrase)]
        resolved: list[list[HistoricalDate]] = []
        default_bc = False
        has_default = False

        for alternatives in reversed(pieces):
            piece_dates = []
            for alternative in reversed(alternatives):
                parsed = self._parse_alternative(alternative, default_bc, approximate, dubious)
                if parsed is None:
                    logger.info(f"Unparsable date alternative {alternative!r} in {phrase!r}")
                    return []
                date, has_era = parsed
                piece_dates.append(date)

                # a single endpoint lends its era to the alternatives on its left;
                # a range does so only when it stands alone with an explicit era
                if not has_default and (
                    date.kind != DateKind.RANGE or (has_era and len(alternatives) == 1)
                ):
                    default_bc = date.anchor.is_bc
                    has_default = True
            piece_dates.reverse()
            resolved.append(piece_dates)

        resolved.reverse()
        return [date for piece_dates in resolved for date in piece_dates]

    def _parse_alternative(
        self, text: str, default_bc: bool, approximate: bool, dubious: bool
    ) -> tuple[HistoricalDate, bool] | None:
        period = self.period_resolver.resolve(text)
        if period is not None:
            return period, True

        endpoints = split_datations(text)
        if not endpoints:
            return None
        prepared = preprocess_datations(endpoints, approximate=approximate, dubious=dubious)

        if len(prepared) == 1:
            p = self.datation_parser.parse(prepared[0], default_bc)
            if p is None:
                return None
            if p.role == "ante":
                return HistoricalDate.ante(p.datation), p.has_era
            if p.role == "post":
                return HistoricalDate.post(p.datation), p.has_era
            return HistoricalDate.point(p.datation), p.has_era

        # the era is normally written on the end only ("440-410 a."), so the
        # end is parsed first and its sign becomes the start's default
        end = self.datation_parser.parse(prepared[1], default_bc)
        if end is None:
            return None
        start = self.datation_parser.parse(prepared[0], end.datation.is_bc)
        if start is None:
            return None
        for endpoint in (start, end):
            if endpoint.role is not None:
                logger.info(f"Ignoring {endpoint.role!r} on range endpoint in {text!r}")
        return HistoricalDate.range(start.datation, end.datation), end.has_era or start.has_era
