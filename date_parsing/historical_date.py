"""Dataclass representing a resolved historical date."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import Enum

from date_parsing.datation import Century, Datation, Point, from_roman


class DateKind(Enum):
    """Shape of a historical date."""
    POINT = "point"
    RANGE = "range"
    ANTE = "ante"   # terminus ante quem: only the end is known
    POST = "post"   # terminus post quem: only the start is known


# Offset applied to open ranges so that they sort just before/after their terminus.
TERMINUS_OFFSET = 10

_ENDPOINT_RE = re.compile(
    r"^(?P<approx>c\.\s*)?(?:(?P<num>\d+)|(?P<roman>[IVXLCDM]+))"
    r"(?:\s+(?P<era>BC|AD))?(?P<dubious>\s*\?)?$"
)


@dataclass(frozen=True)
class HistoricalDate:
    """A point, a closed range or an open (ante/post) range.

    For a point ``start`` and ``end`` hold the same datation. ``hints`` are the
    bracketed asides found next to the date, ``day``/``month`` an optional
    calendar day which is displayed but never affects the sort value.
    """
    kind: DateKind
    start: Datation | None = None
    end: Datation | None = None
    hints: tuple[str, ...] = ()
    day: int | None = None
    month: int | None = None

    def __post_init__(self):
        if self.kind in (DateKind.POINT, DateKind.RANGE):
            if self.start is None or self.end is None:
                raise ValueError(f"A {self.kind.value} date needs both endpoints")
        elif self.kind == DateKind.ANTE:
            if self.end is None or self.start is not None:
                raise ValueError("A terminus ante date has only an end")
        elif self.start is None or self.end is not None:
            raise ValueError("A terminus post date has only a start")
        if self.kind == DateKind.POINT and self.start != self.end:
            raise ValueError("A point date has a single datation")
        if self.month is not None and not 1 <= self.month <= 12:
            raise ValueError(f"Invalid month: {self.month}")

    @classmethod
    def point(cls, datation: Datation) -> "HistoricalDate":
        return cls(DateKind.POINT, datation, datation)

    @classmethod
    def range(cls, start: Datation, end: Datation) -> "HistoricalDate":
        return cls(DateKind.RANGE, start, end)

    @classmethod
    def ante(cls, end: Datation) -> "HistoricalDate":
        return cls(DateKind.ANTE, end=end)

    @classmethod
    def post(cls, start: Datation) -> "HistoricalDate":
        return cls(DateKind.POST, start=start)

    def with_details(self, hints=(), day: int | None = None, month: int | None = None) -> "HistoricalDate":
        """Return a copy carrying extra hints and an optional calendar day."""
        return replace(self, hints=self.hints + tuple(hints), day=day, month=month)

    def with_flags(self, *, approximate: bool = False, dubious: bool = False) -> "HistoricalDate":
        """Return a copy with the approximate/dubious flags set on every endpoint."""
        start = self.start.with_flags(approximate=approximate, dubious=dubious) if self.start else None
        end = self.end.with_flags(approximate=approximate, dubious=dubious) if self.end else None
        if self.kind == DateKind.POINT:
            end = start
        return replace(self, start=start, end=end)

    @property
    def anchor(self) -> Datation:
        """The endpoint whose era a neighbouring alternative may inherit."""
        return self.end if self.end is not None else self.start

    def sort_value(self) -> int:
        """Return the integer used to sort dates chronologically (BC negative).

        A range sorts at the mean of its endpoints. A half-year mean is
        rounded toward zero, so ``441 -- 410 BC`` and ``410 -- 441 AD`` sit
        symmetrically at -425 and 425.
        """
        if self.kind == DateKind.POINT:
            return self.start.rank
        if self.kind == DateKind.RANGE:
            total = self.start.rank + self.end.rank
            return total // 2 if total >= 0 else -(-total // 2)
        if self.kind == DateKind.ANTE:
            return self.end.rank - TERMINUS_OFFSET
        return self.start.rank + TERMINUS_OFFSET

    def __str__(self) -> str:
        if self.kind == DateKind.POINT:
            text = _render(self.start, True)
        elif self.kind == DateKind.RANGE:
            show_start_era = self.start.is_bc != self.end.is_bc
            text = f"{_render(self.start, show_start_era)} -- {_render(self.end, True)}"
        elif self.kind == DateKind.ANTE:
            text = f"-- {_render(self.end, True)}"
        else:
            text = f"{_render(self.start, True)} --"

        details = list(self.hints)
        if self.month is not None:
            details.append(f"d={self.day},m={self.month}" if self.day else f"m={self.month}")
        if details:
            text += " {" + "; ".join(details) + "}"
        return text

    @classmethod
    def parse(cls, text: str) -> "HistoricalDate":
        """Parse a date from its canonical text, e.g. ``200 -- 1 BC`` or ``c. VI BC ?``.

        Raises:
            ValueError: If the text is not in canonical form
        """
        if text is None:
            raise ValueError("text must not be None")
        text = " ".join(text.split())
        if " -- " in f" {text} ":
            head, _, tail = f" {text} ".partition(" -- ")
            head, tail = head.strip(), tail.strip()
            end = _parse_endpoint(tail, False) if tail else None
            start = _parse_endpoint(head, end.is_bc if end else False) if head else None
            if start and end:
                return cls.range(start, end)
            if end:
                return cls.ante(end)
            if start:
                return cls.post(start)
            raise ValueError(f"Empty date range: {text!r}")
        return cls.point(_parse_endpoint(text, False))


def _render(datation: Datation, show_era: bool) -> str:
    parts = []
    if datation.is_approximate:
        parts.append("c.")
    parts.append(datation.magnitude_text())
    if show_era:
        parts.append("BC" if datation.is_bc else "AD")
    if datation.is_dubious:
        parts.append("?")
    return " ".join(parts)


def _parse_endpoint(text: str, default_bc: bool) -> Datation:
    m = _ENDPOINT_RE.match(text)
    if not m:
        raise ValueError(f"Invalid canonical datation: {text!r}")

    era = m.group("era")
    is_bc = era == "BC" if era else default_bc
    sign = -1 if is_bc else 1
    approximate = m.group("approx") is not None
    dubious = m.group("dubious") is not None

    if m.group("num"):
        return Point(sign * int(m.group("num")), approximate, dubious)
    return Century(sign * from_roman(m.group("roman")), approximate, dubious)
