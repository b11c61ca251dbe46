"""Single chronological endpoints: a year point or a century."""

from __future__ import annotations

from dataclasses import dataclass, replace

# Offsets into a century (AD reading) for the century modifiers.
MODIFIER_OFFSETS = {
    "init": 10,
    "med": 50,
    "fin": 90,
    "early": 15,
    "late": 85,
    "half1": 25,
    "half2": 75,
    "third1": 17,
}

_ROMAN_VALUES = (
    (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"),
    (100, "C"), (90, "XC"), (50, "L"), (40, "XL"),
    (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
)
_ROMAN_DIGITS = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def to_roman(n: int) -> str:
    """Render a positive integer as an uppercase Roman numeral."""
    if n <= 0:
        raise ValueError(f"Cannot render {n} as a Roman numeral")
    parts = []
    for value, numeral in _ROMAN_VALUES:
        count, n = divmod(n, value)
        parts.append(numeral * count)
    return "".join(parts)


def from_roman(text: str) -> int:
    """Parse an uppercase Roman numeral (subtractive notation allowed)."""
    if not text or any(c not in _ROMAN_DIGITS for c in text):
        raise ValueError(f"Invalid Roman numeral: {text!r}")
    total = 0
    for i, c in enumerate(text):
        value = _ROMAN_DIGITS[c]
        if i + 1 < len(text) and _ROMAN_DIGITS[text[i + 1]] > value:
            total -= value
        else:
            total += value
    return total


@dataclass(frozen=True)
class Point:
    """A year. ``value`` is negative for BC and positive for AD."""
    value: int
    is_approximate: bool = False
    is_dubious: bool = False

    def __post_init__(self):
        if self.value == 0:
            raise ValueError("There is no year 0")

    @property
    def is_bc(self) -> bool:
        return self.value < 0

    @property
    def rank(self) -> int:
        return self.value

    def magnitude_text(self) -> str:
        return str(abs(self.value))

    def with_flags(self, *, approximate: bool = False, dubious: bool = False) -> "Point":
        return replace(
            self,
            is_approximate=self.is_approximate or approximate,
            is_dubious=self.is_dubious or dubious,
        )


@dataclass(frozen=True)
class Century:
    """A whole century. ``value`` is the signed ordinal (-6 = 6th century BC)."""
    value: int
    is_approximate: bool = False
    is_dubious: bool = False

    def __post_init__(self):
        if self.value == 0:
            raise ValueError("There is no century 0")

    @property
    def is_bc(self) -> bool:
        return self.value < 0

    @property
    def rank(self) -> int:
        # a plain century sorts on its middle year
        return self._year_at(MODIFIER_OFFSETS["med"])

    def magnitude_text(self) -> str:
        return to_roman(abs(self.value))

    def with_flags(self, *, approximate: bool = False, dubious: bool = False) -> "Century":
        return replace(
            self,
            is_approximate=self.is_approximate or approximate,
            is_dubious=self.is_dubious or dubious,
        )

    def with_modifier(self, modifier: str) -> Point:
        """Convert this century into the approximate year a modifier points to.

        ``modifier`` is a key of :data:`MODIFIER_OFFSETS`. Offsets count from
        the start of the century for AD and from its end for BC, so
        ``init. s. VI a.`` is 590 BC while ``init. s. II`` is 110 AD.
        """
        offset = MODIFIER_OFFSETS[modifier]
        return Point(self._year_at(offset), is_approximate=True, is_dubious=self.is_dubious)

    def _year_at(self, offset: int) -> int:
        c = abs(self.value)
        if self.is_bc:
            return -((c - 1) * 100 + (100 - offset))
        return (c - 1) * 100 + offset


# A datation is either a Point or a Century
Datation = Point | Century


def is_century(datation: Datation) -> bool:
    return isinstance(datation, Century)
