"""Splitting of a PHI note into its segments."""

from __future__ import annotations

from dataclasses import dataclass

# Segments are separated by an em dash; hyphens and en dashes belong to dates and names.
NOTE_SEPARATOR = "—"


@dataclass(frozen=True)
class Segment:
    index: int  # 1-based
    text: str


def split_note(note: str) -> list[Segment]:
    """Split a note into trimmed segments, keeping empty ones so that indexes match the note."""
    if not note or not note.strip():
        return []
    return [Segment(i, part.strip()) for i, part in enumerate(note.split(NOTE_SEPARATOR), start=1)]
