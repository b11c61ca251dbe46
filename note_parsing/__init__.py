"""Note parsing module for PHI inscription notes.

A note is a sequence of segments separated by em dashes, e.g.
``Att. — Athens: Akropolis — stoich. 28 — 440-410 a. — IG I³ 87``.
The parser turns it into region, location, type, layout, date and
reference properties.
"""

from note_parsing.text_node_property import TextNodeProperty
from note_parsing.note_parser import NoteParser

__all__ = [
    "NoteParser",
    "TextNodeProperty",
]
