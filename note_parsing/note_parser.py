"""Parser turning a PHI note into an ordered list of node properties."""

from __future__ import annotations

import logging
from typing import List

from date_parsing import DateParser
from note_parsing import props
from note_parsing.classifiers import (
    SegmentKind,
    classify_date,
    classify_layout,
    classify_location,
    classify_reference,
    classify_type,
)
from note_parsing.references import ReferencePrefixes
from note_parsing.text_node_property import TextNodeProperty
from note_parsing.tokenizer import split_note

logger = logging.getLogger(__name__)

# kinds which may be claimed by a single segment only
_SINGLE_KINDS = (SegmentKind.TYPE, SegmentKind.LAYOUT, SegmentKind.LOCATION)


class NoteParser:
    """Parses notes like ``Att. — Athens: Akropolis — stoich. 28 — 440-410 a.``.

    The first segment is always the region. Each following segment goes to
    the first classifier, in the order given by :meth:`get_classifier_steps`,
    which claims it; a segment nobody claims is the location while no
    location, layout or date has been found yet, and a reference afterwards.
    """

    def __init__(self, date_parser: DateParser | None = None, prefixes: ReferencePrefixes | None = None):
        self.date_parser = date_parser or DateParser()
        self.prefixes = prefixes or ReferencePrefixes()

    def get_classifier_steps(self) -> List[SegmentKind]:
        """Return the classifiers to try on each segment, in priority order."""
        return [
            SegmentKind.TYPE,
            SegmentKind.LAYOUT,
            SegmentKind.DATE,
            SegmentKind.REFERENCE,
        ]

    def parse(self, note: str | None, node_id: int) -> list[TextNodeProperty]:
        """Parse a note into properties for the node ``node_id``.

        Args:
            note: The note text; None or empty gives no properties
            node_id: The identifier of the node the note belongs to

        Returns:
            The properties, in segment order

        Raises:
            ValueError: If node_id is not a non-negative integer
        """
        if isinstance(node_id, bool) or not isinstance(node_id, int) or node_id < 0:
            raise ValueError(f"Invalid node id: {node_id!r}")

        segments = split_note(note)
        if not segments:
            return []

        result = [TextNodeProperty(node_id, props.REGION, segments[0].text)]
        found: set[SegmentKind] = set()

        for segment in segments[1:]:
            if not segment.text:
                continue

            kind, claimed = self._classify(segment.text, node_id, found)
            # a bare forgery statement is not a date
            if not (kind == SegmentKind.DATE and claimed[0].name == props.FORGERY):
                found.add(kind)
            result.extend(claimed)
            logger.debug(f"Segment {segment.index} of node {node_id} is {kind.name}: {segment.text!r}")

        return result

    def _classify(self, text: str, node_id: int, found: set) -> tuple[SegmentKind, list[TextNodeProperty]]:
        for kind in self.get_classifier_steps():
            if kind in _SINGLE_KINDS and kind in found:
                continue
            claimed = self._run(kind, text, node_id)
            if claimed is not None:
                return kind, claimed

        # there is no location after a location, a layout or a date
        if found.isdisjoint((SegmentKind.LOCATION, SegmentKind.LAYOUT, SegmentKind.DATE)):
            return SegmentKind.LOCATION, classify_location(text, node_id)
        return SegmentKind.REFERENCE, [TextNodeProperty(node_id, props.REFERENCE, text)]

    def _run(self, kind: SegmentKind, text: str, node_id: int) -> list[TextNodeProperty] | None:
        if kind == SegmentKind.TYPE:
            return classify_type(text, node_id)
        elif kind == SegmentKind.LAYOUT:
            return classify_layout(text, node_id)
        elif kind == SegmentKind.DATE:
            return classify_date(text, node_id, self.date_parser)
        elif kind == SegmentKind.REFERENCE:
            return classify_reference(text, node_id, self.prefixes)
        raise ValueError(f"Unknown segment kind: {kind}")
