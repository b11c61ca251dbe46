"""Recognition of bibliographic references by their leading abbreviation."""

from __future__ import annotations

import re
from pathlib import Path

from date_parsing.resources import AssetError, load_asset, read_asset_lines

DEFAULT_PREFIXES_PATH = Path(__file__).parent / "assets" / "reference_prefixes.txt"

# two initial capitals are usually a sign of SEG, IG, etc.
_CAPITALS_RE = re.compile(r"^\s*[A-Z]{2,}")


def read_prefixes(path: Path) -> tuple[str, ...]:
    """Read the prefix list, longest first."""
    prefixes = set(read_asset_lines(path))
    if any(" " in p for p in prefixes):
        raise AssetError(f"Reference prefixes in {path} must not contain spaces")
    return tuple(sorted(prefixes, key=lambda p: (-len(p), p)))


class ReferencePrefixes:
    """Longest-prefix matcher over the bundled abbreviation list."""

    def __init__(self, path: Path | None = None):
        self.path = Path(path) if path is not None else DEFAULT_PREFIXES_PATH

    @property
    def prefixes(self) -> tuple[str, ...]:
        return load_asset(self.path, read_prefixes)

    def match(self, text: str) -> str | None:
        """Return the longest known prefix text starts with, or None."""
        text = text.lstrip()
        for prefix in self.prefixes:
            if text.startswith(prefix):
                return prefix
        return None

    def is_reference(self, text: str) -> bool:
        """Tell whether text looks like a bibliographic reference."""
        if not text:
            return False
        return self.match(text) is not None or bool(_CAPITALS_RE.match(text))
