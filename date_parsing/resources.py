"""Loading of the static lookup tables bundled with the parsers.

Tables are read once per process and cached. Readers turn the raw asset
file into an immutable value (a tuple or a ``MappingProxyType``); a missing,
empty or malformed asset raises :class:`AssetError` instead of leaving the
parser running with an empty table.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any, Callable

logger = logging.getLogger(__name__)

ASSETS_DIR = Path(__file__).parent / "assets"

_cache: dict[tuple[Callable, Path], Any] = {}
_cache_lock = threading.Lock()


class AssetError(RuntimeError):
    """A bundled lookup asset is missing or cannot be read."""


def read_asset_lines(path: Path) -> list[str]:
    """Return the non-blank, non-comment lines of a UTF-8 asset file."""
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise AssetError(f"Cannot read asset {path}: {e}") from e

    lines = []
    for line in raw.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        lines.append(line)
    if not lines:
        raise AssetError(f"Asset {path} is empty")
    return lines


def load_asset(path: Path, reader: Callable[[Path], Any]) -> Any:
    """Return the table built by ``reader`` from ``path``, loading it at most once.

    Concurrent first use blocks behind a single loader; a failed load is not
    cached, so the next call raises again.
    """
    key = (reader, Path(path))
    table = _cache.get(key)
    if table is not None:
        return table

    with _cache_lock:
        table = _cache.get(key)
        if table is None:
            table = reader(Path(path))
            _cache[key] = table
            logger.debug(f"Loaded asset {path}")
    return table


def clear_asset_cache() -> None:
    """Forget every loaded table (used by tests that swap asset files)."""
    with _cache_lock:
        _cache.clear()
