"""Lookup of well-known period names, e.g. "early Roman period"."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from types import MappingProxyType

from date_parsing.historical_date import HistoricalDate
from date_parsing.resources import ASSETS_DIR, AssetError, load_asset

logger = logging.getLogger(__name__)

DEFAULT_PERIODS_PATH = ASSETS_DIR / "periods.csv"


def period_key(text: str) -> str:
    """Build the lookup key for a period name: no doubt marks, single spaces, lower case."""
    return " ".join(text.replace("?", " ").split()).lower()


def read_periods(path: Path) -> MappingProxyType:
    """Read a ``name,canonical date`` CSV into a read-only mapping.

    Raises:
        AssetError: If the file is missing, empty or has a malformed row
    """
    periods = {}
    try:
        with open(path, encoding="utf-8", newline="") as f:
            for line_nr, row in enumerate(csv.reader(f), start=1):
                if not row or not "".join(row).strip() or row[0].startswith("#"):
                    continue
                if len(row) != 2:
                    raise AssetError(f"{path}:{line_nr}: expected 2 columns, got {len(row)}")
                name, date_text = row
                try:
                    periods[period_key(name)] = HistoricalDate.parse(date_text)
                except ValueError as e:
                    raise AssetError(f"{path}:{line_nr}: {e}") from e
    except OSError as e:
        raise AssetError(f"Cannot read period table {path}: {e}") from e

    if not periods:
        raise AssetError(f"Period table {path} is empty")
    logger.info(f"Loaded {len(periods)} named periods from {path}")
    return MappingProxyType(periods)


class NamedPeriodResolver:
    """Resolves a period name into its canonical date.

    The table is loaded on first use and shared by every resolver reading
    the same file.
    """

    def __init__(self, path: Path | None = None):
        self.path = Path(path) if path is not None else DEFAULT_PERIODS_PATH

    @property
    def periods(self) -> MappingProxyType:
        return load_asset(self.path, read_periods)

    def resolve(self, text: str) -> HistoricalDate | None:
        """Return the date of the period named by text, or None if unknown.

        A ``?`` anywhere in the name makes both endpoints dubious.
        """
        if not text:
            return None
        date = self.periods.get(period_key(text))
        if date is None:
            return None
        if "?" in text:
            date = date.with_flags(dubious=True)
        return date
