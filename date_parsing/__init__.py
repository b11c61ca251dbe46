"""Date parsing module for epigraphic date phrases.

Turns the shorthand used in inscription catalogs ("440-410 a.",
"init. s. VI a.", "ante 450 a.", "fin. s. VI/init. s. V a.") into
canonical, sortable historical dates.
"""

from date_parsing.datation import Century, Point
from date_parsing.historical_date import DateKind, HistoricalDate
from date_parsing.date_parser import DateParser, DateParseResult
from date_parsing.periods import NamedPeriodResolver
from date_parsing.resources import AssetError

__all__ = [
    "AssetError",
    "Century",
    "DateKind",
    "DateParseResult",
    "DateParser",
    "HistoricalDate",
    "NamedPeriodResolver",
    "Point",
]
