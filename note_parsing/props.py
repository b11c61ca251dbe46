"""Names of the properties extracted from a PHI note."""

REGION = "region"
LOCATION = "location"
TYPE = "type"
LAYOUT = "layout"
STOICH_MIN = "stoich-min"
STOICH_MAX = "stoich-max"
NON_STOICH_MIN = "non-stoich-min"
NON_STOICH_MAX = "non-stoich-max"
DATE_PHI = "date-phi"
DATE_TXT = "date-txt"
DATE_VAL = "date-val"
DATE_NAN = "date-nan"
FORGERY = "forgery"
REFERENCE = "reference"

# names which may be suffixed with "#2", "#3"... for alternative dates
SUFFIXED_NAMES = (DATE_TXT, DATE_VAL)

# every name the note parser may emit
INJECTED_NAMES = (
    REGION, LOCATION, TYPE, LAYOUT,
    STOICH_MIN, STOICH_MAX, NON_STOICH_MIN, NON_STOICH_MAX,
    DATE_PHI, DATE_TXT, DATE_VAL, DATE_NAN,
    FORGERY, REFERENCE,
)

TYPE_INT = "integer"


def suffixed(name: str, index: int) -> str:
    """Return the name of the ``index``-th (1-based) alternative: ``date-txt``, ``date-txt#2``..."""
    return name if index <= 1 else f"{name}#{index}"
