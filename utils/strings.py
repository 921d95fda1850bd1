"""String processing utilities for the monuments explorer.

Every parser here is total: malformed input yields the documented default
instead of raising, so a bad row in the monuments table can never break
sorting or page rendering.
"""

from utils.patterns import LIKE_SPECIAL_CHARS, MONTH_DAY, NUMERIC_NOISE


def safe_float(val, default: float = 0.0) -> float:
    """Safely convert value to float with fallback default.

    Handles:
    - None, empty strings -> default
    - Numeric types -> float
    - Strings with thousands separators or an "acres" suffix
    - Invalid input -> default

    Args:
        val: Value to convert (any type)
        default: Value to return on failure (default: 0.0)

    Returns:
        float: Parsed value or default
    """
    if val is None or val == '':
        return default
    if isinstance(val, bool):
        return default
    if isinstance(val, (int, float)):
        return float(val)

    try:
        s = NUMERIC_NOISE.sub('', str(val).strip())
        return float(s) if s else default
    except (ValueError, TypeError):
        return default


def safe_int(val, default: int = 0) -> int:
    """Safely convert value to int with fallback default.

    Floats are truncated, numeric strings are parsed, everything else
    (None, "", "unknown", NaN) returns ``default``.

    Examples:
        safe_int("1906") -> 1906
        safe_int(1906.0) -> 1906
        safe_int(None) -> 0
        safe_int("c. 1906") -> 0
    """
    if val is None or val == '' or isinstance(val, bool):
        return default
    if isinstance(val, int):
        return val
    if isinstance(val, float):
        return int(val) if val == val and abs(val) != float("inf") else default
    try:
        return int(str(val).strip())
    except (ValueError, TypeError):
        pass
    f = safe_float(val, default=float("nan"))
    if f != f or abs(f) == float("inf"):
        return default
    return int(f)


def parse_month_day(text) -> tuple[int, int]:
    """Parse the month and day out of a partial date string.

    The monuments table stores dates as "M/D" or "M/D/YYYY"; the year lives
    in its own column.  Missing, non-numeric or out-of-range parts default
    to 1 so every record still has a position in the chronology.

    Examples:
        parse_month_day("9/24") -> (9, 24)
        parse_month_day("12/3/1906") -> (12, 3)
        parse_month_day("6") -> (6, 1)
        parse_month_day("") -> (1, 1)
        parse_month_day("13/40") -> (1, 1)
    """
    if text is None:
        return 1, 1
    match = MONTH_DAY.match(str(text))
    month_raw, day_raw = (match.groups() if match else (None, None))
    month = safe_int(month_raw, default=1)
    day = safe_int(day_raw, default=1)
    if not 1 <= month <= 12:
        month = 1
    if not 1 <= day <= 31:
        day = 1
    return month, day


def split_region_list(text) -> list[str]:
    """Split a comma-separated region list into trimmed, non-empty names.

    Order is preserved and duplicates are kept; callers that need a set
    deduplicate themselves.

    Examples:
        split_region_list("Wyoming, Montana") -> ["Wyoming", "Montana"]
        split_region_list(" , ") -> []
        split_region_list(None) -> []
    """
    if not text:
        return []
    return [part.strip() for part in str(text).split(",") if part.strip()]


def escape_like(value: str) -> str:
    """Escape ``%``, ``_`` and ``\\`` for use in a LIKE pattern with ESCAPE '\\'."""
    return LIKE_SPECIAL_CHARS.sub(r'\\\1', value)
