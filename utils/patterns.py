"""Pre-compiled regex patterns for the monuments explorer.

All patterns are compiled once at module import.

Usage:
    from utils.patterns import MONTH_DAY

    match = MONTH_DAY.match("9/24")
"""

import re

# Partial dates as stored in the monuments table: "M/D" or "M/D/YYYY".
# Missing or non-numeric parts are handled by utils.strings.parse_month_day.
MONTH_DAY = re.compile(r'^\s*(\d+)?\s*(?:/\s*(\d+)?)?')

# Thousands separators and unit suffixes stripped during numeric conversion
NUMERIC_NOISE = re.compile(r'[,_\s]|acres?$', re.IGNORECASE)

# Characters that carry meaning inside a SQL LIKE pattern
LIKE_SPECIAL_CHARS = re.compile(r'([\\%_])')
