"""Shared utilities for the monuments explorer."""

# Pattern definitions
from utils.patterns import MONTH_DAY, NUMERIC_NOISE, LIKE_SPECIAL_CHARS

# String utilities
from utils.strings import (
    safe_float,
    safe_int,
    parse_month_day,
    split_region_list,
    escape_like,
)

# Output formatting
from utils.formatting import format_acres, format_count, chart_json, chart_series, portrait_url

# Configuration
from utils.config import (
    Config,
    AppConfig,
    DEFAULT_LEGISLATIVE_MARKER,
    STATE_MATCH_MODES,
)

__all__ = [
    # Patterns
    "MONTH_DAY",
    "NUMERIC_NOISE",
    "LIKE_SPECIAL_CHARS",
    # Strings
    "safe_float",
    "safe_int",
    "parse_month_day",
    "split_region_list",
    "escape_like",
    # Formatting
    "format_acres",
    "format_count",
    "chart_json",
    "chart_series",
    "portrait_url",
    # Config
    "Config",
    "AppConfig",
    "DEFAULT_LEGISLATIVE_MARKER",
    "STATE_MATCH_MODES",
]
