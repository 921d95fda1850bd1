"""Output formatting utilities for the monuments explorer.

Provides reusable functions for:
- Formatting acreage and counts for display
- Serializing chart series for Chart.js
- Building the presidential portrait URL
"""

import json
from typing import Any, Iterable, Optional
from urllib.parse import quote

from utils.config import DEFAULT_PORTRAIT_URL


def format_acres(value: Optional[float], precision: int = 0) -> str:
    """Format an acreage for display.

    Args:
        value: Acres affected (can be None or 0)
        precision: Decimal places (default: 0)

    Returns:
        Formatted string like "1,347" or "-" when unknown

    Examples:
        format_acres(1347.0) -> "1,347"
        format_acres(0.25, precision=2) -> "0.25"
        format_acres(None) -> "-"
    """
    if value is None or value == 0:
        return "-"
    return f"{value:,.{precision}f}"


def format_count(value: Optional[int]) -> str:
    """Format a count with thousands separator.

    Examples:
        format_count(1234567) -> "1,234,567"
        format_count(None) -> "-"
    """
    if value is None:
        return "-"
    return f"{value:,d}"


def chart_json(values: Iterable[Any]) -> str:
    """Serialize a chart array as JSON that is safe inside a <script> block."""
    return (
        json.dumps(list(values))
        .replace("<", "\\u003c")
        .replace(">", "\\u003e")
        .replace("&", "\\u0026")
    )


def chart_series(
    records: Iterable[Any],
    label_attr: str,
    value_attr: str = "acres_affected",
) -> tuple[str, str]:
    """Extract a (labels, values) pair of JSON arrays for a Chart.js chart.

    Labels are taken as-is from ``label_attr``; values are coerced to float
    with missing values as 0.

    Returns:
        Two JSON strings, e.g. ``("[1906, 1908]", "[1347.0, 808120.0]")``
    """
    labels: list = []
    values: list[float] = []
    for record in records:
        labels.append(getattr(record, label_attr))
        values.append(float(getattr(record, value_attr, 0) or 0))
    return chart_json(labels), chart_json(values)


def portrait_url(name: str, pattern: str = DEFAULT_PORTRAIT_URL) -> str:
    """Best-effort portrait URL for a president, keyed on the last name.

    The template hides the image when the URL does not resolve.

    Examples:
        portrait_url("Theodore Roosevelt") -> ".../99-roosevelt.jpg"
    """
    parts = name.split()
    last = parts[-1].lower() if parts else ""
    return pattern.format(last=quote(last))
