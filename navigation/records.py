"""
Monument record model.

A ``Monument`` is one row of the ``monuments`` table, parsed once with the
total parsers from ``utils.strings`` so that later stages (sorting,
grouping, charting) never deal with NULLs or malformed text.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any

from utils.strings import parse_month_day, safe_float, safe_int, split_region_list


@dataclass(frozen=True)
class Monument:
    """One monument entry. Immutable once loaded."""

    current_name: str = ""
    original_name: str = ""
    owner: str = ""                 # column pres_or_congress
    states: str = ""                # comma-separated region list
    current_agency: str = ""
    action: str = ""
    date: str = ""                  # "M/D" or "M/D/YYYY", may be empty
    year: int = 0                   # 0 = unknown
    acres_affected: float = 0.0

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Monument":
        """Build a record from a ``sqlite3.Row`` or plain dict.

        Unknown columns are ignored and missing ones fall back to the field
        defaults.
        """
        keys = set(row.keys())

        def text(column: str) -> str:
            value = row[column] if column in keys else None
            return "" if value is None else str(value)

        return cls(
            current_name=text("current_name"),
            original_name=text("original_name"),
            owner=text("pres_or_congress"),
            states=text("states"),
            current_agency=text("current_agency"),
            action=text("action"),
            date=text("date"),
            year=safe_int(row["year"] if "year" in keys else None),
            acres_affected=safe_float(
                row["acres_affected"] if "acres_affected" in keys else None
            ),
        )

    @property
    def state_list(self) -> list[str]:
        """Trimmed, non-empty region names in the order they are listed."""
        return split_region_list(self.states)

    @property
    def ordering_key(self) -> tuple[int, int, int]:
        """Linearized instant ``(year, month, day)``; month/day default to 1."""
        month, day = parse_month_day(self.date)
        return self.year, month, day

    @property
    def display_date(self) -> str:
        """Date as shown in tables; the year is appended only when ``date`` lacks one."""
        if self.date.count("/") >= 2 or not self.year:
            return self.date
        return f"{self.date} {self.year}".strip()

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
