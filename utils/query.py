"""Read-only queries against the ``monuments`` table.

Every function takes an open connection and returns ``Monument`` records.
Routes call ``fetch_all`` once per request and hand the snapshot to the
navigation engine; the filtered fetches serve callers that only need one
group and do their own ordering.
"""

import sqlite3

from navigation.records import Monument
from utils.strings import escape_like

MONUMENTS_TABLE = "monuments"


def fetch_all(conn: sqlite3.Connection) -> list[Monument]:
    """Return every monument row as a record, in table order."""
    rows = conn.execute(f"SELECT * FROM {MONUMENTS_TABLE}").fetchall()
    return [Monument.from_row(r) for r in rows]


def fetch_by_owner(conn: sqlite3.Connection, owner: str) -> list[Monument]:
    """Rows whose ``pres_or_congress`` equals ``owner`` exactly."""
    rows = conn.execute(
        f"SELECT * FROM {MONUMENTS_TABLE} WHERE pres_or_congress = ?", (owner,)
    ).fetchall()
    return [Monument.from_row(r) for r in rows]


def fetch_by_year(conn: sqlite3.Connection, year: int) -> list[Monument]:
    """Rows proclaimed in ``year``."""
    rows = conn.execute(
        f"SELECT * FROM {MONUMENTS_TABLE} WHERE year = ?", (year,)
    ).fetchall()
    return [Monument.from_row(r) for r in rows]


def fetch_by_state(conn: sqlite3.Connection, state: str) -> list[Monument]:
    """Rows whose region list contains ``state`` anywhere in its text.

    Wildcards in ``state`` are escaped, so only literal containment counts.
    This is the coarse SQL prefilter; exact name matching is done by
    ``navigation.select_records``.
    """
    rows = conn.execute(
        f"SELECT * FROM {MONUMENTS_TABLE} WHERE states LIKE ? ESCAPE '\\'",
        (f"%{escape_like(state)}%",),
    ).fetchall()
    return [Monument.from_row(r) for r in rows]


def count_monuments(conn: sqlite3.Connection) -> int:
    """Number of rows in the monuments table."""
    return conn.execute(f"SELECT COUNT(*) FROM {MONUMENTS_TABLE}").fetchone()[0]
