"""
Pytest fixtures for the monuments explorer tests.

Provides a small deterministic monuments table covering the awkward cases:
a legislative (Congress) owner, multi-state region lists, a "Virginia" /
"West Virginia" pair for substring matching, two actions on the same day,
and an undated row with a blank region list.
"""

import sqlite3
import sys
from pathlib import Path

import pytest

_PROJECT_ROOT = str(Path(__file__).resolve().parent.parent)
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)

from navigation import Monument  # noqa: E402


MONUMENTS_SCHEMA = """
    CREATE TABLE monuments (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        current_name TEXT, original_name TEXT, states TEXT,
        current_agency TEXT, action TEXT, date TEXT, year INTEGER,
        acres_affected REAL, pres_or_congress TEXT
    );
"""

# (current_name, original_name, states, current_agency, action, date, year,
#  acres_affected, pres_or_congress)
MONUMENT_ROWS = [
    ("Devils Tower", "Devils Tower", "Wyoming", "NPS", "Establishment",
     "9/24", 1906, 1347.0, "Theodore Roosevelt"),
    ("El Morro", "El Morro", "New Mexico", "NPS", "Establishment",
     "12/8", 1906, 160.0, "Theodore Roosevelt"),
    ("Montezuma Castle", "Montezuma Castle", "Arizona", "NPS", "Establishment",
     "12/8", 1906, 161.0, "Theodore Roosevelt"),
    ("Grand Canyon", "Grand Canyon", "Arizona", "NPS", "Establishment",
     "1/11", 1908, 808120.0, "Theodore Roosevelt"),
    ("Yellowstone Lands", "Yellowstone Lands", "Wyoming, Montana", "NPS", "Transfer",
     "6/8", 1906, 0.0, "Congress"),
    ("Craters of the Moon", "Craters of the Moon", "Idaho", "NPS", "Establishment",
     "5/2", 1924, 22651.0, "Calvin Coolidge"),
    ("George Washington Birthplace", "Wakefield", "Virginia", "NPS", "Establishment",
     "1/23", 1930, 394.0, "Congress"),
    ("Harpers Ferry", "Harpers Ferry", "West Virginia, Maryland", "NPS", "Establishment",
     "6/30", 1944, 1500.0, "Franklin D. Roosevelt"),
    ("Unknown Site", "", "  ", "BLM", "Establishment",
     "", None, None, "Calvin Coolidge"),
]


def create_monuments_db(path: Path, rows: list[tuple] = MONUMENT_ROWS) -> Path:
    """Write a monuments database at ``path`` containing ``rows``."""
    conn = sqlite3.connect(str(path))
    conn.executescript(MONUMENTS_SCHEMA)
    conn.executemany(
        "INSERT INTO monuments (current_name, original_name, states, "
        "current_agency, action, date, year, acres_affected, pres_or_congress) "
        "VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)",
        rows,
    )
    conn.commit()
    conn.close()
    return path


@pytest.fixture(scope="session")
def monuments_db(tmp_path_factory) -> Path:
    """Path to a SQLite file pre-populated with MONUMENT_ROWS."""
    return create_monuments_db(tmp_path_factory.mktemp("monuments") / "monuments.sqlite3")


@pytest.fixture()
def empty_db(tmp_path) -> Path:
    """Path to a SQLite file with the monuments table but no rows."""
    return create_monuments_db(tmp_path / "empty.sqlite3", rows=[])


@pytest.fixture()
def monuments_conn(monuments_db):
    """Read-write connection to the fixture database with Row factory."""
    conn = sqlite3.connect(str(monuments_db))
    conn.row_factory = sqlite3.Row
    yield conn
    conn.close()


@pytest.fixture()
def sample_records() -> list[Monument]:
    """MONUMENT_ROWS as records, in table order."""
    columns = ("current_name", "original_name", "states", "current_agency",
               "action", "date", "year", "acres_affected", "pres_or_congress")
    return [Monument.from_row(dict(zip(columns, row))) for row in MONUMENT_ROWS]
