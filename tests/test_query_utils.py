"""Tests for utils/query.py and navigation/records.py: loading monument rows."""
import sqlite3

import pytest

from navigation import Monument
from utils.query import (
    count_monuments,
    fetch_all,
    fetch_by_owner,
    fetch_by_state,
    fetch_by_year,
)


class TestMonumentFromRow:
    def test_maps_pres_or_congress_to_owner(self):
        m = Monument.from_row({"current_name": "Devils Tower",
                               "pres_or_congress": "Theodore Roosevelt",
                               "year": 1906, "acres_affected": 1347})
        assert m.owner == "Theodore Roosevelt"
        assert m.year == 1906
        assert m.acres_affected == 1347.0

    def test_nulls_become_defaults(self):
        m = Monument.from_row({"current_name": None, "states": None,
                               "date": None, "year": None,
                               "acres_affected": None})
        assert m.current_name == ""
        assert m.states == ""
        assert m.year == 0
        assert m.acres_affected == 0.0
        assert m.ordering_key == (0, 1, 1)

    def test_missing_columns_ignored(self):
        m = Monument.from_row({"current_name": "Only Name", "extra": "x"})
        assert m.current_name == "Only Name"
        assert m.owner == ""

    def test_text_year(self):
        assert Monument.from_row({"year": "1908"}).year == 1908
        assert Monument.from_row({"year": "unknown"}).year == 0

    def test_ordering_key(self):
        m = Monument(year=1906, date="12/3")
        assert m.ordering_key == (1906, 12, 3)

    @pytest.mark.parametrize("date,year,expected", [
        ("9/24", 1906, "9/24 1906"),
        ("9/24/1906", 1906, "9/24/1906"),
        ("", 1906, "1906"),
        ("9/24", 0, "9/24"),
        ("", 0, ""),
    ])
    def test_display_date(self, date, year, expected):
        assert Monument(date=date, year=year).display_date == expected

    def test_state_list(self):
        assert Monument(states="Wyoming, Montana").state_list == ["Wyoming", "Montana"]

    def test_frozen(self):
        m = Monument(current_name="x")
        with pytest.raises(Exception):
            m.current_name = "y"

    def test_to_dict_round_trips_fields(self):
        m = Monument(current_name="x", year=1906)
        assert Monument(**m.to_dict()) == m


class TestFetch:
    def test_fetch_all(self, monuments_conn):
        records = fetch_all(monuments_conn)
        assert len(records) == 9
        assert all(isinstance(r, Monument) for r in records)
        assert records[0].current_name == "Devils Tower"

    def test_fetch_by_owner(self, monuments_conn):
        records = fetch_by_owner(monuments_conn, "Calvin Coolidge")
        assert {r.current_name for r in records} == {"Craters of the Moon", "Unknown Site"}

    def test_fetch_by_owner_is_exact(self, monuments_conn):
        assert fetch_by_owner(monuments_conn, "Roosevelt") == []

    def test_fetch_by_year(self, monuments_conn):
        records = fetch_by_year(monuments_conn, 1908)
        assert [r.current_name for r in records] == ["Grand Canyon"]

    def test_fetch_by_state_is_containment(self, monuments_conn):
        names = {r.current_name for r in fetch_by_state(monuments_conn, "Virginia")}
        assert names == {"George Washington Birthplace", "Harpers Ferry"}

    def test_fetch_by_state_escapes_wildcards(self, monuments_conn):
        assert fetch_by_state(monuments_conn, "%") == []
        assert fetch_by_state(monuments_conn, "_") == []

    def test_count(self, monuments_conn):
        assert count_monuments(monuments_conn) == 9

    def test_empty_table(self, empty_db):
        conn = sqlite3.connect(str(empty_db))
        conn.row_factory = sqlite3.Row
        try:
            assert fetch_all(conn) == []
            assert count_monuments(conn) == 0
        finally:
            conn.close()
