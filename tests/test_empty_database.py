"""
Behaviour with an empty monuments table or no database file at all.

Each test builds its own app so the module-level database path is
pointed at the right file for that test.
"""
import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from utils.config import AppConfig


@pytest.fixture()
def empty_client(empty_db):
    with TestClient(create_app(db_path=empty_db, config=AppConfig()),
                    raise_server_exceptions=False) as c:
        yield c


@pytest.fixture()
def missing_client(tmp_path):
    with TestClient(create_app(db_path=tmp_path / "missing.sqlite3", config=AppConfig()),
                    raise_server_exceptions=False) as c:
        yield c


class TestEmptyTable:
    @pytest.mark.parametrize("path,message", [
        ("/president", "No president data found"),
        ("/states", "No state data found"),
        ("/years", "No year data found"),
    ])
    def test_index_pages_404(self, empty_client, path, message):
        resp = empty_client.get(path, follow_redirects=False)
        assert resp.status_code == 404
        assert message in resp.text

    def test_detail_page_404(self, empty_client):
        resp = empty_client.get("/year/1906")
        assert resp.status_code == 404
        assert "no data for year 1906" in resp.text

    def test_timeline_page_404(self, empty_client):
        assert empty_client.get("/timeline").status_code == 404

    def test_reference_is_empty_list(self, empty_client):
        resp = empty_client.get("/api/v1/reference/states")
        assert resp.status_code == 200
        assert resp.json() == {"dimension": "state", "keys": []}

    def test_timeline_api_is_empty_list(self, empty_client):
        assert empty_client.get("/api/v1/aggregations/timeline").json() == []

    def test_health_reports_zero(self, empty_client):
        data = empty_client.get("/health").json()
        assert data["status"] == "ok"
        assert data["monuments"] == 0


class TestMissingDatabase:
    def test_page_503(self, missing_client):
        resp = missing_client.get("/president", follow_redirects=False)
        assert resp.status_code == 503
        assert "Database not found" in resp.text

    def test_api_503_json(self, missing_client):
        resp = missing_client.get("/api/v1/reference/years")
        assert resp.status_code == 503
        assert resp.json()["status_code"] == 503

    def test_health_503(self, missing_client):
        resp = missing_client.get("/health")
        assert resp.status_code == 503
        assert resp.json()["status"] == "no_database"
