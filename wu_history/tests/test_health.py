from fastapi.testclient import TestClient

from wu_history.api.main import create_app
from wu_history.config import AppSettings


def test_health(client):
    resp = client.get("/health/")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    assert data["version"] == "0.1.0"
    assert data["uptime_s"] >= 0
    assert data["api_key_configured"] is True


def test_health_reports_missing_key():
    app = create_app(AppSettings(_env_file=None, wu_api_key="  ", log_level="WARNING"))
    resp = TestClient(app).get("/health/")
    assert resp.json()["api_key_configured"] is False


def test_request_id_header_on_health(client):
    r = client.get("/health/")
    assert "x-request-id" in r.headers and r.headers["x-request-id"]
    assert r.headers["x-request-id"] != client.get("/health/").headers["x-request-id"]
