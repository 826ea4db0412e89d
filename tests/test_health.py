from unittest.mock import patch

from sqlalchemy.exc import OperationalError


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["uptime"] >= 0


def test_health_db(client):
    response = client.get("/health/db")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database": "up"}


def test_health_db_reports_outage(client):
    failure = OperationalError("SELECT 1", {}, Exception("connection refused"))
    with patch("report_it.routes.health.ping_database", side_effect=failure):
        response = client.get("/health/db")

    assert response.status_code == 503
    body = response.json()
    assert body["status"] == "error"
    assert body["database"] == "down"
    assert "connection refused" in body["error"]


def test_unknown_route_uses_error_body(client):
    response = client.get("/api/nothing-here")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_root_without_static_dir(client):
    response = client.get("/")

    assert response.status_code == 200
    assert "message" in response.json()
