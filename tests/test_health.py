import os

os.environ.setdefault("DB_BACKEND", "sqlite")

from starlette.testclient import TestClient

from core.db import DB


def test_health_reports_database(client):
    response = client.get("/health")

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "healthy"
    assert payload["database"]["ok"] is True


def test_health_unavailable_without_database():
    from app.main import app

    previous_engine = DB.engine
    DB.engine = None
    try:
        response = TestClient(app).get("/health")
    finally:
        DB.engine = previous_engine

    assert response.status_code == 503
    assert response.json()["detail"]["database"]["error"] == "db_not_initialized"
