import os

# Must be set before report_it.config is imported.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "production"
os.environ["STATIC_DIR"] = "__no_static_dir__"

import pytest
from fastapi.testclient import TestClient

from report_it.database import SessionLocal, create_all_tables, drop_all_tables, dispose_engine
from report_it.main import app


@pytest.fixture
def client():
    # Entering the client runs startup (create tables) and shutdown
    # (dispose engine), which resets the in-memory database.
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db():
    create_all_tables()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        drop_all_tables()
        dispose_engine()


@pytest.fixture
def water_dept(client):
    response = client.post("/api/agencies", json={"name": "Water Dept"})
    assert response.status_code == 201
    return response.json()
