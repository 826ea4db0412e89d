from fastapi.testclient import TestClient

from report_it.config import Settings
from report_it.database.connection import engine, SessionLocal
from report_it.main import create_app

NO_STATIC = "__no_static_dir__"


def test_app_reuses_process_engine_for_default_database():
    app = create_app(Settings(STATIC_DIR=NO_STATIC))

    assert app.state.engine is engine
    assert app.state.session_factory is SessionLocal


def test_app_builds_own_engine_for_other_database(tmp_path):
    db_file = tmp_path / "other.db"
    app = create_app(Settings(DATABASE_URL=f"sqlite:///{db_file}", STATIC_DIR=NO_STATIC))

    assert app.state.engine is not engine
    assert app.state.engine.url.database == str(db_file)

    with TestClient(app) as client:
        created = client.post("/api/agencies", json={"name": "Parks"})
        assert created.status_code == 201
        assert client.get("/api/agencies").json()[0]["name"] == "Parks"

    assert db_file.exists()
