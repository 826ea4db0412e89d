import logging
from typing import Generator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.orm import Session

from report_it.database.connection import engine, SessionLocal, Base

logger = logging.getLogger(__name__)


# Request-scoped session dependency
def get_db(request: Request) -> Generator[Session, None, None]:
    """Yield a session from the app's session factory.

    Rolls back on error and always closes the session.
    """
    session_factory = getattr(request.app.state, "session_factory", SessionLocal)
    db = session_factory()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def _import_models():
    # Registers every mapped class on Base.metadata.
    from report_it.agency import agency_models  # noqa: F401
    from report_it.complaint import complaint_models  # noqa: F401


def create_all_tables(bind=None):
    bind = bind or engine
    _import_models()
    logger.info("Creating tables on %s", bind.url.render_as_string(hide_password=True))
    Base.metadata.create_all(bind=bind)


def drop_all_tables(bind=None):
    _import_models()
    logger.warning("Dropping all tables")
    Base.metadata.drop_all(bind=bind or engine)


def ping_database(db: Session) -> None:
    """Run a trivial query; raises if the store is unreachable."""
    db.execute(text("SELECT 1"))


def dispose_engine(bind=None):
    logger.info("Releasing database connections")
    (bind or engine).dispose()
