from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from report_it.config import settings

DATABASE_URL = settings.database_url


def build_engine(url: str, echo: bool = False):
    """Create an engine for ``url``.

    SQLite connections get foreign key enforcement turned on, and an
    in-memory SQLite database is pinned to a single shared connection.
    """
    engine_kwargs = {"echo": echo, "pool_pre_ping": True}

    backend = make_url(url).get_backend_name()
    if backend == "sqlite":
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        if make_url(url).database in (None, "", ":memory:"):
            engine_kwargs["poolclass"] = StaticPool
    else:
        engine_kwargs["pool_recycle"] = 3600

    engine = create_engine(url, **engine_kwargs)

    if backend == "sqlite":
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def build_session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


engine = build_engine(DATABASE_URL, echo=settings.DB_ECHO)
SessionLocal = build_session_factory(engine)
Base = declarative_base()
