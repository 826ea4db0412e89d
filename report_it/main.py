import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from report_it.config import settings as default_settings, Settings
from report_it.database import create_all_tables, dispose_engine
from report_it.database.connection import (
    DATABASE_URL,
    engine,
    SessionLocal,
    build_engine,
    build_session_factory,
)
from report_it.logging_config import setup_logging
from report_it.middleware import install_middleware, register_exception_handlers
from report_it.routes import agencies_router, complaints_router, health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_all_tables(app.state.engine)
    yield
    dispose_engine(app.state.engine)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the app from ``settings``.

    Settings naming the process-wide database reuse its engine; any other
    database URL gets an engine of its own, created here and disposed on
    shutdown.
    """
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Citizen complaints and the agencies responsible for them.",
        lifespan=lifespan,
    )

    if settings.database_url == DATABASE_URL:
        app.state.engine = engine
        app.state.session_factory = SessionLocal
    else:
        app.state.engine = build_engine(settings.database_url, echo=settings.DB_ECHO)
        app.state.session_factory = build_session_factory(app.state.engine)

    install_middleware(app, settings)
    register_exception_handlers(app)

    app.include_router(agencies_router, prefix="/api/agencies", tags=["Agency"])
    app.include_router(complaints_router, prefix="/api/complaints", tags=["Complaint"])
    app.include_router(health_router, prefix="/health", tags=["Health"])

    static_dir = Path(settings.STATIC_DIR)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
        logger.info("Serving static files from %s", static_dir.resolve())
    else:
        @app.get("/", include_in_schema=False)
        def root():
            return {"message": f"Welcome to the {settings.PROJECT_NAME}!"}

    return app


app = create_app()
