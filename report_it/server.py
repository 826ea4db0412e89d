"""Process entry point.

Runs the API under uvicorn. Signals are handled by uvicorn, which runs the
app's shutdown hook before exiting. If the server itself fails, the error is
logged, pooled connections are released and the process exits with status 1.

Usage:
    report-it
    python -m report_it.server
"""
import logging
import sys

from uvicorn import Config, Server

from report_it.config import settings
from report_it.database import dispose_engine
from report_it.logging_config import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    setup_logging(settings.LOG_LEVEL)
    config = Config(
        app="report_it.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=False,
        log_level=settings.LOG_LEVEL.lower(),
    )
    server = Server(config)
    logger.info("Server running on port %s", settings.PORT)
    try:
        server.run()
    except Exception:
        logger.exception("Server crashed")
        dispose_engine()
        sys.exit(1)


if __name__ == "__main__":
    main()
