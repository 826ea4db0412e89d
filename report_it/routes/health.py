# report_it/routes/health.py
import logging
import time

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from report_it.database import get_db, ping_database

logger = logging.getLogger(__name__)

router = APIRouter()

STARTED_AT = time.monotonic()

@router.get("", summary="Process liveness")
def health():
    return {"status": "ok", "uptime": round(time.monotonic() - STARTED_AT, 3)}

@router.get("/db", summary="Database connectivity probe")
def health_db(db: Session = Depends(get_db)):
    try:
        ping_database(db)
    except SQLAlchemyError as e:
        logger.error("Database probe failed: %s", e)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "error", "database": "down", "error": str(e)},
        )
    return {"status": "ok", "database": "up"}
