import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from report_it.exceptions import StoreError

logger = logging.getLogger(__name__)


def commit(db: Session) -> None:
    """Commit the session, rolling back and raising ``StoreError`` on failure."""
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Commit failed")
        raise StoreError(str(e)) from e
