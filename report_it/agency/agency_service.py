"""
Agency operations.

Agencies own complaints by reference only: an agency that still has
complaints cannot be deleted, the caller has to move or remove them first.
"""

import logging
from typing import List, Optional

from sqlalchemy import select, func
from sqlalchemy.orm import Session, selectinload

from report_it.agency.agency_models import Agency
from report_it.agency.agency_schemas import AgencyCreate, AgencyUpdate
from report_it.complaint.complaint_models import Complaint
from report_it.common.store import commit
from report_it.exceptions import ValidationError, NotFoundError, ConflictError

logger = logging.getLogger(__name__)

AGENCY_NOT_FOUND = "Agency not found"


def list_agencies(db: Session) -> List[Agency]:
    return list(db.scalars(select(Agency).order_by(Agency.id)).all())


def find_agency(db: Session, agency_id: int) -> Optional[Agency]:
    return db.get(Agency, agency_id)


def get_agency(db: Session, agency_id: int) -> Agency:
    """Fetch an agency with its complaints loaded."""
    agency = db.scalars(
        select(Agency)
        .options(selectinload(Agency.complaints))
        .where(Agency.id == agency_id)
    ).first()
    if agency is None:
        raise NotFoundError(AGENCY_NOT_FOUND)
    return agency


def create_agency(db: Session, payload: AgencyCreate) -> Agency:
    name = payload.name
    if not name or not name.strip():
        raise ValidationError("Agency name is required")

    agency = Agency(name=name)
    db.add(agency)
    commit(db)
    db.refresh(agency)
    logger.info("Created agency %s", agency.id)
    return agency


def update_agency(db: Session, agency_id: int, payload: AgencyUpdate) -> Agency:
    agency = find_agency(db, agency_id)
    if agency is None:
        raise NotFoundError(AGENCY_NOT_FOUND)

    # Blank names keep the current value
    name = payload.name
    if name and name.strip() and name != agency.name:
        agency.name = name
        commit(db)
        db.refresh(agency)
        logger.info("Renamed agency %s", agency.id)
    return agency


def count_complaints(db: Session, agency_id: int) -> int:
    return db.scalar(
        select(func.count())
        .select_from(Complaint)
        .where(Complaint.agency_id == agency_id)
    )


def delete_agency(db: Session, agency_id: int) -> None:
    agency = find_agency(db, agency_id)
    if agency is None:
        raise NotFoundError(AGENCY_NOT_FOUND)

    if count_complaints(db, agency_id) > 0:
        raise ConflictError(
            "Cannot delete agency with existing complaints. "
            "Transfer or delete complaints first."
        )

    db.delete(agency)
    commit(db)
    logger.info("Deleted agency %s", agency_id)
