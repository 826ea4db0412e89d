"""
Complaint operations.

A complaint must point at an existing agency, both when it is filed and
when it is moved to another agency. Status is free text.
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from report_it.agency.agency_service import find_agency, AGENCY_NOT_FOUND
from report_it.complaint.complaint_models import Complaint, DEFAULT_STATUS
from report_it.complaint.complaint_schemas import ComplaintCreate, ComplaintUpdate
from report_it.common.store import commit
from report_it.exceptions import ValidationError, NotFoundError

logger = logging.getLogger(__name__)

COMPLAINT_NOT_FOUND = "Complaint not found"
UPDATABLE_FIELDS = ("title", "description", "category", "status", "agency_id")


def list_complaints(db: Session) -> List[Complaint]:
    return list(
        db.scalars(
            select(Complaint)
            .options(joinedload(Complaint.agency))
            .order_by(Complaint.id)
        ).all()
    )


def find_complaint(db: Session, complaint_id: int) -> Optional[Complaint]:
    return db.get(Complaint, complaint_id)


def get_complaint(db: Session, complaint_id: int) -> Complaint:
    complaint = db.scalars(
        select(Complaint)
        .options(joinedload(Complaint.agency))
        .where(Complaint.id == complaint_id)
    ).first()
    if complaint is None:
        raise NotFoundError(COMPLAINT_NOT_FOUND)
    return complaint


def _require_agency(db: Session, agency_id: int) -> None:
    if find_agency(db, agency_id) is None:
        raise NotFoundError(AGENCY_NOT_FOUND)


def create_complaint(db: Session, payload: ComplaintCreate) -> Complaint:
    if not (payload.title and payload.description and payload.category and payload.agency_id):
        raise ValidationError("All fields are required")

    _require_agency(db, payload.agency_id)

    complaint = Complaint(
        title=payload.title,
        description=payload.description,
        category=payload.category,
        status=DEFAULT_STATUS,
        agency_id=payload.agency_id,
    )
    db.add(complaint)
    commit(db)
    db.refresh(complaint)
    logger.info("Created complaint %s for agency %s", complaint.id, complaint.agency_id)
    return complaint


def update_complaint(db: Session, complaint_id: int, payload: ComplaintUpdate) -> Complaint:
    complaint = find_complaint(db, complaint_id)
    if complaint is None:
        raise NotFoundError(COMPLAINT_NOT_FOUND)

    # Omitted and null fields keep their current value
    values = {
        field: value
        for field, value in payload.model_dump(exclude_unset=True).items()
        if field in UPDATABLE_FIELDS and value is not None
    }

    if "agency_id" in values and values["agency_id"] != complaint.agency_id:
        _require_agency(db, values["agency_id"])

    changed = {k: v for k, v in values.items() if getattr(complaint, k) != v}
    if not changed:
        return complaint

    for field, value in changed.items():
        setattr(complaint, field, value)
    commit(db)
    db.refresh(complaint)
    logger.info("Updated complaint %s: %s", complaint.id, ", ".join(sorted(changed)))
    return complaint


def delete_complaint(db: Session, complaint_id: int) -> None:
    complaint = find_complaint(db, complaint_id)
    if complaint is None:
        raise NotFoundError(COMPLAINT_NOT_FOUND)

    db.delete(complaint)
    commit(db)
    logger.info("Deleted complaint %s", complaint_id)
