import pytest
from sqlalchemy import select, func

from report_it.agency import agency_service
from report_it.agency.agency_models import Agency
from report_it.agency.agency_schemas import AgencyCreate, AgencyUpdate
from report_it.complaint import complaint_service
from report_it.complaint.complaint_models import Complaint
from report_it.complaint.complaint_schemas import ComplaintCreate
from report_it.exceptions import ValidationError, NotFoundError, ConflictError


def _count(db, model):
    return db.scalar(select(func.count()).select_from(model))


def _file_complaint(db, agency_id):
    return complaint_service.create_complaint(
        db,
        ComplaintCreate(
            title="Leak",
            description="Water pouring from a hydrant",
            category="water",
            agency_id=agency_id,
        ),
    )


@pytest.mark.parametrize("name", [None, "", "   "])
def test_create_agency_requires_name_and_persists_nothing(db, name):
    with pytest.raises(ValidationError) as exc_info:
        agency_service.create_agency(db, AgencyCreate(name=name))

    assert exc_info.value.message == "Agency name is required"
    assert _count(db, Agency) == 0


def test_create_then_get_returns_agency_without_complaints(db):
    created = agency_service.create_agency(db, AgencyCreate(name="X"))

    fetched = agency_service.get_agency(db, created.id)

    assert fetched.id == created.id
    assert fetched.name == "X"
    assert fetched.complaints == []


def test_get_missing_agency_raises_not_found(db):
    with pytest.raises(NotFoundError):
        agency_service.get_agency(db, 42)


def test_list_agencies_orders_by_id(db):
    for name in ("Roads", "Parks", "Water"):
        agency_service.create_agency(db, AgencyCreate(name=name))

    names = [a.name for a in agency_service.list_agencies(db)]

    assert names == ["Roads", "Parks", "Water"]


def test_update_agency_renames(db):
    agency = agency_service.create_agency(db, AgencyCreate(name="Roads"))

    updated = agency_service.update_agency(db, agency.id, AgencyUpdate(name="Roads & Bridges"))

    assert updated.name == "Roads & Bridges"


def test_update_agency_without_fields_is_noop(db):
    agency = agency_service.create_agency(db, AgencyCreate(name="Roads"))
    before = (agency.name, agency.updated_at)

    updated = agency_service.update_agency(db, agency.id, AgencyUpdate())

    assert (updated.name, updated.updated_at) == before


def test_update_missing_agency_raises_not_found(db):
    with pytest.raises(NotFoundError):
        agency_service.update_agency(db, 7, AgencyUpdate(name="Nobody"))


def test_delete_agency_without_complaints(db):
    agency = agency_service.create_agency(db, AgencyCreate(name="Parks"))

    agency_service.delete_agency(db, agency.id)

    assert agency_service.find_agency(db, agency.id) is None


def test_delete_agency_with_complaints_is_blocked(db):
    agency = agency_service.create_agency(db, AgencyCreate(name="Water Dept"))
    complaint = _file_complaint(db, agency.id)

    with pytest.raises(ConflictError) as exc_info:
        agency_service.delete_agency(db, agency.id)

    assert "existing complaints" in exc_info.value.message
    assert agency_service.find_agency(db, agency.id) is not None
    assert complaint_service.find_complaint(db, complaint.id) is not None


def test_delete_agency_after_its_complaints_are_removed(db):
    agency = agency_service.create_agency(db, AgencyCreate(name="Water Dept"))
    complaint = _file_complaint(db, agency.id)

    complaint_service.delete_complaint(db, complaint.id)
    agency_service.delete_agency(db, agency.id)

    assert _count(db, Agency) == 0
    assert _count(db, Complaint) == 0


def test_delete_missing_agency_raises_not_found(db):
    with pytest.raises(NotFoundError):
        agency_service.delete_agency(db, 3)


def test_create_agency_keeps_surrounding_whitespace(db):
    agency = agency_service.create_agency(db, AgencyCreate(name=" Roads "))

    assert agency_service.get_agency(db, agency.id).name == " Roads "


def test_update_agency_with_blank_name_keeps_current(db):
    agency = agency_service.create_agency(db, AgencyCreate(name="Roads"))

    updated = agency_service.update_agency(db, agency.id, AgencyUpdate(name="   "))

    assert updated.name == "Roads"
