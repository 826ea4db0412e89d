# report_it/routes/agencies.py
from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from report_it.database import get_db
from report_it.routes.body import body_of
from report_it.agency import agency_service
from report_it.agency.agency_schemas import (
    AgencyCreate,
    AgencyUpdate,
    AgencyResponse,
    AgencyDetailResponse,
)

router = APIRouter()

@router.get("", response_model=List[AgencyResponse], summary="List agencies")
def list_agencies(db: Session = Depends(get_db)):
    return agency_service.list_agencies(db)

@router.get("/{agency_id}", response_model=AgencyDetailResponse, summary="Get an agency with its complaints")
def get_agency(agency_id: int, db: Session = Depends(get_db)):
    return agency_service.get_agency(db, agency_id)

@router.post("", response_model=AgencyResponse, status_code=status.HTTP_201_CREATED, summary="Create an agency")
def create_agency(payload: AgencyCreate = Depends(body_of(AgencyCreate)), db: Session = Depends(get_db)):
    return agency_service.create_agency(db, payload)

@router.put("/{agency_id}", response_model=AgencyResponse, summary="Rename an agency")
def update_agency(agency_id: int, payload: AgencyUpdate = Depends(body_of(AgencyUpdate)), db: Session = Depends(get_db)):
    return agency_service.update_agency(db, agency_id, payload)

@router.delete("/{agency_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete an agency without complaints")
def delete_agency(agency_id: int, db: Session = Depends(get_db)):
    agency_service.delete_agency(db, agency_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
