# report_it/routes/complaints.py
from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from report_it.database import get_db
from report_it.routes.body import body_of
from report_it.complaint import complaint_service
from report_it.complaint.complaint_schemas import (
    ComplaintCreate,
    ComplaintUpdate,
    ComplaintResponse,
    ComplaintDetailResponse,
)

router = APIRouter()

@router.get("", response_model=List[ComplaintDetailResponse], summary="List complaints with their agency")
def list_complaints(db: Session = Depends(get_db)):
    return complaint_service.list_complaints(db)

@router.get("/{complaint_id}", response_model=ComplaintDetailResponse, summary="Get complaint details")
def get_complaint(complaint_id: int, db: Session = Depends(get_db)):
    return complaint_service.get_complaint(db, complaint_id)

@router.post("", response_model=ComplaintResponse, status_code=status.HTTP_201_CREATED, summary="File a new complaint")
def create_complaint(payload: ComplaintCreate = Depends(body_of(ComplaintCreate)), db: Session = Depends(get_db)):
    return complaint_service.create_complaint(db, payload)

@router.put("/{complaint_id}", response_model=ComplaintResponse, summary="Update a complaint")
def update_complaint(complaint_id: int, payload: ComplaintUpdate = Depends(body_of(ComplaintUpdate)), db: Session = Depends(get_db)):
    return complaint_service.update_complaint(db, complaint_id, payload)

@router.delete("/{complaint_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a complaint")
def delete_complaint(complaint_id: int, db: Session = Depends(get_db)):
    complaint_service.delete_complaint(db, complaint_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
