from typing import Optional
from datetime import datetime
from report_it.common.base_schema import CamelModel


class ComplaintCreate(CamelModel):
    # Presence is checked by the service so a missing field maps to a 400.
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    agency_id: Optional[int] = None


class ComplaintUpdate(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    status: Optional[str] = None
    agency_id: Optional[int] = None


class ComplaintAgency(CamelModel):
    id: int
    name: str
    created_at: datetime
    updated_at: datetime


class ComplaintResponse(CamelModel):
    id: int
    title: str
    description: str
    category: str
    status: str
    agency_id: int
    created_at: datetime
    updated_at: datetime


class ComplaintDetailResponse(ComplaintResponse):
    agency: ComplaintAgency
