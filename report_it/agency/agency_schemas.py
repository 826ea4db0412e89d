from typing import List, Optional
from datetime import datetime
from report_it.common.base_schema import CamelModel
from report_it.complaint.complaint_schemas import ComplaintResponse


class AgencyCreate(CamelModel):
    name: Optional[str] = None


class AgencyUpdate(CamelModel):
    name: Optional[str] = None


class AgencyResponse(CamelModel):
    id: int
    name: str
    created_at: datetime
    updated_at: datetime


class AgencyDetailResponse(AgencyResponse):
    complaints: List[ComplaintResponse] = []
