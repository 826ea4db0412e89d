from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from report_it.common.base_model import BaseModel

DEFAULT_STATUS = "open"


class Complaint(BaseModel):
    __tablename__ = "complaints"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String(100), nullable=False, index=True)
    status = Column(String(50), default=DEFAULT_STATUS, nullable=False, index=True)
    agency_id = Column(
        Integer,
        ForeignKey("agencies.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    agency = relationship("Agency", back_populates="complaints")

    def __repr__(self):
        return f"<Complaint(id={self.id}, status='{self.status}')>"
