from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from report_it.common.base_model import BaseModel


class Agency(BaseModel):
    __tablename__ = "agencies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)

    complaints = relationship(
        "Complaint",
        back_populates="agency",
        order_by="Complaint.id",
        passive_deletes="all",
    )

    def __repr__(self):
        return f"<Agency(id={self.id}, name='{self.name}')>"
