# Visits Feature - Models

from typing import Optional, List
from datetime import datetime
from beanie import Document, Indexed, PydanticObjectId
from pydantic import BaseModel, Field
from pymongo import ASCENDING, DESCENDING, IndexModel
from doctor_portal.shared.models import TimestampMixin


class PrescribedMedication(BaseModel):
    """Medication prescribed during a visit."""
    name: str = Field(..., min_length=1)
    dosage: str = Field(..., min_length=1)
    frequency: str = Field(..., min_length=1)
    duration: str = Field(..., min_length=1)


class Visit(Document, TimestampMixin):
    """
    Visit document model.
    A single consultation of a patient with their doctor.
    """
    
    patient: Indexed(PydanticObjectId)
    doctor: Indexed(PydanticObjectId)
    
    visit_date: datetime = Field(default_factory=datetime.utcnow)
    reason: str
    diagnosis: Optional[str] = None
    treatment_notes: Optional[str] = None
    prescribed_medications: List[PrescribedMedication] = Field(default_factory=list)
    next_appointment: Optional[datetime] = None
    
    class Settings:
        name = "visits"
        use_state_management = True
        indexes = [
            # Patient history, newest first
            IndexModel([("patient", ASCENDING), ("visit_date", DESCENDING)]),
            # Doctor's visits, newest first
            IndexModel([("doctor", ASCENDING), ("visit_date", DESCENDING)]),
        ]
