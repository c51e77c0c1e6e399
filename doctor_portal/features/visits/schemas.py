# Visits Feature - Schemas

from typing import Optional, List, Union
from datetime import datetime
from pydantic import Field
from doctor_portal.features.patients.schemas import PatientSummary
from doctor_portal.shared.schemas import CamelModel


class MedicationSchema(CamelModel):
    """Schema for a prescribed medication."""
    name: str = Field(..., min_length=1)
    dosage: str = Field(..., min_length=1)
    frequency: str = Field(..., min_length=1)
    duration: str = Field(..., min_length=1)


class VisitCreate(CamelModel):
    """Schema for recording a new visit."""
    patient: str = Field(..., description="Patient id")
    visit_date: Optional[datetime] = None
    reason: str = Field(..., min_length=1)
    diagnosis: Optional[str] = None
    treatment_notes: Optional[str] = None
    prescribed_medications: List[MedicationSchema] = Field(default_factory=list)
    next_appointment: Optional[datetime] = None


class VisitUpdate(CamelModel):
    """Schema for updating a visit. Patient and doctor cannot be changed."""
    visit_date: Optional[datetime] = None
    reason: Optional[str] = Field(None, min_length=1)
    diagnosis: Optional[str] = None
    treatment_notes: Optional[str] = None
    prescribed_medications: Optional[List[MedicationSchema]] = None
    next_appointment: Optional[datetime] = None


class VisitResponse(CamelModel):
    """Schema for visit response."""
    id: str
    patient: Union[PatientSummary, str]
    doctor: str
    visit_date: datetime
    reason: str
    diagnosis: Optional[str] = None
    treatment_notes: Optional[str] = None
    prescribed_medications: List[MedicationSchema] = []
    next_appointment: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class VisitListResponse(CamelModel):
    visits: List[VisitResponse]


class VisitDetailResponse(CamelModel):
    visit: VisitResponse


class VisitMutationResponse(CamelModel):
    message: str
    visit: VisitResponse
