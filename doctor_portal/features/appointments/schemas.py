# Appointments Feature - Schemas

from typing import Optional, List, Union
from datetime import datetime
from pydantic import Field
from doctor_portal.features.appointments.models import AppointmentStatus
from doctor_portal.features.patients.schemas import PatientSummary
from doctor_portal.shared.schemas import CamelModel


class AppointmentCreate(CamelModel):
    """Schema for booking an appointment. New appointments are always Scheduled."""
    patient: str = Field(..., description="Patient id")
    start_time: datetime
    end_time: datetime
    reason: str = Field(..., min_length=1)
    notes: Optional[str] = None
    
    class Config:
        json_schema_extra = {
            "example": {
                "patient": "65f1c2a9e4b0a1b2c3d4e5f6",
                "startTime": "2024-01-15T10:00:00",
                "endTime": "2024-01-15T10:30:00",
                "reason": "Follow-up consultation",
            }
        }


class AppointmentUpdate(CamelModel):
    """Schema for rescheduling or changing the status of an appointment."""
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    reason: Optional[str] = Field(None, min_length=1)
    status: Optional[AppointmentStatus] = None
    notes: Optional[str] = None


class AppointmentResponse(CamelModel):
    """Schema for appointment response."""
    id: str
    patient: Union[PatientSummary, str]
    doctor: str
    start_time: datetime
    end_time: datetime
    reason: str
    status: AppointmentStatus
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class AppointmentListResponse(CamelModel):
    appointments: List[AppointmentResponse]


class AppointmentDetailResponse(CamelModel):
    appointment: AppointmentResponse


class AppointmentMutationResponse(CamelModel):
    message: str
    appointment: AppointmentResponse
