# Patient Management Feature - Schemas

from typing import Optional, List
from datetime import date, datetime
from pydantic import EmailStr, Field, field_validator
from doctor_portal.features.patients.models import Gender
from doctor_portal.shared.schemas import CamelModel


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


# ============== Create Patient ==============

class CreatePatientRequest(CamelModel):
    """Request schema for creating a new patient."""
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    date_of_birth: date
    gender: Gender
    contact_number: str = Field(..., min_length=1, max_length=30)
    email: Optional[EmailStr] = None
    address: str = Field(..., min_length=1, max_length=500)
    medical_history: Optional[str] = None
    
    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        return _blank_to_none(v)


# ============== Update Patient ==============

class UpdatePatientRequest(CamelModel):
    """
    Request schema for updating patient information.
    
    The owning doctor is not part of this schema, so a ``doctor`` key in
    the body is ignored.
    """
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    date_of_birth: Optional[date] = None
    gender: Optional[Gender] = None
    contact_number: Optional[str] = Field(None, min_length=1, max_length=30)
    email: Optional[EmailStr] = None
    address: Optional[str] = Field(None, min_length=1, max_length=500)
    medical_history: Optional[str] = None
    
    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        return _blank_to_none(v)


# ============== Patient Response ==============

class PatientResponse(CamelModel):
    """Response schema for patient data."""
    id: str
    doctor: str
    first_name: str
    last_name: str
    date_of_birth: date
    gender: Gender
    contact_number: str
    email: Optional[str] = None
    address: str
    medical_history: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class PatientSummary(CamelModel):
    """Patient fields embedded in visit and appointment responses."""
    id: str
    first_name: str
    last_name: str
    contact_number: Optional[str] = None


class PatientListResponse(CamelModel):
    """Response schema for list of patients."""
    patients: List[PatientResponse]


class PatientDetailResponse(CamelModel):
    """Response schema for a single patient."""
    patient: PatientResponse


class PatientMutationResponse(CamelModel):
    """Response schema for create/update."""
    message: str
    patient: PatientResponse
