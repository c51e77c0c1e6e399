# Auth Feature - Schemas

from pydantic import BaseModel, EmailStr, Field
from datetime import datetime
from doctor_portal.shared.schemas import CamelModel


# Request Schemas
class SignupRequest(BaseModel):
    """Signup request schema."""
    
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=100)
    specialty: str = Field(..., min_length=1, max_length=100)


class LoginRequest(BaseModel):
    """Login request schema."""
    
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


# Response Schemas
class DoctorResponse(CamelModel):
    """Doctor response schema. Never carries the password hash."""
    
    id: str
    name: str
    email: str
    specialty: str
    created_at: datetime
    updated_at: datetime


class SignupResponse(BaseModel):
    """Signup response schema."""
    
    message: str
    doctor: DoctorResponse


class LoginResponse(BaseModel):
    """Login response schema."""
    
    message: str
    token: str
    doctor: DoctorResponse


class DoctorMeResponse(BaseModel):
    """Current doctor response schema."""
    
    doctor: DoctorResponse
