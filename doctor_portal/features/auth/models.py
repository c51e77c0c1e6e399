# Auth Feature - Models

from beanie import Document, Indexed
from pydantic import EmailStr
from doctor_portal.shared.models import TimestampMixin


class Doctor(Document, TimestampMixin):
    """Doctor account document model."""
    
    name: str
    email: Indexed(EmailStr, unique=True)
    password_hash: str
    specialty: str
    
    class Settings:
        name = "doctors"
        use_state_management = True
    
    class Config:
        json_schema_extra = {
            "example": {
                "name": "Dr. Sarah Anderson",
                "email": "sarah@clinic.com",
                "specialty": "Cardiology",
            }
        }
