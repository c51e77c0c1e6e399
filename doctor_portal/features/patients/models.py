# Patient Management Feature - Models

from typing import Optional
from datetime import date
from enum import Enum
from beanie import Document, Indexed, PydanticObjectId
from pymongo import ASCENDING, IndexModel
from doctor_portal.shared.models import TimestampMixin


class Gender(str, Enum):
    """Patient gender."""
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class Patient(Document, TimestampMixin):
    """Patient record owned by a single doctor."""
    
    # Owning doctor
    doctor: Indexed(PydanticObjectId)
    
    # Personal information
    first_name: str
    last_name: str
    date_of_birth: date
    gender: Gender
    contact_number: str
    email: Optional[str] = None
    address: str
    
    # Free-text medical history
    medical_history: Optional[str] = None
    
    class Settings:
        name = "patients"
        use_state_management = True
        # Absent emails are not stored so the partial email index skips them
        keep_nulls = False
        indexes = [
            IndexModel(
                [("doctor", ASCENDING), ("contact_number", ASCENDING)],
                name="doctor_contact_number_unique",
                unique=True,
            ),
            IndexModel(
                [("doctor", ASCENDING), ("email", ASCENDING)],
                name="doctor_email_unique",
                unique=True,
                partialFilterExpression={"email": {"$exists": True}},
            ),
        ]
    
    class Config:
        json_schema_extra = {
            "example": {
                "first_name": "Sarah",
                "last_name": "Johnson",
                "date_of_birth": "1990-05-15",
                "gender": "Female",
                "contact_number": "+1234567890",
                "email": "sarah.johnson@email.com",
                "address": "123 Main St",
                "medical_history": "Type 2 Diabetes",
            }
        }
