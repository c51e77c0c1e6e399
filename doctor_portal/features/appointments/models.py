# Appointments Feature - Models

from typing import Optional
from datetime import datetime
from enum import Enum
from beanie import Document, Indexed, PydanticObjectId
from pymongo import ASCENDING, IndexModel
from doctor_portal.shared.models import TimestampMixin


class AppointmentStatus(str, Enum):
    """Lifecycle status of an appointment."""
    SCHEDULED = "Scheduled"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"
    RESCHEDULED = "Rescheduled"


class Appointment(Document, TimestampMixin):
    """
    Appointment document model.
    
    end_time is not checked against start_time, and overlapping
    appointments for the same doctor are not prevented.
    """
    
    patient: Indexed(PydanticObjectId)
    doctor: Indexed(PydanticObjectId)
    
    start_time: datetime
    end_time: datetime
    reason: str
    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    notes: Optional[str] = None
    
    class Settings:
        name = "appointments"
        use_state_management = True
        indexes = [
            # Doctor calendar by time range
            IndexModel([("doctor", ASCENDING), ("start_time", ASCENDING), ("end_time", ASCENDING)]),
            # Patient appointments by time
            IndexModel([("patient", ASCENDING), ("start_time", ASCENDING)]),
            IndexModel([("start_time", ASCENDING)]),
            IndexModel([("status", ASCENDING)]),
        ]
