"""MongoDB database connection manager."""

from motor.motor_asyncio import AsyncIOMotorClient
from beanie import init_beanie
from typing import Optional

from doctor_portal.config import settings
from doctor_portal.core.logging import logger


class Database:
    """MongoDB database connection manager."""
    
    client: Optional[AsyncIOMotorClient] = None
    
    @classmethod
    async def connect_db(cls):
        """Connect to MongoDB and initialize Beanie."""
        cls.client = AsyncIOMotorClient(settings.MONGODB_URL)
        
        # Import document models
        from doctor_portal.features.auth.models import Doctor
        from doctor_portal.features.patients.models import Patient
        from doctor_portal.features.visits.models import Visit
        from doctor_portal.features.appointments.models import Appointment
        
        await init_beanie(
            database=cls.client[settings.DATABASE_NAME],
            document_models=[
                Doctor,
                Patient,
                Visit,
                Appointment,
            ]
        )
        
        logger.info(f"Connected to MongoDB database: {settings.DATABASE_NAME}")
    
    @classmethod
    async def close_db(cls):
        """Close MongoDB connection."""
        if cls.client:
            cls.client.close()
            cls.client = None
            logger.info("Closed MongoDB connection")
