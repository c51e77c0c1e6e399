# Auth Feature - Service

from typing import Optional
from beanie import PydanticObjectId
from doctor_portal.features.auth.models import Doctor
from doctor_portal.features.auth.schemas import SignupRequest, LoginRequest, DoctorResponse
from doctor_portal.core.security import verify_password, get_password_hash, create_access_token
from doctor_portal.shared.exceptions import CredentialsException, ConflictException
from doctor_portal.core.logging import logger


class AuthService:
    """Authentication service for handling auth business logic."""
    
    @staticmethod
    def doctor_to_response(doctor: Doctor) -> DoctorResponse:
        """Convert Doctor document to response schema, dropping the hash."""
        return DoctorResponse(
            id=str(doctor.id),
            name=doctor.name,
            email=doctor.email,
            specialty=doctor.specialty,
            created_at=doctor.created_at,
            updated_at=doctor.updated_at,
        )
    
    @staticmethod
    async def signup(signup_data: SignupRequest) -> Doctor:
        """Register a new doctor account."""
        existing_doctor = await Doctor.find_one(Doctor.email == signup_data.email)
        if existing_doctor:
            raise ConflictException("Email already in use")
        
        doctor = Doctor(
            name=signup_data.name,
            email=signup_data.email,
            password_hash=get_password_hash(signup_data.password),
            specialty=signup_data.specialty,
        )
        await doctor.insert()
        
        logger.info(f"Registered doctor {doctor.id} ({doctor.email})")
        
        return doctor
    
    @staticmethod
    async def login(login_data: LoginRequest) -> tuple[Doctor, str]:
        """
        Authenticate a doctor and issue an access token.
        
        Unknown email and wrong password fail identically.
        
        Returns:
            tuple: (doctor, access_token)
        """
        doctor = await Doctor.find_one(Doctor.email == login_data.email)
        if not doctor:
            raise CredentialsException("Invalid credentials")
        
        if not verify_password(login_data.password, doctor.password_hash):
            raise CredentialsException("Invalid credentials")
        
        access_token = create_access_token(
            data={"id": str(doctor.id), "email": doctor.email, "name": doctor.name}
        )
        
        return doctor, access_token
    
    @staticmethod
    async def get_doctor_by_id(doctor_id: PydanticObjectId) -> Optional[Doctor]:
        """Get a doctor by their MongoDB _id."""
        return await Doctor.get(doctor_id)
