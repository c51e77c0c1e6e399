# Auth Feature - Dependencies

from beanie import PydanticObjectId
from fastapi import Depends, Header
from typing import Optional
from bson import ObjectId
from doctor_portal.features.auth.models import Doctor
from doctor_portal.features.auth.service import AuthService
from doctor_portal.shared.exceptions import CredentialsException


async def get_current_doctor_id(
    x_doctor_id: Optional[str] = Header(None, alias="X-Doctor-ID", include_in_schema=False)
) -> PydanticObjectId:
    """
    Dependency returning the doctor id injected by the request gate.
    
    Raises:
        CredentialsException: If the header is absent or not an ObjectId
    """
    if not x_doctor_id or not ObjectId.is_valid(x_doctor_id):
        raise CredentialsException("Unauthorized or Invalid Doctor ID")
    return PydanticObjectId(x_doctor_id)


async def get_current_doctor(
    doctor_id: PydanticObjectId = Depends(get_current_doctor_id)
) -> Doctor:
    """
    Dependency to get the current authenticated doctor document.
    
    Raises:
        CredentialsException: If the doctor no longer exists
    """
    doctor = await AuthService.get_doctor_by_id(doctor_id)
    if doctor is None:
        raise CredentialsException("Doctor not found")
    return doctor
