# Auth Feature - Router

from fastapi import APIRouter, Depends, status
from doctor_portal.features.auth.schemas import (
    SignupRequest,
    SignupResponse,
    LoginRequest,
    LoginResponse,
    DoctorMeResponse,
)
from doctor_portal.features.auth.service import AuthService
from doctor_portal.features.auth.dependencies import get_current_doctor
from doctor_portal.features.auth.models import Doctor


router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED)
async def signup(signup_data: SignupRequest):
    """
    Register a new doctor.
    
    - **name**: Doctor's full name
    - **email**: Doctor's email address (must be unused)
    - **password**: Account password
    - **specialty**: Medical specialty
    """
    doctor = await AuthService.signup(signup_data)
    
    return SignupResponse(
        message="Doctor registered successfully",
        doctor=AuthService.doctor_to_response(doctor),
    )


@router.post("/login", response_model=LoginResponse)
async def login(login_data: LoginRequest):
    """
    Authenticate a doctor and return a bearer token.
    
    - **email**: Doctor's email address
    - **password**: Doctor's password
    """
    doctor, access_token = await AuthService.login(login_data)
    
    return LoginResponse(
        message="Login successful",
        token=access_token,
        doctor=AuthService.doctor_to_response(doctor),
    )


@router.get("/me", response_model=DoctorMeResponse)
async def get_current_doctor_info(current_doctor: Doctor = Depends(get_current_doctor)):
    """
    Get the authenticated doctor's account.
    
    Requires authentication.
    """
    return DoctorMeResponse(doctor=AuthService.doctor_to_response(current_doctor))
