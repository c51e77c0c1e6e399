# Patient Management Feature - Router

from fastapi import APIRouter, Depends, status
from beanie import PydanticObjectId
from doctor_portal.features.patients.schemas import (
    CreatePatientRequest,
    UpdatePatientRequest,
    PatientListResponse,
    PatientDetailResponse,
    PatientMutationResponse,
)
from doctor_portal.features.patients.service import PatientService
from doctor_portal.features.auth.dependencies import get_current_doctor_id
from doctor_portal.shared.schemas import MessageResponse


router = APIRouter(prefix="/patients", tags=["Patients"])


@router.get("", response_model=PatientListResponse)
async def list_patients(doctor_id: PydanticObjectId = Depends(get_current_doctor_id)):
    """List all patients of the authenticated doctor, sorted by name."""
    patients = await PatientService.get_patients_by_doctor(doctor_id)
    
    return PatientListResponse(
        patients=[PatientService.patient_to_response(p) for p in patients]
    )


@router.post("", response_model=PatientMutationResponse, status_code=status.HTTP_201_CREATED)
async def create_patient(
    request: CreatePatientRequest,
    doctor_id: PydanticObjectId = Depends(get_current_doctor_id)
):
    """
    Create a new patient for the authenticated doctor.
    
    Contact number, and email when given, must be unique among this
    doctor's patients.
    """
    patient = await PatientService.create_patient(doctor_id, request)
    
    return PatientMutationResponse(
        message="Patient created successfully",
        patient=PatientService.patient_to_response(patient),
    )


@router.get("/{patient_id}", response_model=PatientDetailResponse)
async def get_patient(
    patient_id: str,
    doctor_id: PydanticObjectId = Depends(get_current_doctor_id)
):
    """Get a specific patient by id."""
    patient = await PatientService.get_patient(patient_id, doctor_id)
    
    return PatientDetailResponse(patient=PatientService.patient_to_response(patient))


@router.put("/{patient_id}", response_model=PatientMutationResponse)
async def update_patient(
    patient_id: str,
    request: UpdatePatientRequest,
    doctor_id: PydanticObjectId = Depends(get_current_doctor_id)
):
    """Update a patient's information."""
    patient = await PatientService.update_patient(patient_id, doctor_id, request)
    
    return PatientMutationResponse(
        message="Patient updated successfully",
        patient=PatientService.patient_to_response(patient),
    )


@router.delete("/{patient_id}", response_model=MessageResponse)
async def delete_patient(
    patient_id: str,
    doctor_id: PydanticObjectId = Depends(get_current_doctor_id)
):
    """
    Permanently delete a patient.
    
    The patient's visits and appointments are not removed.
    """
    await PatientService.delete_patient(patient_id, doctor_id)
    
    return MessageResponse(message="Patient deleted successfully")
