# Visits Feature - Router

from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from beanie import PydanticObjectId
from doctor_portal.features.auth.dependencies import get_current_doctor_id
from doctor_portal.features.visits.schemas import (
    VisitCreate,
    VisitUpdate,
    VisitListResponse,
    VisitDetailResponse,
    VisitMutationResponse,
)
from doctor_portal.features.visits.service import VisitService
from doctor_portal.shared.schemas import MessageResponse


router = APIRouter(prefix="/visits", tags=["Visits"])


@router.get("", response_model=VisitListResponse)
async def list_visits(
    patient_id: Optional[str] = Query(None, alias="patientId"),
    doctor_id: PydanticObjectId = Depends(get_current_doctor_id)
):
    """
    List a patient's visits, newest first.
    
    - **patientId**: Patient id (required)
    """
    visits = await VisitService.get_visits_for_patient(patient_id, doctor_id)
    
    return VisitListResponse(visits=[VisitService.visit_to_response(v) for v in visits])


@router.post("", response_model=VisitMutationResponse, status_code=status.HTTP_201_CREATED)
async def create_visit(
    visit_data: VisitCreate,
    doctor_id: PydanticObjectId = Depends(get_current_doctor_id)
):
    """
    Record a visit for one of the doctor's patients.
    
    - **patient**: Patient id
    - **reason**: Reason for the visit
    - **visitDate**: Defaults to now
    """
    visit = await VisitService.create_visit(doctor_id, visit_data)
    
    return VisitMutationResponse(
        message="Visit created successfully",
        visit=VisitService.visit_to_response(visit),
    )


@router.get("/{visit_id}", response_model=VisitDetailResponse)
async def get_visit(
    visit_id: str,
    doctor_id: PydanticObjectId = Depends(get_current_doctor_id)
):
    """Get a single visit with the patient's name."""
    visit, patient = await VisitService.get_visit(visit_id, doctor_id)
    
    return VisitDetailResponse(visit=VisitService.visit_to_response(visit, patient))


@router.put("/{visit_id}", response_model=VisitMutationResponse)
async def update_visit(
    visit_id: str,
    update_data: VisitUpdate,
    doctor_id: PydanticObjectId = Depends(get_current_doctor_id)
):
    """Update a visit's clinical details."""
    visit = await VisitService.update_visit(visit_id, doctor_id, update_data)
    
    return VisitMutationResponse(
        message="Visit updated successfully",
        visit=VisitService.visit_to_response(visit),
    )


@router.delete("/{visit_id}", response_model=MessageResponse)
async def delete_visit(
    visit_id: str,
    doctor_id: PydanticObjectId = Depends(get_current_doctor_id)
):
    """Delete a visit."""
    await VisitService.delete_visit(visit_id, doctor_id)
    
    return MessageResponse(message="Visit deleted successfully")
