# Appointments Feature - Router

from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from beanie import PydanticObjectId
from doctor_portal.features.auth.dependencies import get_current_doctor_id
from doctor_portal.features.appointments.schemas import (
    AppointmentCreate,
    AppointmentUpdate,
    AppointmentListResponse,
    AppointmentDetailResponse,
    AppointmentMutationResponse,
)
from doctor_portal.features.appointments.service import AppointmentService
from doctor_portal.shared.schemas import MessageResponse


router = APIRouter(prefix="/appointments", tags=["Appointments"])


@router.get("", response_model=AppointmentListResponse)
async def list_appointments(
    patient_id: Optional[str] = Query(None, alias="patientId"),
    start_date: Optional[str] = Query(None, alias="startDate", description="YYYY-MM-DD"),
    end_date: Optional[str] = Query(None, alias="endDate", description="YYYY-MM-DD"),
    doctor_id: PydanticObjectId = Depends(get_current_doctor_id)
):
    """
    List the doctor's appointments, earliest first.
    
    - **patientId**: Only this patient's appointments
    - **startDate**: Alone, appointments starting on that day
    - **startDate** + **endDate**: Appointments starting within the inclusive day range
    """
    appointments = await AppointmentService.list_appointments(
        doctor_id=doctor_id,
        patient_id=patient_id,
        start_date=start_date,
        end_date=end_date,
    )
    patients = await AppointmentService.load_patients(appointments)
    
    return AppointmentListResponse(
        appointments=[
            AppointmentService.appointment_to_response(a, patients.get(a.patient))
            for a in appointments
        ]
    )


@router.post("", response_model=AppointmentMutationResponse, status_code=status.HTTP_201_CREATED)
async def create_appointment(
    appointment_data: AppointmentCreate,
    doctor_id: PydanticObjectId = Depends(get_current_doctor_id)
):
    """
    Schedule an appointment for one of the doctor's patients.
    
    - **patient**: Patient id
    - **startTime** / **endTime**: Appointment slot
    - **reason**: Reason for the appointment
    """
    appointment, patient = await AppointmentService.create_appointment(doctor_id, appointment_data)
    
    return AppointmentMutationResponse(
        message="Appointment created successfully",
        appointment=AppointmentService.appointment_to_response(appointment, patient),
    )


@router.get("/{appointment_id}", response_model=AppointmentDetailResponse)
async def get_appointment(
    appointment_id: str,
    doctor_id: PydanticObjectId = Depends(get_current_doctor_id)
):
    """Get a single appointment with patient details."""
    appointment, patient = await AppointmentService.get_appointment(appointment_id, doctor_id)
    
    return AppointmentDetailResponse(
        appointment=AppointmentService.appointment_to_response(appointment, patient)
    )


@router.put("/{appointment_id}", response_model=AppointmentMutationResponse)
async def update_appointment(
    appointment_id: str,
    update_data: AppointmentUpdate,
    doctor_id: PydanticObjectId = Depends(get_current_doctor_id)
):
    """Reschedule an appointment or change its status."""
    appointment, patient = await AppointmentService.update_appointment(
        appointment_id, doctor_id, update_data
    )
    
    return AppointmentMutationResponse(
        message="Appointment updated successfully",
        appointment=AppointmentService.appointment_to_response(appointment, patient),
    )


@router.delete("/{appointment_id}", response_model=MessageResponse)
async def delete_appointment(
    appointment_id: str,
    doctor_id: PydanticObjectId = Depends(get_current_doctor_id)
):
    """Delete an appointment."""
    await AppointmentService.delete_appointment(appointment_id, doctor_id)
    
    return MessageResponse(message="Appointment deleted successfully")
