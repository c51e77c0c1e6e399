# Appointments Feature - Service

from typing import Dict, List, Optional
from beanie import PydanticObjectId
from beanie.operators import In
from doctor_portal.features.appointments.date_window import resolve_window
from doctor_portal.features.appointments.models import Appointment, AppointmentStatus
from doctor_portal.features.appointments.schemas import (
    AppointmentCreate,
    AppointmentUpdate,
    AppointmentResponse,
)
from doctor_portal.features.patients.models import Patient
from doctor_portal.features.patients.service import PatientService
from doctor_portal.shared.identifiers import is_object_id, parse_object_id
from doctor_portal.shared.exceptions import BadRequestException, NotFoundException
from doctor_portal.core.logging import logger


class AppointmentService:
    """Service class for appointment scheduling."""
    
    @staticmethod
    def appointment_to_response(
        appointment: Appointment,
        patient: Optional[Patient] = None
    ) -> AppointmentResponse:
        """Convert Appointment document to response schema, embedding the patient when given."""
        return AppointmentResponse(
            id=str(appointment.id),
            patient=PatientService.patient_to_summary(patient) if patient else str(appointment.patient),
            doctor=str(appointment.doctor),
            start_time=appointment.start_time,
            end_time=appointment.end_time,
            reason=appointment.reason,
            status=appointment.status,
            notes=appointment.notes,
            created_at=appointment.created_at,
            updated_at=appointment.updated_at,
        )
    
    @staticmethod
    async def load_patients(appointments: List[Appointment]) -> Dict[PydanticObjectId, Patient]:
        """Fetch the patients referenced by the appointments in one query."""
        patient_ids = list({a.patient for a in appointments})
        if not patient_ids:
            return {}
        patients = await Patient.find(In(Patient.id, patient_ids)).to_list()
        return {p.id: p for p in patients}
    
    @staticmethod
    async def _find_owned_appointment(appointment_id: str, doctor_id: PydanticObjectId) -> Appointment:
        oid = parse_object_id(appointment_id, "Invalid Appointment ID")
        appointment = await Appointment.find_one(
            Appointment.id == oid,
            Appointment.doctor == doctor_id,
        )
        if not appointment:
            raise NotFoundException("Appointment not found or access denied")
        return appointment
    
    @staticmethod
    async def list_appointments(
        doctor_id: PydanticObjectId,
        patient_id: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None
    ) -> List[Appointment]:
        """
        List the doctor's appointments ordered by start time.
        
        Args:
            doctor_id: Authenticated doctor
            patient_id: Only applied when it is a valid id
            start_date: ``YYYY-MM-DD``; alone it selects that single day
            end_date: ``YYYY-MM-DD``; only used together with start_date
            
        Raises:
            BadRequestException: If a date cannot be parsed
        """
        conditions = [Appointment.doctor == doctor_id]
        
        if is_object_id(patient_id):
            conditions.append(Appointment.patient == PydanticObjectId(patient_id))
        
        try:
            window = resolve_window(start_date, end_date)
        except ValueError:
            if end_date:
                raise BadRequestException(
                    "Invalid date format for startDate or endDate. Use YYYY-MM-DD."
                )
            raise BadRequestException("Invalid date format for startDate. Use YYYY-MM-DD.")
        
        if window:
            window_start, window_end = window
            conditions.append(Appointment.start_time >= window_start)
            conditions.append(Appointment.start_time <= window_end)
        
        return await Appointment.find(*conditions).sort(+Appointment.start_time).to_list()
    
    @staticmethod
    async def create_appointment(
        doctor_id: PydanticObjectId,
        appointment_data: AppointmentCreate
    ) -> tuple[Appointment, Patient]:
        """Book an appointment for one of the doctor's patients."""
        patient_oid = parse_object_id(appointment_data.patient, "Valid Patient ID is required")
        patient = await PatientService.find_owned_patient(patient_oid, doctor_id)
        
        appointment = Appointment(
            patient=patient_oid,
            doctor=doctor_id,
            start_time=appointment_data.start_time,
            end_time=appointment_data.end_time,
            reason=appointment_data.reason,
            notes=appointment_data.notes,
            status=AppointmentStatus.SCHEDULED,
        )
        await appointment.insert()
        
        logger.info(
            f"Scheduled appointment {appointment.id} for patient {patient_oid} "
            f"at {appointment.start_time.isoformat()} by doctor {doctor_id}"
        )
        return appointment, patient
    
    @staticmethod
    async def get_appointment(
        appointment_id: str,
        doctor_id: PydanticObjectId
    ) -> tuple[Appointment, Optional[Patient]]:
        appointment = await AppointmentService._find_owned_appointment(appointment_id, doctor_id)
        patient = await Patient.get(appointment.patient)
        return appointment, patient
    
    @staticmethod
    async def update_appointment(
        appointment_id: str,
        doctor_id: PydanticObjectId,
        update_data: AppointmentUpdate
    ) -> tuple[Appointment, Optional[Patient]]:
        """Reschedule or change the status of an appointment. Patient and doctor are kept."""
        appointment = await AppointmentService._find_owned_appointment(appointment_id, doctor_id)
        
        update_dict = update_data.model_dump(exclude_unset=True)
        
        for field, value in update_dict.items():
            if value is None and field != "notes":
                continue
            setattr(appointment, field, value)
        
        appointment.update_timestamp()
        await appointment.save()
        
        logger.info(f"Updated appointment {appointment.id} (status={appointment.status.value})")
        
        patient = await Patient.get(appointment.patient)
        return appointment, patient
    
    @staticmethod
    async def delete_appointment(appointment_id: str, doctor_id: PydanticObjectId) -> None:
        appointment = await AppointmentService._find_owned_appointment(appointment_id, doctor_id)
        await appointment.delete()
        
        logger.info(f"Deleted appointment {appointment.id} for doctor {doctor_id}")
