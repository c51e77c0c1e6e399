# Patient Management Feature - Service

from typing import List
from datetime import date, datetime, time
from enum import Enum
from beanie import PydanticObjectId, UpdateResponse
from beanie.operators import Set, Unset
from pymongo.errors import DuplicateKeyError
from doctor_portal.features.patients.models import Patient
from doctor_portal.features.patients.schemas import (
    CreatePatientRequest,
    UpdatePatientRequest,
    PatientResponse,
    PatientSummary,
)
from doctor_portal.shared.identifiers import parse_object_id
from doctor_portal.shared.exceptions import ConflictException, NotFoundException
from doctor_portal.core.logging import logger


# Fields that may be cleared by sending null
NULLABLE_FIELDS = {"email", "medical_history"}

DUPLICATE_ON_CREATE = "Patient with this contact number or email already exists for this doctor."
DUPLICATE_ON_UPDATE = "Update failed: Duplicate contact number or email for this doctor."


def _stored_value(value):
    """Bring a schema value into the form the patients collection holds."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, date) and not isinstance(value, datetime):
        return datetime.combine(value, time.min)
    return value


class PatientService:
    """Service class for patient management operations."""
    
    @staticmethod
    def patient_to_response(patient: Patient) -> PatientResponse:
        """Convert Patient document to response schema."""
        return PatientResponse(
            id=str(patient.id),
            doctor=str(patient.doctor),
            first_name=patient.first_name,
            last_name=patient.last_name,
            date_of_birth=patient.date_of_birth,
            gender=patient.gender,
            contact_number=patient.contact_number,
            email=patient.email,
            address=patient.address,
            medical_history=patient.medical_history,
            created_at=patient.created_at,
            updated_at=patient.updated_at,
        )
    
    @staticmethod
    def patient_to_summary(patient: Patient, include_contact: bool = True) -> PatientSummary:
        return PatientSummary(
            id=str(patient.id),
            first_name=patient.first_name,
            last_name=patient.last_name,
            contact_number=patient.contact_number if include_contact else None,
        )
    
    @staticmethod
    async def find_owned_patient(patient_id: PydanticObjectId, doctor_id: PydanticObjectId) -> Patient:
        """
        Ownership check: fetch a patient only if it belongs to the doctor.
        
        Raises:
            NotFoundException: If no such patient exists for this doctor
        """
        patient = await Patient.find_one(
            Patient.id == patient_id,
            Patient.doctor == doctor_id,
        )
        if not patient:
            raise NotFoundException("Patient not found or access denied")
        return patient
    
    @staticmethod
    async def get_patients_by_doctor(doctor_id: PydanticObjectId) -> List[Patient]:
        """Get all patients for a doctor, ordered by last then first name."""
        return await Patient.find(Patient.doctor == doctor_id).sort(
            [("last_name", 1), ("first_name", 1)]
        ).to_list()
    
    @staticmethod
    async def create_patient(doctor_id: PydanticObjectId, request: CreatePatientRequest) -> Patient:
        """
        Create a new patient for a doctor.
        
        Duplicate contact numbers or emails for the same doctor are rejected
        by the unique indexes and surface as a 409.
        """
        patient = Patient(
            doctor=doctor_id,
            **request.model_dump(),
        )
        try:
            await patient.insert()
        except DuplicateKeyError:
            raise ConflictException(DUPLICATE_ON_CREATE)
        
        logger.info(f"Created patient {patient.id} for doctor {doctor_id}")
        return patient
    
    @staticmethod
    async def get_patient(patient_id: str, doctor_id: PydanticObjectId) -> Patient:
        oid = parse_object_id(patient_id, "Invalid Patient ID")
        return await PatientService.find_owned_patient(oid, doctor_id)
    
    @staticmethod
    async def update_patient(
        patient_id: str,
        doctor_id: PydanticObjectId,
        request: UpdatePatientRequest
    ) -> Patient:
        """
        Update patient information in a single doctor-scoped write.
        
        The owning doctor never changes. Cleared optional fields are unset
        so the partial email index stops seeing them.
        """
        oid = parse_object_id(patient_id, "Invalid Patient ID")
        
        to_set = {}
        to_unset = {}
        for field, value in request.model_dump(exclude_unset=True).items():
            if value is None:
                if field in NULLABLE_FIELDS:
                    to_unset[field] = ""
                continue
            to_set[field] = _stored_value(value)
        to_set["updated_at"] = datetime.utcnow()
        
        operators = [Set(to_set)]
        if to_unset:
            operators.append(Unset(to_unset))
        
        try:
            patient = await Patient.find_one(
                Patient.id == oid,
                Patient.doctor == doctor_id,
            ).update(*operators, response_type=UpdateResponse.NEW_DOCUMENT)
        except DuplicateKeyError:
            raise ConflictException(DUPLICATE_ON_UPDATE)
        
        if not patient:
            raise NotFoundException("Patient not found or access denied")
        
        logger.info(f"Updated patient {patient.id}")
        return patient
    
    @staticmethod
    async def delete_patient(patient_id: str, doctor_id: PydanticObjectId) -> None:
        """
        Permanently delete a patient.
        
        Visits and appointments referencing the patient are left in place.
        """
        patient = await PatientService.get_patient(patient_id, doctor_id)
        await patient.delete()
        
        logger.info(f"Deleted patient {patient.id} for doctor {doctor_id}")
