# Visits Feature - Service

from typing import List, Optional
from beanie import PydanticObjectId
from doctor_portal.features.visits.models import Visit, PrescribedMedication
from doctor_portal.features.visits.schemas import VisitCreate, VisitUpdate, VisitResponse
from doctor_portal.features.patients.models import Patient
from doctor_portal.features.patients.service import PatientService
from doctor_portal.shared.identifiers import parse_object_id
from doctor_portal.shared.exceptions import NotFoundException
from doctor_portal.core.logging import logger


NULLABLE_FIELDS = {"diagnosis", "treatment_notes", "next_appointment"}


class VisitService:
    """Service class for visit operations."""
    
    @staticmethod
    def visit_to_response(visit: Visit, patient: Optional[Patient] = None) -> VisitResponse:
        """Convert Visit document to response schema, embedding the patient when given."""
        return VisitResponse(
            id=str(visit.id),
            patient=(
                PatientService.patient_to_summary(patient, include_contact=False)
                if patient else str(visit.patient)
            ),
            doctor=str(visit.doctor),
            visit_date=visit.visit_date,
            reason=visit.reason,
            diagnosis=visit.diagnosis,
            treatment_notes=visit.treatment_notes,
            prescribed_medications=[m.model_dump() for m in visit.prescribed_medications],
            next_appointment=visit.next_appointment,
            created_at=visit.created_at,
            updated_at=visit.updated_at,
        )
    
    @staticmethod
    async def _find_owned_visit(visit_id: str, doctor_id: PydanticObjectId) -> Visit:
        oid = parse_object_id(visit_id, "Invalid Visit ID")
        visit = await Visit.find_one(Visit.id == oid, Visit.doctor == doctor_id)
        if not visit:
            raise NotFoundException("Visit not found or access denied")
        return visit
    
    @staticmethod
    async def get_visits_for_patient(
        patient_id: Optional[str],
        doctor_id: PydanticObjectId
    ) -> List[Visit]:
        """
        Get a patient's visits recorded by this doctor, newest first.
        
        The patient must belong to the doctor.
        """
        patient_oid = parse_object_id(
            patient_id, "Valid Patient ID is required as a query parameter"
        )
        await PatientService.find_owned_patient(patient_oid, doctor_id)
        
        return await Visit.find(
            Visit.patient == patient_oid,
            Visit.doctor == doctor_id,
        ).sort(-Visit.visit_date).to_list()
    
    @staticmethod
    async def create_visit(doctor_id: PydanticObjectId, visit_data: VisitCreate) -> Visit:
        """Record a visit after checking the patient belongs to the doctor."""
        patient_oid = parse_object_id(
            visit_data.patient, "Valid Patient ID is required in the request body"
        )
        await PatientService.find_owned_patient(patient_oid, doctor_id)
        
        fields = visit_data.model_dump(exclude={"patient"}, exclude_none=True)
        visit = Visit(patient=patient_oid, doctor=doctor_id, **fields)
        await visit.insert()
        
        logger.info(f"Created visit {visit.id} for patient {patient_oid} by doctor {doctor_id}")
        return visit
    
    @staticmethod
    async def get_visit(visit_id: str, doctor_id: PydanticObjectId) -> tuple[Visit, Optional[Patient]]:
        """Get a visit together with its patient (None if the patient was deleted)."""
        visit = await VisitService._find_owned_visit(visit_id, doctor_id)
        patient = await Patient.get(visit.patient)
        return visit, patient
    
    @staticmethod
    async def update_visit(
        visit_id: str,
        doctor_id: PydanticObjectId,
        update_data: VisitUpdate
    ) -> Visit:
        """Update a visit. Its patient and doctor references are kept."""
        visit = await VisitService._find_owned_visit(visit_id, doctor_id)
        
        update_dict = update_data.model_dump(exclude_unset=True)
        
        if update_dict.get("prescribed_medications") is not None:
            update_dict["prescribed_medications"] = [
                PrescribedMedication(**med)
                for med in update_dict["prescribed_medications"]
            ]
        
        for field, value in update_dict.items():
            if value is None and field not in NULLABLE_FIELDS:
                continue
            setattr(visit, field, value)
        
        visit.update_timestamp()
        await visit.save()
        
        logger.info(f"Updated visit {visit.id}")
        return visit
    
    @staticmethod
    async def delete_visit(visit_id: str, doctor_id: PydanticObjectId) -> None:
        visit = await VisitService._find_owned_visit(visit_id, doctor_id)
        await visit.delete()
        
        logger.info(f"Deleted visit {visit.id} for doctor {doctor_id}")
