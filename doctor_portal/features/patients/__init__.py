# Patient Management Feature

from doctor_portal.features.patients.models import Patient
from doctor_portal.features.patients.router import router
from doctor_portal.features.patients.service import PatientService

__all__ = ["Patient", "router", "PatientService"]
