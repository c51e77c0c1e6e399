"""FastAPI routers."""

from doctor_portal.routers.health import router as health_router
from doctor_portal.features.auth.router import router as auth_router
from doctor_portal.features.patients.router import router as patients_router
from doctor_portal.features.visits.router import router as visits_router
from doctor_portal.features.appointments.router import router as appointments_router

__all__ = [
    "health_router",
    "auth_router",
    "patients_router",
    "visits_router",
    "appointments_router",
]
