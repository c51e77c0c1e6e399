# Authentication Feature

from doctor_portal.features.auth.models import Doctor
from doctor_portal.features.auth.router import router
from doctor_portal.features.auth.service import AuthService

__all__ = ["Doctor", "router", "AuthService"]
