# Visits Feature

from doctor_portal.features.visits.models import Visit
from doctor_portal.features.visits.router import router
from doctor_portal.features.visits.service import VisitService

__all__ = ["Visit", "router", "VisitService"]
