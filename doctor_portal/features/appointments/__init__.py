# Appointments Feature

from doctor_portal.features.appointments.models import Appointment, AppointmentStatus
from doctor_portal.features.appointments.router import router
from doctor_portal.features.appointments.service import AppointmentService

__all__ = ["Appointment", "AppointmentStatus", "router", "AppointmentService"]
