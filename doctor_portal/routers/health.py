"""Health check endpoints."""

from fastapi import APIRouter

from doctor_portal import __version__
from doctor_portal.database import Database

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "doctor-portal",
        "version": __version__,
    }


@router.get("/ready")
async def readiness_check():
    """Readiness check; ready once the database client is connected."""
    return {"status": "ready" if Database.client is not None else "starting"}
