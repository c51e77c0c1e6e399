from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from doctor_portal import __version__
from doctor_portal.config import settings
from doctor_portal.database import Database
from doctor_portal.core.logging import logger
from doctor_portal.core.middleware import DoctorAuthMiddleware
from doctor_portal.shared.exceptions import register_exception_handlers
from doctor_portal.routers import (
    health_router,
    auth_router,
    patients_router,
    visits_router,
    appointments_router,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan events for FastAPI application."""
    # Startup
    logger.info("Starting Doctor Portal API...")
    await Database.connect_db()
    logger.info("Application started successfully")
    
    yield
    
    # Shutdown
    logger.info("Shutting down...")
    await Database.close_db()
    logger.info("Application shutdown complete")


# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    description="Practice management API for doctors: patients, visits and appointments",
    version=__version__,
    lifespan=lifespan,
)

register_exception_handlers(app)

# Bearer token gate for protected routes
app.add_middleware(DoctorAuthMiddleware, protected_prefixes=settings.protected_prefixes)

# Configure CORS (outermost, so preflight requests never reach the gate)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(health_router)
app.include_router(auth_router, prefix=settings.API_PREFIX)
app.include_router(patients_router, prefix=settings.API_PREFIX)
app.include_router(visits_router, prefix=settings.API_PREFIX)
app.include_router(appointments_router, prefix=settings.API_PREFIX)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": settings.APP_NAME,
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }
