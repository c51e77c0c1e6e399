"""Doctor Portal - practice management API server."""

import uvicorn

from doctor_portal.config import settings
from doctor_portal.main import app


if __name__ == "__main__":
    uvicorn.run(
        "doctor_portal.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.DEBUG,
    )
