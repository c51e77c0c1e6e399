"""
Request gate for protected API routes.

Verifies the bearer token on protected paths and forwards the doctor
identifier it carries to route handlers as the ``X-Doctor-ID`` header.
"""

from typing import Iterable, List

from fastapi import status
from fastapi.responses import JSONResponse
from fastapi.security.utils import get_authorization_scheme_param
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from doctor_portal.core.logging import logger
from doctor_portal.core.security import InvalidTokenError, TokenExpiredError, decode_token


DOCTOR_ID_HEADER = "X-Doctor-ID"
_DOCTOR_ID_HEADER_RAW = DOCTOR_ID_HEADER.lower().encode("latin-1")


def _unauthorized(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"message": message},
        headers={"WWW-Authenticate": "Bearer"},
    )


class DoctorAuthMiddleware(BaseHTTPMiddleware):
    """Bearer token gate that injects the trusted doctor header."""
    
    def __init__(self, app: ASGIApp, protected_prefixes: Iterable[str]):
        super().__init__(app)
        self.protected_prefixes: List[str] = list(protected_prefixes)
    
    def is_protected(self, path: str) -> bool:
        return any(path.startswith(prefix) for prefix in self.protected_prefixes)
    
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        # The doctor header may only ever come from this gate
        headers = [
            (name, value) for name, value in request.scope["headers"]
            if name != _DOCTOR_ID_HEADER_RAW
        ]
        
        if not self.is_protected(request.url.path):
            request.scope["headers"] = headers
            return await call_next(request)
        
        scheme, token = get_authorization_scheme_param(request.headers.get("Authorization"))
        if not token or scheme.lower() != "bearer":
            logger.warning(f"Missing bearer token for {request.method} {request.url.path}")
            return _unauthorized("Authentication token missing")
        
        try:
            payload = decode_token(token)
        except TokenExpiredError:
            logger.warning(f"Expired token for {request.method} {request.url.path}")
            return _unauthorized("Token expired")
        except InvalidTokenError as e:
            logger.warning(f"Invalid token for {request.method} {request.url.path}: {e}")
            return _unauthorized("Invalid or expired token")
        
        doctor_id = payload.get("id")
        if doctor_id:
            headers.append((_DOCTOR_ID_HEADER_RAW, str(doctor_id).encode("latin-1")))
        else:
            logger.warning("Token payload carries no doctor id")
        
        request.scope["headers"] = headers
        return await call_next(request)
