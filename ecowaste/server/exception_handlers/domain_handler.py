"""
Domain Exception Handlers.

Translates ``EcoWasteError`` subclasses raised by the storage and learning
layers into JSON error responses. The error message becomes ``detail``.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from ecowaste.core.errors import EcoWasteError, NotFoundError, QuizGenerationError
from ecowaste.core.logging_config import get_logger

logger = get_logger(__name__)


def status_code_for(exc: EcoWasteError) -> int:
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, QuizGenerationError):
        return status.HTTP_502_BAD_GATEWAY
    return status.HTTP_400_BAD_REQUEST


async def domain_exception_handler(request: Request, exc: EcoWasteError) -> JSONResponse:
    status_code = status_code_for(exc)
    logger.info(f"{request.method} {request.url.path} -> {status_code}: {type(exc).__name__}: {exc}")
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """Constraint violations, e.g. writing rows for a user that does not exist."""
    logger.warning(f"Integrity error in {request.method} {request.url.path}: {exc.orig}")
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": "Request conflicts with existing data or references a missing record"},
    )
