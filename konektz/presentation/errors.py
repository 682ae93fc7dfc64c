"""
Error normalization at the HTTP boundary.

Every failure leaves the API as one JSON body:

    {"status": "error", "message": "..."}

- DomainError subclasses carry their own meaning; STATUS_BY_ERROR gives the code
- Raw storage and JWT failures that escaped their adapters are translated
  with the adapters' own functions, never re-mapped here
- Anything else is a 500: a generic message in production, message plus
  method, path and stack trace elsewhere
"""

import logging
import traceback
from typing import Optional

import jwt
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from konektz.config.settings import Config
from konektz.domain.exceptions import (
    AccessDeniedError,
    AuthenticationError,
    ConflictError,
    DomainError,
    DomainValidationError,
    EntityNotFoundError,
    StorageUnavailableError,
)
from konektz.infrastructure.persistence.database import translate_storage_error
from konektz.infrastructure.security.jwt_credential_verifier import translate_token_error

logger = logging.getLogger(__name__)

# Checked in order; the first matching base class wins
STATUS_BY_ERROR: tuple[tuple[type[DomainError], int], ...] = (
    (DomainValidationError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (AccessDeniedError, status.HTTP_403_FORBIDDEN),
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (StorageUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def status_for(error: DomainError) -> int:
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def normalize_error(exc: BaseException) -> Optional[DomainError]:
    """Return the taxonomy variant for exc, or None if it is unexpected."""
    if isinstance(exc, DomainError):
        return exc
    if isinstance(exc, jwt.PyJWTError):
        return translate_token_error(exc)
    return translate_storage_error(exc)


def error_response(
    status_code: int, message: str, headers: Optional[dict] = None, **extra
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "error", "message": message, **extra},
        headers=headers,
    )


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    if location:
        return f"Invalid request: {location} {first.get('msg', '')}".strip()
    return f"Invalid request: {first.get('msg', '')}".strip()


def internal_error_response(
    request: Request, exc: BaseException, config: type[Config]
) -> JSONResponse:
    """500 body for a programmer fault; details only outside production."""
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}: "
        f"{type(exc).__name__}: {exc}",
        exc_info=exc,
    )
    if config.is_production():
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        str(exc) or INTERNAL_ERROR_MESSAGE,
        method=request.method,
        path=request.url.path,
        stack="".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
    )


def register_exception_handlers(app: FastAPI, config: type[Config]) -> None:
    """Install the handlers that turn every failure into the uniform body."""

    def domain_error_response(request: Request, error: DomainError) -> JSONResponse:
        status_code = status_for(error)
        logger.warning(
            f"{request.method} {request.url.path} -> {status_code} "
            f"{type(error).__name__}: {error.message}"
        )
        return error_response(status_code, error.message)

    async def known_error_handler(request: Request, exc: Exception):
        normalized = normalize_error(exc)
        if normalized is None:
            return internal_error_response(request, exc, config)
        return domain_error_response(request, normalized)

    for error_type in (DomainError, SQLAlchemyError, jwt.PyJWTError, ConnectionError):
        app.add_exception_handler(error_type, known_error_handler)

    # Validation error handler - malformed JSON bodies and wrong field types
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        message = _validation_message(exc)
        logger.warning(f"{request.method} {request.url.path} -> 400 {message}")
        return error_response(status.HTTP_400_BAD_REQUEST, message)

    # HTTP exception handler - unknown routes, wrong methods
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
            message = f"Route {request.method} {request.url.path} not found"
        else:
            message = str(exc.detail)
        return error_response(exc.status_code, message, headers=exc.headers)

    # Global exception handler - programmer faults raised outside CorrelationIdMiddleware
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        return internal_error_response(request, exc, config)
