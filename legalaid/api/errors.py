"""
Exception handlers.

Maps the application exception hierarchy, request validation failures and
database errors onto the ``{success, message, errors}`` error body.

Dependencies: fastapi, sqlalchemy, legalaid.core.exceptions
System role: HTTP error translation
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from legalaid.core.exceptions import (
    LegalAidException,
    PersistenceError,
    UpstreamUnavailableError,
    ValidationError,
)
from legalaid.models.common import ErrorResponse, FieldError
from legalaid.observability.log_utils import log_failure

logger = logging.getLogger(__name__)

_LOCATION_ROOTS = {"body", "query", "path", "header", "form", "cookie"}
GENERIC_SERVER_ERROR = "An internal error occurred. Please try again later."


def _error_response(status_code: int, message: str, errors: list[FieldError] | None = None) -> JSONResponse:
    body = ErrorResponse(message=message, errors=errors)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def _field_path(location: tuple) -> str | None:
    parts = [str(part) for part in location if part not in _LOCATION_ROOTS]
    return ".".join(parts) or None


async def handle_app_exception(request: Request, exc: LegalAidException) -> JSONResponse:
    if isinstance(exc, UpstreamUnavailableError):
        logger.warning("Upstream unavailable on %s: %s", request.url.path, exc)
        return _error_response(exc.status_code, exc.public_message)

    if isinstance(exc, PersistenceError):
        log_failure(logger, "Persistence failure", exc, path=request.url.path)
        return _error_response(exc.status_code, GENERIC_SERVER_ERROR)

    errors = None
    if isinstance(exc, ValidationError):
        errors = [FieldError(field=exc.field, message=exc.message)]

    if exc.status_code >= 500:
        log_failure(logger, "Request failed", exc, path=request.url.path)
    else:
        logger.info("%s on %s: %s", type(exc).__name__, request.url.path, exc)
    return _error_response(exc.status_code, exc.message, errors)


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        FieldError(field=_field_path(tuple(err.get("loc", ()))), message=err.get("msg", "Invalid value"))
        for err in exc.errors()
    ]
    return _error_response(400, "Validation error", errors)


async def handle_database_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    log_failure(logger, "Database error", exc, path=request.url.path)
    return _error_response(500, GENERIC_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all handlers to an application."""
    app.add_exception_handler(LegalAidException, handle_app_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(SQLAlchemyError, handle_database_error)
