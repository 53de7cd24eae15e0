"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to JSON error bodies ({"error": ..., **context}). Every response
carries the CORS header set, including the catch-all 500 which Starlette
renders outside the middleware stack.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskdesk.core.config import get_settings
from taskdesk.core.cors import cors_headers
from taskdesk.domain.exceptions import TaskDeskException, ValidationException
from taskdesk.infrastructure.exceptions import StorageException

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status
_ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "MISSING_FIELDS": 400,
    "INVALID_TYPE": 400,
    "INVALID_DATE": 400,
    "PAST_DATE": 400,
    "AUTHENTICATION_ERROR": 401,
    "RESOURCE_NOT_FOUND": 404,
    "APPLICATION_MISSING": 404,
    "TASK_NOT_FOUND": 404,
    "INSERT_FAILED": 500,
    "UPDATE_FAILED": 500,
}


def _status_for(exc: TaskDeskException) -> int:
    status = _ERROR_CODE_STATUS.get(exc.error_code)
    if status is not None:
        return status
    if isinstance(exc, StorageException):
        return 500
    return 400


def _json(status_code: int, content: Any, headers: dict[str, str] | None = None) -> JSONResponse:
    merged = cors_headers()
    if headers:
        merged.update(headers)
    return JSONResponse(status_code=status_code, content=content, headers=merged)


def _taskdesk_exception_handler(
    request: Request, exc: TaskDeskException
) -> JSONResponse:
    """Return JSON from TaskDeskException.to_dict() with appropriate status code."""
    status = _status_for(exc)
    if status >= 500:
        logger.error("%s %s failed: %s (%s)", request.method, request.url.path, exc.message, exc.error_code)
    elif isinstance(exc, ValidationException):
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.error_code)
    else:
        logger.warning("%s %s: %s %s", request.method, request.url.path, exc.error_code, exc.details)
    return _json(status, exc.to_dict())


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 400 for malformed bodies (invalid JSON, non-string fields)."""
    return _json(
        400,
        {
            "error": "Invalid request body",
            "details": jsonable_encoder(exc.errors()),
        },
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions; 405 uses a fixed message."""
    message: Any = "Method not allowed" if exc.status_code == 405 else exc.detail
    return _json(exc.status_code, {"error": message}, headers=getattr(exc, "headers", None))


def _rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Return slowapi's 429 response with the CORS header set added."""
    response = _rate_limit_exceeded_handler(request, exc)
    response.headers.update(cors_headers())
    return response


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include exception text in details only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    details = str(exc) if settings.debug else "An unexpected error occurred"
    return _json(500, {"error": "Internal server error", "details": details})


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: TaskDeskException (and
    subclasses), RequestValidationError, StarletteHTTPException,
    RateLimitExceeded, generic Exception.
    """
    app.add_exception_handler(TaskDeskException, _taskdesk_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
