"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to RFC 7807 style problem responses (type, title, status,
detail, error_code).
"""

import logging
import traceback
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from tenant_management.core.config import get_settings
from tenant_management.domain.enums import ErrorCode
from tenant_management.domain.exceptions import TenantManagementException

logger = logging.getLogger(__name__)

PROBLEM_CONTENT_TYPE = "application/problem+json"

# Map domain error_code to HTTP status
_ERROR_CODE_STATUS: dict[str, int] = {
    ErrorCode.INVALID_ARGUMENT.value: 400,
    ErrorCode.DUPLICATE_RESOURCE.value: 409,
    ErrorCode.RESOURCE_NOT_FOUND.value: 404,
    ErrorCode.CONCURRENCY_CONFLICT.value: 409,
    ErrorCode.INVALID_OPERATION.value: 500,
    ErrorCode.OPERATION_CANCELLED.value: 500,
    ErrorCode.SERVICE_UNAVAILABLE.value: 503,
}


def approximate_http_status(error_code: str) -> int:
    """HTTP status for a domain error code; unknown codes map to 500."""
    return _ERROR_CODE_STATUS.get(error_code, 500)


def _include_debug_details() -> bool:
    settings = get_settings()
    return settings.is_development or settings.debug


def _problem(
    status: int,
    title: str,
    detail: Any,
    error_code: str,
    extra: dict[str, Any] | None = None,
) -> JSONResponse:
    content: dict[str, Any] = {
        "type": "about:blank",
        "title": title,
        "status": status,
        "detail": detail,
        "error_code": error_code,
    }
    if extra:
        content.update(extra)
    return JSONResponse(
        status_code=status, content=content, media_type=PROBLEM_CONTENT_TYPE
    )


def _domain_exception_handler(
    request: Request, exc: TenantManagementException
) -> JSONResponse:
    """Return problem JSON from the exception's error_code, message and details.

    Server-side failures (5xx) carry provider messages and resource IDs, so
    outside development or debug they get a generic detail and no details.
    """
    status = approximate_http_status(exc.error_code)
    if status >= 500:
        logger.error("%s: %s", exc.error_code, exc.message)
        if not _include_debug_details():
            return _problem(
                status,
                "InternalServerError",
                "An unexpected error occurred.",
                exc.error_code,
            )
    return _problem(
        status,
        exc.__class__.__name__,
        exc.message,
        exc.error_code,
        {"details": exc.details} if exc.details else None,
    )


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 with validation error details."""
    return _problem(
        422,
        "RequestValidationError",
        "Request validation failed",
        "VALIDATION_ERROR",
        {"details": jsonable_encoder(exc.errors())},
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return problem JSON for Starlette HTTP exceptions (status + detail)."""
    return _problem(exc.status_code, "HTTPException", exc.detail, "HTTP_ERROR")


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; type, message and traceback only in development or debug."""
    logger.exception("Unhandled exception: %s", exc)
    extra: dict[str, Any] | None = None
    if _include_debug_details():
        extra = {
            "exception_type": type(exc).__name__,
            "exception_message": str(exc),
            "traceback": traceback.format_exception(exc),
        }
    return _problem(
        500,
        "InternalServerError",
        "An unexpected error occurred.",
        ErrorCode.UNKNOWN.value,
        extra,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: TenantManagementException
    (and subclasses), RequestValidationError, StarletteHTTPException,
    generic Exception.
    """
    app.add_exception_handler(TenantManagementException, _domain_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
