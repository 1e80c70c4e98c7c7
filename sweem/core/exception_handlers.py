"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to HTTP responses using one JSON envelope:
{"error": <code>, "message": <text>, "details": <dict>}.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from sweem.core.config import get_settings
from sweem.domain.exceptions import SweemException

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status
_ERROR_CODE_STATUS: dict[str, int] = {
    "RESOURCE_NOT_FOUND": 404,
    "INVALID_CREDENTIALS": 401,
    "INVALID_TOKEN": 401,
    "VALIDATION_ERROR": 400,
    "LOGIN_ALREADY_EXISTS": 409,
    "RESOURCE_IN_USE": 409,
    "STORAGE_ERROR": 503,
    "CONFIGURATION_ERROR": 500,
}

_UNAUTHORIZED_HEADERS = {"WWW-Authenticate": "Bearer"}


def _sweem_exception_handler(request: Request, exc: SweemException) -> JSONResponse:
    """Return JSON from SweemException.to_dict() with the mapped status code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    if status >= 500:
        logger.error(
            "%s on %s %s: %s",
            exc.error_code,
            request.method,
            request.url.path,
            exc.message,
            exc_info=exc.__cause__,
        )
    headers = _UNAUTHORIZED_HEADERS if status == 401 else None
    return JSONResponse(status_code=status, content=exc.to_dict(), headers=headers)


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 with validation error details."""
    return JSONResponse(
        status_code=422,
        content={
            "error": "VALIDATION_ERROR",
            "message": "Request validation failed",
            "details": _jsonable_errors(exc),
        },
    )


def _jsonable_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Drop non-serializable ctx values (e.g. the ValueError raised by a validator)."""
    errors = []
    for err in exc.errors():
        item = {k: v for k, v in err.items() if k != "ctx"}
        if "ctx" in err:
            item["ctx"] = {k: str(v) for k, v in err["ctx"].items()}
        errors.append(item)
    return errors


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (status + detail)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "HTTP_ERROR", "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    detail: Any = str(exc) if settings.debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": detail},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: SweemException (and
    subclasses), RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(SweemException, _sweem_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
