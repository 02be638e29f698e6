"""Error Handlers — global exception handlers for the pledge wall API.

Invariants:
    - PledgeWallError → flat JSON envelope {error, code, category, severity, details?}
    - RequestValidationError (query params) → 400 with field-level details
    - 405 from routing → MethodNotSupportedError envelope, no processing attempted
    - Exception (catch-all) → never leaks internal details
    - Store errors: diagnostic reason logged, generic message returned

Design Decisions:
    - Four-layer handler: domain, validation, HTTP, catch-all
    - Extracted from main.py to keep the entry point short
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from pledgewall.core.errors import (
    ErrorSeverity, MethodNotSupportedError, PledgeWallError, StoreUnavailableError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_pledgewall_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_pledgewall_error_handler(app: FastAPI) -> None:
    """Register domain/store error handler."""

    @app.exception_handler(PledgeWallError)
    async def pledgewall_error_handler(request: Request, exc: PledgeWallError):
        """Handle all pledge wall domain/store errors."""
        if isinstance(exc, StoreUnavailableError):
            logger.error(
                f"Store unavailable: {exc}",
                extra={
                    "error_code": exc.code,
                    "path": request.url.path,
                    "operation": exc.operation,
                },
            )
        else:
            logger.warning(
                f"PledgeWallError: {exc.message}",
                extra={"error_code": exc.code, "path": request.url.path},
            )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing-level HTTP error handler (404, 405)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            error = MethodNotSupportedError(request.method, request.url.path)
            logger.warning(
                f"Method {request.method} not allowed on {request.url.path}",
                extra={"error_code": error.code, "path": request.url.path},
            )
            return JSONResponse(
                status_code=error.http_status,
                content=error.to_response(),
                headers=exc.headers,
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": str(exc.detail),
                "code": "HTTP_ERROR",
                "category": "protocol",
                "severity": ErrorSeverity.WARNING.value,
            },
            headers=exc.headers,
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Server error",
                "code": "INTERNAL_ERROR",
                "category": "internal",
                "severity": ErrorSeverity.CRITICAL.value,
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": "Invalid request data",
        "code": "VALIDATION_ERROR",
        "category": "validation",
        "severity": ErrorSeverity.ERROR.value,
        "details": {
            "fields": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
