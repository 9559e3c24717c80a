"""Error Handlers — global exception handlers for the user search API.

Invariants:
    - SearchServiceError → its http_status with {"error", "code"} envelope
    - RequestValidationError → 400 VALIDATION_ERROR envelope
    - Exception (catch-all) → 500 generic envelope, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (SearchServiceError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py to keep the app module to wiring only
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from usersearch.core.domain_types import ErrorCode
from usersearch.core.errors import ErrorSeverity, SearchServiceError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_search_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_search_error_handler(app: FastAPI) -> None:
    """Register user search domain/infrastructure error handler."""

    @app.exception_handler(SearchServiceError)
    async def search_error_handler(request: Request, exc: SearchServiceError):
        """Handle all user search errors."""
        log = logger.error if exc.severity is ErrorSeverity.CRITICAL else logger.warning
        log(
            f"SearchServiceError: {exc.message}",
            extra={"error_code": exc.code.value, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status or status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=exc.to_response(),
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


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all; never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": INTERNAL_ERROR_MESSAGE,
                "code": ErrorCode.INTERNAL_ERROR.value,
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build validation error envelope; field details joined into the message."""
    details = "; ".join(
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    )
    return {
        "error": f"invalid request: {details}" if details else "invalid request",
        "code": ErrorCode.VALIDATION_ERROR.value,
    }
