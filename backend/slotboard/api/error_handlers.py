"""Error Handlers - map exceptions to the SlotBoard REST error envelope.

Invariants:
    - SlotBoardError -> its own to_response() at its own http_status
    - RequestValidationError -> 400 VALIDATION_ERROR with one entry per field
    - Anything else -> 500 INTERNAL_ERROR, never leaking internal details
    - Client errors log at warning, server-side failures at error

Design Decisions:
    - A full slot is not an exception, so it never reaches these handlers
    - Extracted from main.py to keep the app module to wiring only
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from slotboard.core.errors import ErrorCategory, ErrorSeverity, SlotBoardError

logger = logging.getLogger(__name__)


def _envelope(code: str, message: str, category: ErrorCategory, **extra) -> dict:
    severity = (
        ErrorSeverity.ERROR if category == ErrorCategory.VALIDATION
        else ErrorSeverity.CRITICAL
    )
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            **extra,
        },
    }


async def handle_slotboard_error(request: Request, exc: SlotBoardError):
    log = logger.warning if exc.http_status < 500 else logger.error
    log(
        f"{exc.code} on {request.url.path}: {exc.message}",
        extra={
            "error_code": exc.code,
            "project_id": exc.context.project_id,
            "store_key": exc.context.store_key,
            "source": exc.context.source,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_validation_error(request: Request, exc: RequestValidationError):
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    logger.warning(
        f"Invalid request on {request.url.path} ({len(details)} errors)",
        extra={"error_code": "VALIDATION_ERROR", "count": len(details)},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, details=details,
        ),
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True,
        extra={"error_code": "INTERNAL_ERROR"},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            "INTERNAL_ERROR", "An unexpected error occurred", ErrorCategory.INTERNAL,
        ),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(SlotBoardError, handle_slotboard_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
