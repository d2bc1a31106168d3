"""Exception handlers for the diagnostics application."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from view_binding.exceptions import ViewBindingException
from view_binding.logging_config import get_logger, log_with_context
from view_binding.models import ErrorResponse

logger = get_logger(__name__)


async def view_binding_exception_handler(request: Request, exc: ViewBindingException) -> JSONResponse:
    """Return structured JSON for view binding exceptions with their status code."""
    log_with_context(
        logger,
        "warning",
        "View binding error",
        error_code=exc.code.value,
        error_message=exc.message,
        status_code=exc.status_code,
        method=request.method,
        url=str(request.url),
        event_type="view_binding_error",
    )

    error = ErrorResponse(code=exc.code.value, message=exc.message, details=exc.details)

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": error.model_dump(mode="json")},
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle general exceptions with logging."""
    log_with_context(
        logger,
        "error",
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        method=request.method,
        url=str(request.url),
        event_type="unhandled_error",
    )
    logger.error("Exception traceback:", exc_info=True)

    # Don't expose internal error details to clients
    return JSONResponse(
        status_code=500,
        content={"error": {"code": "INTERNAL_ERROR", "message": "Internal server error"}},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the application."""
    app.add_exception_handler(ViewBindingException, view_binding_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
