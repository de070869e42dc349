"""Error Handlers — global exception handlers rendering plain-text error bodies.

Invariants:
    - TodoError → its message, its http_status, logged once at its severity
    - RequestValidationError → 400 "invalid id" (path) or "invalid JSON" (other)
    - Starlette HTTPException → 405 "method not allowed" (with Allow), 404 "not found"
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Four-layer handler: domain (TodoError), validation (pydantic), routing
      (Starlette), catch-all (Exception)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from todo_api.core.errors import (
    ErrorSeverity, TodoError, InvalidPathIdError, MalformedPayloadError,
    UnsupportedMethodError,
)

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_todo_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def render_error(request: Request, exc: TodoError) -> PlainTextResponse:
    """Log a domain error and turn it into its plain-text response."""
    logger.log(
        _LOG_LEVELS[exc.severity],
        f"{type(exc).__name__}: {exc.message}",
        extra={
            **exc.log_extra(),
            "method": request.method,
            "path": request.url.path,
            "status_code": exc.http_status,
        },
    )
    headers = exc.headers if isinstance(exc, UnsupportedMethodError) else None
    return PlainTextResponse(
        exc.message, status_code=exc.http_status, headers=headers,
    )


def _register_todo_error_handler(app: FastAPI) -> None:

    @app.exception_handler(TodoError)
    async def todo_error_handler(request: Request, exc: TodoError):
        return render_error(request, exc)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Pydantic rejected a typed request parameter."""
        logger.debug(f"Request validation failed: {exc.errors()}")
        return render_error(request, _translate_validation_error(exc))


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Routing-level failures: unknown path, method not allowed."""
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            allow = (exc.headers or {}).get("Allow", "")
            allowed = [m.strip() for m in allow.split(",") if m.strip()]
            return render_error(request, UnsupportedMethodError(allowed))
        message = (
            "not found" if exc.status_code == status.HTTP_404_NOT_FOUND
            else str(exc.detail)
        )
        return PlainTextResponse(
            message, status_code=exc.status_code, headers=exc.headers,
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"method": request.method, "path": request.url.path},
        )
        return PlainTextResponse(
            "internal server error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


def _translate_validation_error(exc: RequestValidationError) -> TodoError:
    """Path errors win over body errors, matching the order a handler checks them."""
    for err in exc.errors():
        loc = err.get("loc") or ()
        if loc and loc[0] == "path":
            return InvalidPathIdError()
    return MalformedPayloadError()
