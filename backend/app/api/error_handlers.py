"""Error Handlers — global exception handlers for the Wellnote API.

Invariants:
    - WellnoteError → its http_status with {success: false, error} on resource
      routes and {error} on /auth/* and /me
    - RequestValidationError (unparseable body) → 400, same envelope rules
    - Exception (catch-all) → 500, never leaks internal details
    - 5xx are logged with traceback; 4xx are logged as warnings without one

Design Decisions:
    - Three-layer handler: domain (WellnoteError), validation (Pydantic), catch-all (Exception)
    - Kept out of main.py so main only wires the app together
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.errors import InternalError, ValidationError, WellnoteError

logger = logging.getLogger(__name__)

BARE_ERROR_PATHS = ("/me",)
BARE_ERROR_PREFIXES = ("/auth/",)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_wellnote_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def uses_envelope(path: str) -> bool:
    """Resource routes answer {success: false, error}; auth routes answer {error}."""
    return not (
        path in BARE_ERROR_PATHS or path.startswith(BARE_ERROR_PREFIXES)
    )


def _log_extra(request: Request, exc: WellnoteError) -> dict:
    user = getattr(request.state, "user", None)
    return {
        "error_code": exc.code,
        "path": request.url.path,
        "method": request.method,
        "user_id": user.id if user else None,
    }


def _error_response(request: Request, exc: WellnoteError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.http_status,
        content=exc.to_response(envelope=uses_envelope(request.url.path)),
    )


def _register_wellnote_error_handler(app: FastAPI) -> None:

    @app.exception_handler(WellnoteError)
    async def wellnote_error_handler(request: Request, exc: WellnoteError):
        """Handle all Wellnote domain/infrastructure errors."""
        if exc.http_status >= 500:
            logger.error(
                f"WellnoteError: {exc.message}",
                extra=_log_extra(request, exc),
            )
        else:
            logger.warning(
                f"{request.method} {request.url.path} rejected: {exc.message}",
                extra=_log_extra(request, exc),
            )
        return _error_response(request, exc)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle request bodies FastAPI itself could not parse."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return _error_response(request, ValidationError("Invalid request data"))


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=InternalError().to_response(
                envelope=uses_envelope(request.url.path),
            ),
        )
