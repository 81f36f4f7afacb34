"""Global exception handlers: one error envelope for every failure.

Invariants:
    - EntityNotFoundError → 404, DomainValidationError → 400
    - RequestValidationError → 400 with a field → message mapping
    - Exception (catch-all) → 500, never leaks internal details

Every body carries ``status``, ``error`` (HTTP reason phrase), ``message``
and ``timestamp``.
"""

import logging
from datetime import datetime, timezone
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from zoo_app.domain.exceptions import DomainValidationError, EntityNotFoundError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handlers(app)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def build_error_body(status_code: int, message: str, **extra: Any) -> dict[str, Any]:
    """Build the shared error envelope."""
    body: dict[str, Any] = {
        "status": status_code,
        "error": HTTPStatus(status_code).phrase,
        "message": message,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    body.update(extra)
    return body


def _register_domain_error_handlers(app: FastAPI) -> None:
    """Register handlers for errors raised by the application services."""

    @app.exception_handler(EntityNotFoundError)
    async def not_found_handler(request: Request, exc: EntityNotFoundError):
        logger.info("Not found on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=build_error_body(status.HTTP_404_NOT_FOUND, str(exc)),
        )

    @app.exception_handler(DomainValidationError)
    async def domain_validation_handler(request: Request, exc: DomainValidationError):
        logger.info("Rejected request on %s: %s", request.url.path, exc.message)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=build_error_body(status.HTTP_400_BAD_REQUEST, exc.message),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Keep router-level errors (unknown path, wrong method) in the same envelope."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=build_error_body(exc.status_code, str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic request validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=build_error_body(
                status.HTTP_400_BAD_REQUEST,
                "Validation failed",
                errors=_field_errors(exc),
            ),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception on %s: %s", request.url.path, exc, exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=build_error_body(
                status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error",
            ),
        )


def _field_errors(exc: RequestValidationError) -> dict[str, str]:
    """Flatten pydantic errors into field → first message."""
    errors: dict[str, str] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        # Drop the "body" / "query" / "path" prefix FastAPI adds.
        rest = loc[1:]
        if rest and not all(part.isdigit() for part in rest):
            field = ".".join(rest)
        else:
            # Undecodable JSON reports a character offset, not a field.
            field = loc[0] if loc else "request"
        errors.setdefault(field, error.get("msg", "Invalid value"))
    return errors
