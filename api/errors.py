"""Global exception handlers for FastAPI."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.responses import JSONResponse

from api.base import error_response, ErrorCodes
from core.exceptions import InvalidCivilTimeError, UnknownZoneError, ZoneDatabaseUnavailable

logger = logging.getLogger(__name__)


def _error(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=error_response(code, message).model_dump(mode="json"),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers on the app."""

    @app.exception_handler(UnknownZoneError)
    async def unknown_zone_handler(request: Request, exc: UnknownZoneError):
        return _error(404, ErrorCodes.UNKNOWN_ZONE, str(exc))

    @app.exception_handler(InvalidCivilTimeError)
    async def invalid_civil_time_handler(request: Request, exc: InvalidCivilTimeError):
        return _error(400, ErrorCodes.INVALID_CIVIL_TIME, str(exc))

    @app.exception_handler(ZoneDatabaseUnavailable)
    async def zone_database_handler(request: Request, exc: ZoneDatabaseUnavailable):
        logger.error(f"Zone database unavailable: {exc}")
        return _error(503, ErrorCodes.ZONE_DATABASE_UNAVAILABLE, str(exc))

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        return _error(400, ErrorCodes.INVALID_REQUEST, str(exc))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return _error(422, ErrorCodes.VALIDATION_ERROR, str(exc.errors()))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception")
        return _error(500, ErrorCodes.INTERNAL_ERROR, "An internal error occurred")
