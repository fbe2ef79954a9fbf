"""Error Handlers — every failure leaves the API as a HireTrackError envelope.

Invariants:
    - One response path: each handler converts to a HireTrackError and calls to_response()
    - RequestValidationError → RequestValidationFailed (400) with per-field details
    - Unhandled exceptions → UnexpectedError (500); the traceback is logged, never returned
    - 5xx responses log at ERROR, everything else at WARNING
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from hiretrack.core.errors import HireTrackError, RequestValidationFailed, UnexpectedError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(HireTrackError, _handle_domain_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)


def field_details(exc: RequestValidationError) -> list[dict]:
    """Flatten pydantic errors into {field, message, type} records."""
    return [
        {
            "field": ".".join(str(part) for part in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]


def _respond(request: Request, error: HireTrackError, exc_info: bool = False) -> JSONResponse:
    log = logger.error if error.http_status >= 500 else logger.warning
    log(
        f"{error.code} on {request.url.path}: {error.message}",
        extra={"error_code": error.code, "path": request.url.path},
        exc_info=exc_info,
    )
    return JSONResponse(status_code=error.http_status, content=error.to_response())


async def _handle_domain_error(request: Request, exc: HireTrackError) -> JSONResponse:
    return _respond(request, exc)


async def _handle_validation_error(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    return _respond(request, RequestValidationFailed(field_details(exc)))


async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    return _respond(request, UnexpectedError(), exc_info=True)
