"""Exception handlers mapping Podium errors to HTTP responses.

Register with register_exception_handlers(app). Every error body has the
shape of PodiumException.to_dict(): error, message, details.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from podium.domain.exceptions import PodiumException

logger = logging.getLogger(__name__)

# Domain error_code -> HTTP status
_ERROR_CODE_STATUS: dict[str, int] = {
    "RESOURCE_NOT_FOUND": 404,
    "NOT_REGISTERED": 404,
    "AUTHENTICATION_ERROR": 401,
    "PERMISSION_DENIED": 403,
    "NOT_ELIGIBLE": 403,
    "INVALID_STATE": 409,
    "NOT_VOTABLE": 409,
    "ALREADY_REGISTERED": 409,
    "DEADLINE_PASSED": 409,
    "VALIDATION_ERROR": 400,
}


def status_for_error_code(error_code: str) -> int:
    """Return the HTTP status for a domain error code (400 when unmapped)."""
    return _ERROR_CODE_STATUS.get(error_code, 400)


def _podium_exception_handler(request: Request, exc: PodiumException) -> JSONResponse:
    status = status_for_error_code(exc.error_code)
    logger.info(
        "%s %s rejected: %s (%s)",
        request.method,
        request.url.path,
        exc.error_code,
        exc.message,
    )
    headers = {"WWW-Authenticate": "Bearer"} if status == 401 else None
    return JSONResponse(status_code=status, content=exc.to_dict(), headers=headers)


def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 for malformed payloads, naming each offending field."""
    fields = [
        {
            "field": ".".join(str(part) for part in err["loc"] if part != "body"),
            "message": err["msg"],
        }
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=422,
        content={
            "error": "VALIDATION_ERROR",
            "message": "Request payload is malformed",
            "details": {"fields": fields},
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register the PodiumException and request validation handlers."""
    app.add_exception_handler(PodiumException, _podium_exception_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
