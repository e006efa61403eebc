"""Error Handlers — every failure leaves the API in the OrgStructureError envelope.

Invariants:
    - One body shape for all errors: {"error": {code, message, category, severity,
      timestamp, context, request_id, ...}} built by OrgStructureError.to_response()
    - Status travels on the exception (http_status): NotFound 404, SelfParent and
      CycleDetected 409, InvalidInput and DuplicateName 400, DatabaseError 500
    - Malformed requests (body, path or query) are 400 VALIDATION_ERROR, never 422
    - InvalidInputError bodies name the offending field
    - Unhandled exceptions become 500 INTERNAL_ERROR without internal details
    - request_id (set by api/request_logging.py) is echoed in the body and the log line

Design Decisions:
    - Validation and catch-all errors are wrapped in OrgStructureError instances so
      their bodies come from the same to_response() as domain errors
    - CRITICAL errors log at ERROR with traceback; client errors log at WARNING
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from org_structure.core.errors import (
    ErrorCategory, ErrorSeverity, InvalidInputError, OrgStructureError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register domain, request-validation and catch-all handlers."""
    app.add_exception_handler(OrgStructureError, _handle_org_structure_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


def _error_response(request: Request, exc: OrgStructureError, **fields) -> JSONResponse:
    body = exc.to_response()
    body["error"]["request_id"] = _request_id(request)
    body["error"].update(fields)
    return JSONResponse(status_code=exc.http_status, content=body)


def _log(request: Request, exc: OrgStructureError, message: str, exc_info=False) -> None:
    level = (
        logging.ERROR if exc.severity is ErrorSeverity.CRITICAL
        else logging.WARNING
    )
    logger.log(
        level,
        message,
        exc_info=exc_info,
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "request_id": _request_id(request),
            "department_id": exc.context.department_id,
            "employee_id": exc.context.employee_id,
        },
    )


async def _handle_org_structure_error(request: Request, exc: OrgStructureError):
    _log(request, exc, f"{exc.code}: {exc.message}")
    if isinstance(exc, InvalidInputError):
        return _error_response(request, exc, field=exc.field)
    return _error_response(request, exc)


async def _handle_validation_error(request: Request, exc: RequestValidationError):
    details = [
        {
            "field": ".".join(str(loc) for loc in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]
    wrapped = OrgStructureError(
        "Invalid request data", "VALIDATION_ERROR", ErrorCategory.VALIDATION,
        http_status=status.HTTP_400_BAD_REQUEST,
    )
    _log(request, wrapped, f"VALIDATION_ERROR: {[d['field'] for d in details]}")
    return _error_response(request, wrapped, details=details)


async def _handle_unexpected_error(request: Request, exc: Exception):
    wrapped = OrgStructureError(
        "An unexpected error occurred", "INTERNAL_ERROR", ErrorCategory.INTERNAL,
        ErrorSeverity.CRITICAL, http_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    _log(
        request, wrapped, f"Unhandled {type(exc).__name__} on {request.url.path}",
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    return _error_response(request, wrapped)
