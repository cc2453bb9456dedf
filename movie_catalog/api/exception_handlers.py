"""Global exception handlers that map classified errors to HTTP responses.

Request validation failures are classified too, so clients see one error shape.
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from movie_catalog.core.config import settings
from movie_catalog.errors import (
    ALREADY_EXISTS,
    DOMAIN_ERROR,
    INFRASTRUCTURE_ERROR,
    INVALID_FORMAT,
    NOT_FOUND,
    OUT_OF_RANGE,
    REQUIRED,
    ClassifiedError,
)
from movie_catalog.schemas.error import ErrorResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_DETAIL = "Internal server error"

# pydantic error types mapped to the expected-type labels reported to clients
_EXPECTED_TYPES = {
    "int_parsing": "int",
    "int_type": "int",
    "int_from_float": "int",
    "string_type": "string",
    "bool_parsing": "bool",
    "bool_type": "bool",
    "float_parsing": "float",
    "json_invalid": "json",
    "model_attributes_type": "object",
    "dict_type": "object",
}


def classify_status(exc: ClassifiedError) -> int:
    """HTTP status code for a classified error."""
    if exc.is_infrastructure():
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    if exc.is_not_found():
        return status.HTTP_404_NOT_FOUND
    if exc.is_already_exists():
        return status.HTTP_409_CONFLICT
    return status.HTTP_400_BAD_REQUEST


def error_code(exc: ClassifiedError) -> str:
    """Machine-readable code for a classified error."""
    if exc.is_infrastructure():
        return INFRASTRUCTURE_ERROR
    if exc.is_not_found():
        return NOT_FOUND
    if exc.is_already_exists():
        return ALREADY_EXISTS
    if exc.is_out_of_range():
        return OUT_OF_RANGE
    if exc.is_invalid_format():
        return INVALID_FORMAT
    if exc.is_required():
        return REQUIRED
    return DOMAIN_ERROR


def _error_response(status_code: int, detail: str, code: str, entity: str) -> JSONResponse:
    """Return a standardized error response with detail and machine-readable code."""
    body = ErrorResponse(detail=detail, code=code, entity=entity or None)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def classified_error_handler(request: Request, exc: ClassifiedError) -> JSONResponse:
    status_code = classify_status(exc)
    code = error_code(exc)

    if exc.is_infrastructure():
        logger.error(
            "%s %s failed: %s",
            request.method,
            request.url.path,
            exc,
            exc_info=exc,
        )
        detail = str(exc) if settings.expose_infrastructure_details else INTERNAL_ERROR_DETAIL
    else:
        logger.info("%s %s rejected (%s): %s", request.method, request.url.path, code, exc)
        detail = str(exc)

    return _error_response(status_code, detail, code, exc.entity)


def classify_validation_error(exc: RequestValidationError) -> ClassifiedError:
    """Translate the first request validation failure into a classified error."""
    errors = exc.errors()
    if not errors:
        return ClassifiedError.invalid_format("request")
    first = errors[0]
    loc = [
        part
        for part in first.get("loc", ())
        if isinstance(part, str) and part not in ("body", "query", "path")
    ]
    field = loc[-1] if loc else "request"
    if first.get("type") == "missing":
        return ClassifiedError.required(field)
    expected = _EXPECTED_TYPES.get(first.get("type"), "valid value")
    return ClassifiedError.invalid_format(field, expected)


def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return classified_error_handler(request, classify_validation_error(exc))


def register_exception_handlers(app):
    """Register the classified error handlers on the FastAPI app."""
    app.add_exception_handler(ClassifiedError, classified_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
