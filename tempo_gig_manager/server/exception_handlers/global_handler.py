"""
Global Exception Handlers for FastAPI Application.

Every error leaves the API as ``{"error": str, "details"?: [...]}``:

- HTTP errors keep their status and use the detail as the message.
- Request validation failures become a flat 400.
- Database integrity violations (duplicates, dangling references) become 409.
- Anything else is logged with full context and answered with a generic 500
  carrying an error id; database error text never reaches the client.
"""

import traceback
import uuid
from typing import Any, Callable, Dict, Mapping, Sequence, TypeVar

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from tempo_gig_manager.core.logging_config import get_logger
from tempo_gig_manager.core.monitoring import log_error

logger = get_logger(__name__)

# Location prefixes FastAPI adds to validation errors
_LOCATION_SOURCES = {"body", "query", "path", "header", "cookie"}

# Attribute holding an endpoint's fixed message for missing required fields
REQUIRED_FIELDS_MESSAGE_ATTR = "required_fields_message"

Endpoint = TypeVar("Endpoint", bound=Callable[..., Any])


def _field_name(loc: Sequence[Any]) -> str:
    parts = [str(part) for part in loc if part not in _LOCATION_SOURCES]
    if not parts:
        return "body"
    return ".".join(parts)


def _is_absent(err: Mapping[str, Any]) -> bool:
    """A failure caused by a missing, null or empty value."""
    if err.get("type") == "missing":
        return True
    return "input" in err and (err["input"] is None or err["input"] == "")


def required_fields_message(message: str) -> Callable[[Endpoint], Endpoint]:
    """
    Give an endpoint a fixed 400 message for missing required fields.

    Apply it below the router decorator::

        @router.post("")
        @required_fields_message("Missing required fields: name, type")
        async def create_venue(...): ...
    """

    def decorator(endpoint: Endpoint) -> Endpoint:
        setattr(endpoint, REQUIRED_FIELDS_MESSAGE_ATTR, message)
        return endpoint

    return decorator


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render an HTTP error as ``{"error": detail}``."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Render request validation failures as a 400.

    Null and empty values count as missing. An endpoint marked with
    ``required_fields_message`` answers any missing field with its fixed
    message. Otherwise, when every failure is a missing field, the message
    lists them (``Missing required fields: name, type``), and anything else
    is a generic ``Invalid request``. ``details`` holds one
    ``"<field>: <message>"`` string per failure.
    """
    errors = exc.errors()
    missing = [_field_name(err.get("loc", ())) for err in errors if _is_absent(err)]
    fixed_message = getattr(request.scope.get("endpoint"), REQUIRED_FIELDS_MESSAGE_ATTR, None)
    if missing and fixed_message:
        message = fixed_message
    elif missing and len(missing) == len(errors):
        message = "Missing required fields: " + ", ".join(missing)
    else:
        message = "Invalid request"

    details = [f"{_field_name(err.get('loc', ()))}: {err.get('msg', 'invalid value')}" for err in errors]
    logger.debug(f"Rejected {request.method} {request.url.path}: {details}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message, "details": details})


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """Render a constraint violation as a 409 without exposing database text."""
    logger.warning(f"Integrity error in {request.method} {request.url.path}: {type(exc.orig).__name__}")
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"error": "Request conflicts with existing data"},
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler to log detailed error information.

    This handler is called for any unhandled exception in the application.
    It logs the full error context and returns a JSON response with an error ID
    that clients can use to reference the error when reporting issues.

    Args:
        request: The HTTP request that caused the exception
        exc: The exception that was raised

    Returns:
        JSONResponse with a generic message and the error ID
    """
    error_id = uuid.uuid4().hex[:12]
    context: Dict[str, Any] = {
        "error_id": error_id,
        "method": request.method,
        "path": request.url.path,
        "query_params": dict(request.query_params),
        "client": request.client.host if request.client else "unknown",
        "error_type": type(exc).__name__,
    }

    logger.error(
        f"Unhandled exception [{error_id}] in {request.method} {request.url.path}: {exc}",
        exc_info=exc,
        extra={**context, "traceback": "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))},
    )
    log_error(type(exc).__name__, str(exc), context)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Operation failed", "error_id": error_id},
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    This function should be called during application initialization to set up
    all custom exception handlers.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")
