"""
Error handling and sanitization

- StorefrontError subclasses → their own status code and structured body
- Request validation errors → 400 with per-field detail
- Anything else → logged with traceback, 500 with a sanitized message
"""
import logging
import traceback
from typing import Union

from fastapi import FastAPI, Request, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from attire.core.config import settings
from attire.core.exceptions import StorefrontError, IntegrityError, UnknownError, ValidationError

logger = logging.getLogger(__name__)

# Patterns that indicate internal/sensitive error information
SENSITIVE_PATTERNS = [
    "password",
    "secret",
    "token",
    "credential",
    "sqlalchemy",
    "aiosqlite",
    "asyncpg",
    "sqlite",
    "postgresql",
    "traceback",
    "file \"",
    "line ",
]


def is_sensitive_error(message: str) -> bool:
    """Check if error message contains sensitive information."""
    message_lower = message.lower()
    return any(pattern in message_lower for pattern in SENSITIVE_PATTERNS)


def sanitize_error_message(error: Union[str, Exception]) -> str:
    """
    Sanitize an error message for safe client exposure.

    In debug mode the full message is returned.
    """
    message = error if isinstance(error, str) else str(error)

    if settings.DEBUG:
        return message

    if is_sensitive_error(message):
        return "An internal error occurred. Please try again later."

    if len(message) > 200:
        return message[:200] + "..."

    return message


def _field_name(loc) -> str:
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    return ".".join(parts) or "body"


async def storefront_error_handler(request: Request, exc: StorefrontError) -> JSONResponse:
    if isinstance(exc, IntegrityError):
        logger.error(
            f"Store integrity violation on {request.method} {request.url.path}: "
            f"{exc.message} {exc.details}"
        )
    elif exc.status_code >= 500:
        logger.error(f"{exc!r} on {request.method} {request.url.path}")

    body = exc.to_dict()
    if exc.status_code >= 500:
        body["message"] = sanitize_error_message(exc.message)
    return JSONResponse(status_code=exc.status_code, content=body)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = {}
    for error in exc.errors():
        fields.setdefault(_field_name(error.get("loc", ())), error.get("msg", "Invalid value"))

    error = ValidationError("Invalid request", details={"fields": fields})
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


class ErrorSanitizationMiddleware(BaseHTTPMiddleware):
    """
    Catch unhandled exceptions and return a sanitized UNKNOWN_ERROR.

    - In production: Returns generic error, logs full details
    - In development: Returns full error for debugging
    """

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except HTTPException:
            # Let FastAPI handle HTTPExceptions normally
            raise
        except Exception as e:
            error_id = f"{request.client.host if request.client else 'unknown'}-{id(e)}"
            logger.error(
                f"Unhandled exception [{error_id}]: {type(e).__name__}: {str(e)}\n"
                f"Path: {request.url.path}\n"
                f"Method: {request.method}\n"
                f"Traceback:\n{traceback.format_exc()}"
            )

            if settings.DEBUG:
                error = UnknownError(str(e), details={"type": type(e).__name__, "error_id": error_id})
            else:
                error = UnknownError(
                    "An unexpected error occurred. Please try again later.",
                    details={"error_id": error_id},
                )
            return JSONResponse(status_code=error.status_code, content=error.to_dict())


def register_error_handlers(app: FastAPI) -> None:
    """Attach the storefront error taxonomy to an application."""
    app.add_exception_handler(StorefrontError, storefront_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_middleware(ErrorSanitizationMiddleware)
