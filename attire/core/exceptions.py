"""
Storefront Exception Hierarchy

Every error carries a code, a message and details so the API boundary can
render it the same way regardless of where it was raised.

Exception Hierarchy:
    StorefrontError
    ├── ValidationError          400
    ├── AuthenticationRequired   401
    ├── NotFound                 404
    ├── RateLimited              429
    ├── IntegrityError           500
    └── UnknownError             500
"""
import logging
from typing import Optional, Dict, Any

logger = logging.getLogger(__name__)


class StorefrontError(Exception):
    """
    Base exception for all storefront errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code for programmatic handling
        details: Additional context for the client or the logs
        status_code: HTTP status the API boundary maps this error to
    """

    default_code: str = "STOREFRONT_ERROR"
    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class ValidationError(StorefrontError):
    """Malformed or unacceptable input."""
    default_code = "VALIDATION_ERROR"
    status_code = 400

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        if field:
            details.setdefault("fields", {})[field] = message
        super().__init__(message, details=details, **kwargs)


class AuthenticationRequired(StorefrontError):
    """No authenticated session."""
    default_code = "AUTHENTICATION_REQUIRED"
    status_code = 401


class NotFound(StorefrontError):
    """Entity missing by id or slug."""
    default_code = "NOT_FOUND"
    status_code = 404

    def __init__(
        self,
        message: str,
        entity: Optional[str] = None,
        key: Optional[Any] = None,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        if entity:
            details.update({"entity": entity, "key": key})
        super().__init__(message, details=details, **kwargs)


class RateLimited(StorefrontError):
    """Too many requests from one client."""
    default_code = "RATE_LIMITED"
    status_code = 429


class IntegrityError(StorefrontError):
    """A stored reference points at an entity that no longer exists."""
    default_code = "INTEGRITY_ERROR"
    status_code = 500

    def __init__(
        self,
        message: str,
        entity: Optional[str] = None,
        entity_id: Optional[int] = None,
        missing: Optional[str] = None,
        missing_id: Optional[int] = None,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        details.update({
            "entity": entity,
            "entity_id": entity_id,
            "missing": missing,
            "missing_id": missing_id,
        })
        super().__init__(message, details=details, **kwargs)


class UnknownError(StorefrontError):
    """Catch-all for unexpected failures."""
    default_code = "UNKNOWN_ERROR"
    status_code = 500
