"""
Application error kinds

Each error carries the HTTP status it is rendered with; the handlers in
artisans_echo.main turn them into the ``{"ok": false, "error": ...}`` body.
"""
from typing import Dict, Optional

from fastapi import status


class AppError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error: str = "Internal Server Error"

    def __init__(self, message: Optional[str] = None, detail: Optional[str] = None):
        self.message = message or self.error
        self.detail = detail
        super().__init__(self.message)

    @property
    def headers(self) -> Optional[Dict[str, str]]:
        return None


class ValidationError(AppError):
    """Malformed or missing input."""

    status_code = status.HTTP_400_BAD_REQUEST
    error = "Validation error"


class Unauthorized(AppError):
    """Missing or invalid bearer credential."""

    status_code = status.HTTP_401_UNAUTHORIZED
    error = "Could not validate credentials"

    @property
    def headers(self) -> Optional[Dict[str, str]]:
        return {"WWW-Authenticate": "Bearer"}


class Forbidden(AppError):
    """Authenticated, but not allowed to act on the resource."""

    status_code = status.HTTP_403_FORBIDDEN
    error = "Forbidden"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    error = "Resource not found"


class Conflict(AppError):
    status_code = status.HTTP_409_CONFLICT
    error = "Resource already exists"


class StoreUnavailable(AppError):
    """The backing store has not been connected."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    error = "Database is not available"


class InternalError(AppError):
    pass
