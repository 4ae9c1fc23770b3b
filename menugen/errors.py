"""Application error taxonomy.

Services raise these where a problem is detected; the handlers registered in
``menugen.main`` turn them into the ``{"success": false, "error": ...}``
envelope with the matching HTTP status.
"""

from fastapi import status


class AppError(Exception):
    """Base class for errors that map directly onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Missing or malformed request data."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class UnavailableError(ValidationError):
    """A dish exists but cannot currently be ordered."""

    default_message = "Dish is not available"


class AuthenticationError(AppError):
    """Missing, invalid or expired credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class AuthorizationError(AppError):
    """The caller is authenticated but does not own the resource."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Not authorized"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"
