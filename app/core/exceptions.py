"""
Error kinds raised by the booking and user services.

Services raise these and never deal with HTTP status codes; the API layer
(`app.api.errors`) maps each kind to a response.
"""

from enum import Enum


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    UNAUTHORIZED = "unauthorized"
    INVALID_TOKEN = "invalid_token"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"


class AppError(Exception):
    """Base class for every tagged service error."""

    kind = ErrorKind.INTERNAL
    default_message = "Internal server error"

    def __init__(self, message: str | None = None, **context):
        self.message = message or self.default_message
        self.context = context
        super().__init__(self.message)


class ValidationFailed(AppError):
    kind = ErrorKind.VALIDATION
    default_message = "Invalid request"

    def __init__(self, message: str | None = None, field: str | None = None, **context):
        self.field = field
        super().__init__(message, **context)


class InvalidSlot(ValidationFailed):
    default_message = "Invalid time slot"

    def __init__(self, keyword=None):
        super().__init__(field="timeSlot", keyword=keyword)


class Unauthorized(AppError):
    kind = ErrorKind.UNAUTHORIZED
    default_message = "Unauthorized"


class InvalidToken(AppError):
    kind = ErrorKind.INVALID_TOKEN
    default_message = "Invalid or expired token"


class Forbidden(AppError):
    kind = ErrorKind.FORBIDDEN
    default_message = "Access denied"


class NotFound(AppError):
    kind = ErrorKind.NOT_FOUND
    default_message = "Not found"


class Conflict(AppError):
    kind = ErrorKind.CONFLICT
    default_message = "Conflict"


class InternalError(AppError):
    kind = ErrorKind.INTERNAL
