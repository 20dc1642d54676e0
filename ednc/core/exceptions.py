"""
Domain errors for the roster service.

CRUD functions raise these; the handlers registered in ``ednc.main`` turn
them into ``{"detail": ..., "code": ...}`` responses with the matching
status code. Storage problems are reported as ``StorageFailure`` with a
generic message, the original exception only goes to the log.
"""

from typing import Any, Dict


class RosterError(Exception):
    """Base exception for all roster service errors"""

    status_code: int = 500
    code: str = "INTERNAL_ERROR"
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"detail": self.message, "code": self.code}


class ValidationFailed(RosterError):
    status_code = 400
    code = "VALIDATION_FAILED"
    default_message = "Invalid input"


class Unauthorized(RosterError):
    status_code = 401
    code = "UNAUTHORIZED"
    default_message = "Access token is required"


class InvalidToken(RosterError):
    status_code = 403
    code = "INVALID_TOKEN"
    default_message = "Invalid token"


class Forbidden(RosterError):
    status_code = 403
    code = "FORBIDDEN"
    default_message = "Access denied"


class NotFound(RosterError):
    status_code = 404
    code = "NOT_FOUND"
    default_message = "Resource not found"


class NotFoundOrForbidden(NotFound):
    """Raised when a resource is missing or belongs to someone else.

    The two cases are deliberately reported the same way so that
    non-owners cannot probe for ids.
    """

    default_message = "Course not found"


class DuplicateEmail(RosterError):
    status_code = 400
    code = "DUPLICATE_EMAIL"
    default_message = "Email is already registered"


class DuplicateRegistration(RosterError):
    status_code = 409
    code = "DUPLICATE_REGISTRATION"
    default_message = "This email is already registered for the course"


class StorageFailure(RosterError):
    status_code = 500
    code = "STORAGE_FAILURE"
    default_message = "A database error occurred"
