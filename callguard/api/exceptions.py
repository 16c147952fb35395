"""API exception hierarchy.

Route code raises these; library errors from ``callguard.errors`` are mapped
onto the same envelope by the global handlers in ``callguard.api.app``.
"""

from callguard.api.models.errors import ErrorCode


class CallguardAPIError(Exception):
    """Base exception for all API errors."""

    status_code: int = 500
    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidRequestError(CallguardAPIError):
    """Raised when a request is well-formed JSON but semantically invalid."""

    status_code = 400
    error_code = ErrorCode.INVALID_REQUEST


class UnauthorizedError(CallguardAPIError):
    """Raised when the bearer token is missing or not acceptable."""

    status_code = 401
    error_code = ErrorCode.UNAUTHORIZED
