"""Error response models for consistent API error handling."""

from enum import Enum

from pydantic import BaseModel


class ErrorCode(str, Enum):
    """Machine-readable error codes returned by every endpoint."""

    INVALID_REQUEST = "INVALID_REQUEST"
    """Request validation failed (malformed JSON, missing fields, etc.)."""

    UNAUTHORIZED = "UNAUTHORIZED"
    """Missing, invalid or expired bearer token."""

    ACCESS_DENIED = "ACCESS_DENIED"
    """The requester may not access the resource."""

    DECRYPTION_FAILED = "DECRYPTION_FAILED"
    """The encrypted payload could not be decrypted."""

    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    """Content encryption is not configured on this deployment."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    """An unexpected internal error occurred."""


class ErrorDetail(BaseModel):
    """Field-level error information for validation failures."""

    field: str | None = None
    message: str


class ErrorBody(BaseModel):
    code: ErrorCode
    message: str
    details: list[ErrorDetail] | None = None


class ErrorResponse(BaseModel):
    """Standard error envelope.

    Example:
        {
            "error": {
                "code": "ACCESS_DENIED",
                "message": "Access denied"
            }
        }
    """

    error: ErrorBody
