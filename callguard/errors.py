"""Exception hierarchy shared by the library modules.

The API layer maps these onto HTTP responses; library code raises them and
never catches them itself.
"""


class CallguardError(Exception):
    """Base exception for all callguard errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(CallguardError):
    """Encryption key missing or shorter than the minimum length."""


class DecryptionError(CallguardError):
    """Payload malformed, key wrong, or authentication tag rejected."""


class UnsupportedAlgorithmError(DecryptionError):
    """Payload carries an ``alg`` this process cannot decrypt."""

    def __init__(self, algorithm: object) -> None:
        super().__init__(f"Unsupported encryption algorithm: {algorithm!r}")
        self.algorithm = algorithm


class AccessDeniedError(CallguardError):
    """Requester may not see the requested tenant data."""


class BillingError(CallguardError):
    """Base exception for seat billing calculations."""


class InvalidSeatCountError(BillingError):
    """Requested seat delta is not a positive integer."""


class SubscriptionInactiveError(BillingError):
    """Seat subscription exists but is not active."""
