"""Configuration model exports.

    from callguard.config.models import CryptoConfig, BillingConfig
"""

from callguard.config.models.api import APIConfig
from callguard.config.models.billing import BillingConfig
from callguard.config.models.crypto import MIN_KEY_BYTES, CryptoConfig
from callguard.config.models.observability import (
    LoggingConfig,
    MetricsConfig,
    ObservabilityConfig,
)

__all__ = [
    "APIConfig",
    "BillingConfig",
    "CryptoConfig",
    "LoggingConfig",
    "MIN_KEY_BYTES",
    "MetricsConfig",
    "ObservabilityConfig",
]
