"""Structured logging configuration using structlog.

JSON output for production, console output for development. Log events pass
through a redaction processor so that phone numbers, emails, key material and
call content never reach the log stream in clear.
"""

import re
import sys
from collections.abc import Callable, MutableMapping
from typing import Any, cast

import structlog
from structlog.types import EventDict, WrappedLogger

from callguard.privacy.masking import mask_email, mask_phone

REDACTED = "[REDACTED]"

# Dropped outright: secrets and decrypted call content
SECRET_KEYS: frozenset[str] = frozenset({
    "password",
    "secret",
    "token",
    "api_key",
    "api_secret",
    "authorization",
    "bearer",
    "access_token",
    "refresh_token",
    "otp",
    "transcript_key",
    "key",
    "plaintext",
    "content",
    "transcript",
    "summary",
    "notes",
    "system_prompt",
})

# Kept recognisable but masked
MASKED_KEYS: dict[str, Callable[[str | None], str]] = {
    "phone": mask_phone,
    "phone_number": mask_phone,
    "to_number": mask_phone,
    "from_number": mask_phone,
    "user_number": mask_phone,
    "agent_number": mask_phone,
    "email": mask_email,
}

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
PHONE_PATTERN = re.compile(r"\+?\d[\d\s\-\(\)]{8,}\d")

# Emitted by processors or carrying identifiers; never scanned for PII shapes
STRUCTURAL_KEYS: frozenset[str] = frozenset({"event", "level", "timestamp", "logger", "request_id"})


class PIIRedactor:
    """Processor that redacts PII from log events.

    Key names are checked first. Remaining string values, apart from
    identifiers and processor-added fields, are then scanned for email and
    phone shapes as a fallback.
    """

    def __call__(
        self,
        _logger: WrappedLogger,
        _method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        return cast(EventDict, self._redact_dict(event_dict))

    def _redact_dict(self, data: MutableMapping[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for key, value in data.items():
            key_lower = key.lower()

            if key_lower in SECRET_KEYS and value is not None:
                result[key] = REDACTED
            elif key_lower in MASKED_KEYS and isinstance(value, str):
                result[key] = MASKED_KEYS[key_lower](value)
            elif key_lower in STRUCTURAL_KEYS or key_lower.endswith("_id"):
                result[key] = value
            else:
                result[key] = self._redact_value(value)

        return result

    def _redact_value(self, value: Any) -> Any:
        if isinstance(value, dict):
            return self._redact_dict(value)
        if isinstance(value, list):
            return [self._redact_value(item) for item in value]
        if isinstance(value, str):
            return self._redact_string(value)
        return value

    def _redact_string(self, value: str) -> str:
        value = EMAIL_PATTERN.sub(lambda m: mask_email(m.group(0)), value)
        return PHONE_PATTERN.sub(lambda m: mask_phone(m.group(0)), value)


def setup_logging(
    level: str = "INFO",
    format: str = "json",
    redact_pii: bool = True,
) -> None:
    """Configure structured logging.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR)
        format: "json" for production, "console" for development
        redact_pii: Whether to mask PII in log events
    """
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if redact_pii:
        processors.append(PIIRedactor())

    if format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    level_map = {
        "DEBUG": 10,
        "INFO": 20,
        "WARNING": 30,
        "ERROR": 40,
        "CRITICAL": 50,
    }

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level_map.get(level.upper(), 20)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger bound to ``name`` (typically the module ``__name__``)."""
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
