"""Static field classification for tenant-facing responses.

Clients receive only business-level data they own. Admins and engineers see
internal data, but sensitive content is encrypted for every role.
"""

from collections.abc import Callable
from enum import Enum

from callguard.privacy.masking import mask_email, mask_full_name, mask_phone


class FieldClass(str, Enum):
    """How a field is treated on the client path."""

    FORBIDDEN = "forbidden"
    MASKED = "masked"
    ENCRYPTED = "encrypted"
    PASSTHROUGH = "passthrough"


# Removed entirely for clients, at any depth
CLIENT_FORBIDDEN_FIELDS: frozenset[str] = frozenset({
    # AI/model internals
    "model_name",
    "model_provider",
    "llm_provider",
    "llm_model",
    "ai_model",
    "token_usage",
    "tokens_used",
    "prompt_tokens",
    "completion_tokens",
    "total_tokens",
    # Performance diagnostics
    "latency_ms",
    "processing_time_ms",
    "response_time_ms",
    "api_latency",
    "ttfb_ms",
    "tts_latency",
    "stt_latency",
    "llm_latency",
    # Provider identifiers
    "external_call_id",
    "external_agent_id",
    "external_batch_id",
    "provider_call_id",
    "provider_agent_id",
    "bolna_agent_id",
    "aitel_agent_id",
    # System configuration
    "system_prompt",
    "original_system_prompt",
    "current_system_prompt",
    "agent_config",
    "webhook_config",
    "api_key",
    "api_secret",
    # Encryption metadata
    "encryption_key_id",
    "encryption_version",
    "iv",
    "tag",
    "ciphertext",
    # Raw provider data
    "provider_response",
    "raw_response",
    "debug_info",
    "internal_notes",
    "admin_notes",
})

# Replaced with a display mask for clients
CLIENT_MASKERS: dict[str, Callable[[str | None], str]] = {
    "phone_number": mask_phone,
    "email": mask_email,
    "full_name": mask_full_name,
}
CLIENT_MASK_FIELDS: frozenset[str] = frozenset(CLIENT_MASKERS)

# Encrypted for every role
ENCRYPT_FIELDS: frozenset[str] = frozenset({
    "transcript",
    "summary",
    "notes",
    "extracted_data",
    "call_summary",
})

# Internal path keeps these and adds a masked ``display_<name>`` companion
DISPLAY_MASKED_IDENTIFIERS: tuple[str, ...] = (
    "external_call_id",
    "external_agent_id",
)


def classify_field(name: str) -> FieldClass:
    """Return the client-path class of a field name."""
    if name in CLIENT_FORBIDDEN_FIELDS:
        return FieldClass.FORBIDDEN
    if name in ENCRYPT_FIELDS:
        return FieldClass.ENCRYPTED
    if name in CLIENT_MASK_FIELDS:
        return FieldClass.MASKED
    return FieldClass.PASSTHROUGH


def display_field_name(name: str) -> str:
    return f"display_{name}"
