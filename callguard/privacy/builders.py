"""Allow-list response builders for client-facing entities.

Each builder projects a fixed set of fields out of a raw record and runs the
projection through the client filter, so masking and encryption rules live
in one place. Cross-tenant requests get a minimal stub rather than content.
"""

import math
from collections.abc import Mapping
from typing import Any

from callguard.privacy.encryption import FieldCipher, get_cipher
from callguard.privacy.filters import encrypt_value, filter_for_client, serialize_content
from callguard.privacy.masking import mask_phone, mask_system_prompt

CALL_FIELDS = (
    "id",
    "status",
    "connected",
    "duration_seconds",
    "started_at",
    "ended_at",
    "created_at",
    "sentiment",
    "transcript",
    "summary",
)
CALL_METADATA_FIELDS = ("source", "is_retry", "campaign_id")

AGENT_FIELDS = ("id", "agent_name", "status", "created_at", "updated_at")

LEAD_FIELDS = (
    "id",
    "name",
    "phone_number",
    "email",
    "stage",
    "interest_level",
    "call_status",
    "call_summary",
    "created_at",
    "updated_at",
)
LEAD_STUB_FIELDS = ("id", "stage")

CAMPAIGN_FIELDS = (
    "id",
    "name",
    "description",
    "status",
    "total_leads",
    "contacted_leads",
    "interested_leads",
    "not_interested_leads",
    "partially_interested_leads",
    "concurrency_level",
    "created_at",
    "updated_at",
)

DEFAULT_AGENT_NAME = "Agent"
CONNECTED_THRESHOLD_SECONDS = 45


def _resolve(cipher: FieldCipher | None) -> FieldCipher:
    return cipher if cipher is not None else get_cipher()


def _project(
    record: Mapping[str, Any],
    fields: tuple[str, ...],
    cipher: FieldCipher,
) -> dict[str, Any]:
    return filter_for_client({field: record.get(field) for field in fields}, cipher=cipher)


def proxy_recording_url(resource_id: object) -> str | None:
    """Opaque reference resolved by the recording proxy; never the real URL."""
    if not resource_id:
        return None
    return f"proxy:recording:{resource_id}"


def create_client_call_response(
    call: Mapping[str, Any],
    *,
    cipher: FieldCipher | None = None,
) -> dict[str, Any]:
    """Client view of a call record."""
    cipher = _resolve(cipher)
    response = _project(call, CALL_FIELDS, cipher)

    response["recording_url"] = proxy_recording_url(call.get("id"))

    agent = call.get("agent")
    response["agent"] = (
        {"name": agent.get("name") or DEFAULT_AGENT_NAME}
        if isinstance(agent, Mapping)
        else None
    )

    metadata = call.get("metadata")
    response["metadata"] = (
        _project(metadata, CALL_METADATA_FIELDS, cipher)
        if isinstance(metadata, Mapping)
        else None
    )

    return response


def create_client_agent_response(
    agent: Mapping[str, Any],
    *,
    cipher: FieldCipher | None = None,
) -> dict[str, Any]:
    """Client view of an agent: no provider ids, prompts or LLM settings."""
    return _project(agent, AGENT_FIELDS, _resolve(cipher))


def create_client_lead_response(
    lead: Mapping[str, Any],
    is_owner: bool,
    *,
    cipher: FieldCipher | None = None,
) -> dict[str, Any]:
    """Client view of a lead; non-owners only learn its id and stage."""
    if not is_owner:
        return {field: lead.get(field) for field in LEAD_STUB_FIELDS}
    response = _project(lead, LEAD_FIELDS, _resolve(cipher))
    # Placeholder even when no number is on file; email stays None
    phone = lead.get("phone_number")
    response["phone_number"] = mask_phone(str(phone) if phone is not None else None)
    return response


def create_client_campaign_response(
    campaign: Mapping[str, Any],
    is_owner: bool,
    *,
    cipher: FieldCipher | None = None,
) -> dict[str, Any]:
    """Client view of a campaign; sheet ids and API settings never included."""
    if not is_owner:
        return {"error": "Forbidden"}
    return _project(campaign, CAMPAIGN_FIELDS, _resolve(cipher))


def sanitize_ai_response(response: Mapping[str, Any]) -> dict[str, Any]:
    """Keep only the answer text of an AI analysis; model and usage dropped."""
    return {"response": response.get("response")}


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def execution_duration(execution: Mapping[str, Any]) -> int | None:
    """Call duration in whole seconds from telephony data or conversation time."""
    telephony = execution.get("telephony_data") or {}
    raw = telephony.get("duration")
    if raw:
        try:
            return _round_half_up(float(raw)) or None
        except (TypeError, ValueError, OverflowError):
            return None
    conversation = execution.get("conversation_duration")
    if conversation is not None:
        try:
            return _round_half_up(float(conversation))
        except (TypeError, ValueError, OverflowError):
            return None
    return None


def determine_outcome(status: str, connected: bool) -> str:
    if status == "completed":
        return "contacted" if connected else "no_contact"
    if status == "failed":
        return "failed"
    if status in ("no-answer", "no_answer"):
        return "no_answer"
    return "pending"


def display_cost(duration_seconds: int | None) -> str | None:
    """Billable minutes shown instead of the provider cost breakdown."""
    if not duration_seconds or duration_seconds <= 0:
        return None
    return f"{math.ceil(duration_seconds / 60)} min"


def sanitize_execution(
    execution: Mapping[str, Any],
    *,
    cipher: FieldCipher | None = None,
) -> dict[str, Any]:
    """Whitelist view of a voice provider execution.

    Usage and cost breakdowns, latency data, provider names, batch details,
    raw recording URLs and full phone numbers are never copied over.
    """
    cipher = _resolve(cipher)
    telephony = execution.get("telephony_data") or {}

    duration = execution_duration(execution)
    connected = bool(duration and duration >= CONNECTED_THRESHOLD_SECONDS)
    status = execution.get("status") or "initiated"
    execution_id = execution.get("id")

    transcript = execution.get("transcript")
    summary = execution.get("summary")

    sanitized: dict[str, Any] = {
        "execution_id": execution_id,
        "status": status,
        "duration": duration,
        "outcome": determine_outcome(status, connected),
        "display_cost": display_cost(duration),
        "timestamps": {
            "created_at": execution.get("created_at"),
            "started_at": execution.get("initiated_at"),
            "ended_at": execution.get("updated_at"),
        },
        "transcript": (
            encrypt_value(transcript, cipher) if transcript and isinstance(transcript, str) else None
        ),
        "summary": encrypt_value(summary, cipher) if summary and isinstance(summary, str) else None,
        "has_recording": bool(telephony.get("recording_url")),
        "has_transcript": bool(transcript),
        "has_summary": bool(summary),
        "connected": connected,
        "telephony_data": {
            "to_number": mask_phone(telephony.get("to_number") or execution.get("user_number")),
            "from_number": mask_phone(
                telephony.get("from_number") or execution.get("agent_number")
            ),
            "duration": str(duration) if duration else None,
            "recording_url": (
                proxy_recording_url(execution_id) if telephony.get("recording_url") else None
            ),
        },
    }

    extracted = execution.get("extracted_data")
    if extracted:
        extracted_text = serialize_content(extracted)
        if extracted_text not in ("{}", "null"):
            sanitized["extracted_data"] = encrypt_value(extracted_text, cipher)

    return sanitized


def mask_agent_data(agent: Mapping[str, Any]) -> dict[str, Any]:
    """Copy of a provider agent with every configured system prompt masked."""
    masked = dict(agent)
    prompts = agent.get("agent_prompts")
    if isinstance(prompts, Mapping):
        masked["agent_prompts"] = {
            key: {
                **(value if isinstance(value, Mapping) else {}),
                "system_prompt": mask_system_prompt(
                    value.get("system_prompt") if isinstance(value, Mapping) else None
                ),
            }
            for key, value in prompts.items()
        }
    return masked
