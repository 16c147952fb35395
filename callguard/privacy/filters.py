"""Role-based response filtering.

Security model:
- Clients receive only business-level data: forbidden fields are stripped at
  any depth, personal fields are masked, content is encrypted.
- Admins and engineers receive internal data with content still encrypted
  and provider identifiers given a masked display companion.

Filtering is a pure transform over JSON-like values. Errors from encryption
propagate unchanged; no partially filtered structure is ever returned.
"""

import json
from collections.abc import Mapping
from typing import Any

from callguard.errors import AccessDeniedError
from callguard.observability.logging import get_logger
from callguard.observability.metrics import ACCESS_DENIALS, FILTERED_RESPONSES
from callguard.privacy.classification import (
    CLIENT_MASKERS,
    DISPLAY_MASKED_IDENTIFIERS,
    ENCRYPT_FIELDS,
    FieldClass,
    classify_field,
    display_field_name,
)
from callguard.privacy.encryption import (
    EncryptedPayload,
    FieldCipher,
    get_cipher,
    is_encrypted_payload,
)
from callguard.privacy.masking import mask_uuid
from callguard.privacy.roles import UserRole

logger = get_logger(__name__)


def serialize_content(value: Any) -> str:
    """String form of a value about to be encrypted."""
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)


def encrypt_value(value: Any, cipher: FieldCipher) -> dict[str, Any]:
    """Encrypt any value into the payload wire form.

    Values that already are Encrypted Payloads are kept as they are.
    """
    if isinstance(value, EncryptedPayload):
        return value.model_dump()
    if is_encrypted_payload(value):
        return dict(value)
    return cipher.encrypt(serialize_content(value)).model_dump()


def _client_value(value: Any, cipher: FieldCipher) -> Any:
    if isinstance(value, EncryptedPayload):
        return value.model_dump()
    if is_encrypted_payload(value):
        # Opaque leaf: its iv/ciphertext keys are the payload, not leaked metadata
        return dict(value)
    if isinstance(value, Mapping):
        return _client_mapping(value, cipher)
    if isinstance(value, (list, tuple)):
        return [_client_value(item, cipher) for item in value]
    return value


def _client_mapping(data: Mapping[str, Any], cipher: FieldCipher) -> dict[str, Any]:
    filtered: dict[str, Any] = {}

    for key, value in data.items():
        field_class = classify_field(key)

        if field_class is FieldClass.FORBIDDEN:
            continue

        if value is None:
            filtered[key] = None
        elif field_class is FieldClass.ENCRYPTED:
            filtered[key] = encrypt_value(value, cipher)
        elif field_class is FieldClass.MASKED and not isinstance(value, (Mapping, list, tuple)):
            filtered[key] = CLIENT_MASKERS[key](str(value))
        else:
            filtered[key] = _client_value(value, cipher)

    return filtered


def _internal_value(value: Any, cipher: FieldCipher) -> Any:
    if isinstance(value, EncryptedPayload):
        return value.model_dump()
    if is_encrypted_payload(value):
        return dict(value)
    if isinstance(value, Mapping):
        return _internal_mapping(value, cipher)
    if isinstance(value, (list, tuple)):
        return [_internal_value(item, cipher) for item in value]
    return value


def _internal_mapping(data: Mapping[str, Any], cipher: FieldCipher) -> dict[str, Any]:
    result: dict[str, Any] = {}

    for key, value in data.items():
        if key in ENCRYPT_FIELDS and value is not None:
            result[key] = encrypt_value(value, cipher)
        else:
            result[key] = _internal_value(value, cipher)

    for identifier in DISPLAY_MASKED_IDENTIFIERS:
        raw = data.get(identifier)
        if raw:
            result[display_field_name(identifier)] = mask_uuid(str(raw))

    return result


def filter_for_client(data: Any, *, cipher: FieldCipher | None = None) -> Any:
    """Project any JSON-like value into its client-safe form."""
    return _client_value(data, cipher if cipher is not None else get_cipher())


def filter_for_internal(data: Any, *, cipher: FieldCipher | None = None) -> Any:
    """Admin/engineer projection: nothing stripped, content still encrypted."""
    return _internal_value(data, cipher if cipher is not None else get_cipher())


def filter_response_by_role(
    data: Any,
    role: UserRole | str | None,
    owner_id: object | None = None,
    requester_id: object | None = None,
    *,
    cipher: FieldCipher | None = None,
) -> Any:
    """Filter a response according to the requester's role.

    Args:
        data: Object, list of objects or scalar from the data-access layer
        role: Requester role; unknown roles are treated as client
        owner_id: Tenant owning ``data``, when known
        requester_id: Requesting user, when known

    Raises:
        AccessDeniedError: A client requested data owned by another tenant
    """
    role = UserRole.parse(role)

    if (
        role is UserRole.CLIENT
        and owner_id is not None
        and requester_id is not None
        and str(owner_id) != str(requester_id)
    ):
        ACCESS_DENIALS.labels(role=role.value, reason="not_owner").inc()
        logger.warning("cross_tenant_response_denied", requester_id=str(requester_id))
        raise AccessDeniedError("Forbidden")

    FILTERED_RESPONSES.labels(role=role.value).inc()

    if role.is_internal:
        return filter_for_internal(data, cipher=cipher)
    return filter_for_client(data, cipher=cipher)
