"""Output contract check for client responses."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field

from callguard.privacy.classification import CLIENT_FORBIDDEN_FIELDS
from callguard.privacy.encryption import is_encrypted_payload


class ResponseValidation(BaseModel):
    """Result of scanning a response for forbidden fields."""

    valid: bool
    violations: list[str] = Field(default_factory=list)
    """Dotted paths of forbidden keys; list positions appear as indices."""


def validate_client_response(data: Any) -> ResponseValidation:
    """Report every forbidden field name still present in ``data``.

    Encrypted Payloads are opaque and not descended into.
    """
    violations: list[str] = []

    def check(node: Any, path: str) -> None:
        if is_encrypted_payload(node):
            return
        if isinstance(node, Mapping):
            items = [(str(key), value) for key, value in node.items()]
        elif isinstance(node, (list, tuple)):
            items = [(str(index), value) for index, value in enumerate(node)]
        else:
            return

        for key, value in items:
            full_path = f"{path}.{key}" if path else key
            if key in CLIENT_FORBIDDEN_FIELDS:
                violations.append(full_path)
            check(value, full_path)

    check(data, "")

    return ResponseValidation(valid=not violations, violations=violations)
