"""Display masking for personal data.

Every function here is total: absent or malformed input yields a fixed
placeholder instead of an error. Masking is a presentation concern; the
security boundary is field stripping and encryption.
"""

PHONE_PLACEHOLDER = "****"
EMAIL_PLACEHOLDER = "***@***.***"
NAME_PLACEHOLDER = "***"
UUID_PLACEHOLDER = "********"
SYSTEM_PROMPT_MARKER = "[System prompt configured]"

VISIBLE_PHONE_DIGITS = 4
VISIBLE_UUID_CHARS = 8


def mask_phone(phone: str | None) -> str:
    """Keep the last four characters, star the rest.

    >>> mask_phone("+919876543210")
    '*********3210'
    """
    if not phone or len(phone) <= VISIBLE_PHONE_DIGITS:
        return PHONE_PLACEHOLDER
    hidden = len(phone) - VISIBLE_PHONE_DIGITS
    return "*" * hidden + phone[-VISIBLE_PHONE_DIGITS:]


def mask_email(email: str | None) -> str:
    """First letter of the local part plus the domain.

    >>> mask_email("jane.doe@example.com")
    'j***@example.com'
    """
    if not email:
        return EMAIL_PLACEHOLDER
    parts = email.split("@")
    local_part = parts[0]
    domain = parts[1] if len(parts) > 1 else ""
    if not local_part or not domain:
        return EMAIL_PLACEHOLDER
    return f"{local_part[0]}***@{domain}"


def mask_full_name(name: str | None) -> str:
    """Initials only.

    >>> mask_full_name("Jane Q Doe")
    'J.Q.D.'
    """
    if not name:
        return NAME_PLACEHOLDER
    tokens = name.split() or [""]
    return ".".join(token[:1].upper() or "*" for token in tokens) + "."


def mask_uuid(value: str | None) -> str:
    """First eight characters of an identifier."""
    if not value:
        return UUID_PLACEHOLDER
    return value[:VISIBLE_UUID_CHARS] + "..."


def mask_system_prompt(prompt: str | None) -> str | None:
    # Presence only; the prompt text never leaves the backend
    if not prompt:
        return None
    return SYSTEM_PROMPT_MARKER
