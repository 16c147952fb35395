"""AES-256-GCM encryption for transcripts, summaries and notes.

Ciphertext is hex with the 16-byte GCM tag appended, the same layout WebCrypto
produces, so payloads written by either side decrypt on the other. The key
lives only in server configuration; decryption belongs in trusted endpoints
after authorization.
"""

import binascii
import os
from collections.abc import Mapping
from functools import lru_cache
from typing import Any, Literal

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from pydantic import BaseModel, ConfigDict, SecretStr, ValidationError

from callguard.config import get_settings
from callguard.config.models.crypto import MIN_KEY_BYTES
from callguard.errors import ConfigurationError, DecryptionError, UnsupportedAlgorithmError
from callguard.observability.logging import get_logger
from callguard.observability.metrics import CONTENT_DECRYPTIONS, CONTENT_ENCRYPTIONS

logger = get_logger(__name__)

ALGORITHM = "AES-256-GCM"
NONCE_BYTES = 12
TAG_BYTES = 16
PAYLOAD_KEYS = frozenset({"ciphertext", "iv", "encrypted", "alg"})


class EncryptedPayload(BaseModel):
    """Opaque wire form of an encrypted field."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    ciphertext: str
    """Hex ciphertext including the GCM authentication tag."""

    iv: str
    """Hex 96-bit nonce."""

    encrypted: Literal[True] = True

    alg: str = ALGORITHM
    """Algorithm tag; anything but AES-256-GCM is refused on decrypt."""

    @property
    def is_empty(self) -> bool:
        """Sentinel for "no content", not an encryption of ``""``."""
        return not self.ciphertext and not self.iv


def is_encrypted_payload(value: Any) -> bool:
    """Structural check for an Encrypted Payload in model or dict form.

    A mapping qualifies only with exactly the four wire keys, string
    ``ciphertext`` and ``iv`` and the supported ``alg``. Anything carrying
    extra keys is an ordinary mapping and gets filtered like one.
    """
    if isinstance(value, EncryptedPayload):
        return True
    return (
        isinstance(value, Mapping)
        and set(value) == PAYLOAD_KEYS
        and value["encrypted"] is True
        and value["alg"] == ALGORITHM
        and isinstance(value["ciphertext"], str)
        and isinstance(value["iv"], str)
    )


class FieldCipher:
    """Authenticated symmetric cipher for sensitive content fields.

    The key is injected; ``get_cipher()`` builds the process-wide instance from
    settings. A missing or short key makes every call raise
    ``ConfigurationError`` before any cryptographic work, so content is never
    passed through in clear.
    """

    def __init__(self, key: str | bytes | SecretStr | None) -> None:
        if isinstance(key, SecretStr):
            key = key.get_secret_value()
        if isinstance(key, str):
            key = key.encode("utf-8")
        self._key: bytes | None = key or None

    @property
    def configured(self) -> bool:
        return self._key is not None and len(self._key) >= MIN_KEY_BYTES

    def _aead(self) -> AESGCM:
        key = self._key
        if key is None or len(key) < MIN_KEY_BYTES:
            raise ConfigurationError(
                f"Transcript encryption key not configured or shorter than {MIN_KEY_BYTES} bytes"
            )
        return AESGCM(key[:MIN_KEY_BYTES])

    def encrypt(self, plaintext: str) -> EncryptedPayload:
        """Encrypt ``plaintext`` under a fresh random nonce."""
        aead = self._aead()
        if not plaintext:
            return EncryptedPayload(ciphertext="", iv="")

        nonce = os.urandom(NONCE_BYTES)
        ciphertext = aead.encrypt(nonce, plaintext.encode("utf-8"), None)
        CONTENT_ENCRYPTIONS.inc()

        return EncryptedPayload(ciphertext=ciphertext.hex(), iv=nonce.hex())

    def decrypt(self, payload: EncryptedPayload | Mapping[str, Any]) -> str:
        """Decrypt a payload produced by ``encrypt``.

        Raises:
            ConfigurationError: Key missing or too short
            UnsupportedAlgorithmError: ``alg`` is not AES-256-GCM
            DecryptionError: Malformed payload, wrong key or tag mismatch
        """
        aead = self._aead()
        payload = self._coerce(payload)

        if payload.alg != ALGORITHM:
            CONTENT_DECRYPTIONS.labels(outcome="unsupported").inc()
            raise UnsupportedAlgorithmError(payload.alg)

        if payload.is_empty:
            return ""
        if not payload.ciphertext or not payload.iv:
            raise self._failure("Encrypted payload is missing ciphertext or iv")

        try:
            nonce = binascii.unhexlify(payload.iv)
            ciphertext = binascii.unhexlify(payload.ciphertext)
        except (binascii.Error, ValueError) as e:
            raise self._failure("Encrypted payload is not valid hex") from e

        if len(nonce) != NONCE_BYTES:
            raise self._failure(f"Nonce must be {NONCE_BYTES} bytes")
        if len(ciphertext) < TAG_BYTES:
            raise self._failure("Ciphertext is shorter than the authentication tag")

        try:
            plaintext = aead.decrypt(nonce, ciphertext, None)
        except InvalidTag as e:
            raise self._failure("Authentication tag verification failed") from e

        try:
            text = plaintext.decode("utf-8")
        except UnicodeDecodeError as e:
            raise self._failure("Decrypted content is not valid UTF-8") from e

        CONTENT_DECRYPTIONS.labels(outcome="success").inc()
        return text

    def _coerce(self, payload: EncryptedPayload | Mapping[str, Any]) -> EncryptedPayload:
        if isinstance(payload, EncryptedPayload):
            return payload
        try:
            return EncryptedPayload.model_validate(dict(payload))
        except (ValidationError, TypeError, ValueError) as e:
            raise self._failure("Invalid encrypted payload") from e

    @staticmethod
    def _failure(message: str) -> DecryptionError:
        CONTENT_DECRYPTIONS.labels(outcome="failure").inc()
        logger.warning("content_decryption_failed", reason=message)
        return DecryptionError(message)


@lru_cache(maxsize=1)
def get_cipher() -> FieldCipher:
    """Process-wide cipher keyed from ``settings.crypto.transcript_key``.

    Raises:
        ConfigurationError: ``settings.crypto.algorithm`` is not AES-256-GCM
    """
    crypto = get_settings().crypto
    if crypto.algorithm != ALGORITHM:
        raise ConfigurationError(
            f"Unsupported content encryption algorithm: {crypto.algorithm!r}"
        )
    cipher = FieldCipher(crypto.transcript_key)
    logger.info("content_cipher_initialized", configured=cipher.configured)
    return cipher
