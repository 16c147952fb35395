"""Content encryption configuration."""

from pydantic import BaseModel, Field, SecretStr

MIN_KEY_BYTES = 32


class CryptoConfig(BaseModel):
    """Key material for transcript/summary encryption.

    The key never has a default. An unset or short key is not rejected here:
    the cipher refuses every operation instead, so a misconfigured process
    still starts and serves the endpoints that don't touch content.
    """

    transcript_key: SecretStr | None = Field(
        default=None,
        description="Secret for AES-256-GCM content encryption (>= 32 bytes)",
    )
    algorithm: str = Field(
        default="AES-256-GCM",
        description="Content encryption algorithm; only AES-256-GCM is supported",
    )
