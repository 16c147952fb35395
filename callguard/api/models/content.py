"""Request and response models for the decrypt-content endpoint."""

from typing import Literal

from pydantic import BaseModel, Field

from callguard.content.transcript import TranscriptMessage
from callguard.privacy.encryption import EncryptedPayload

ContentType = Literal["transcript", "summary", "notes"]


class DecryptContentRequest(BaseModel):
    type: ContentType
    resource_id: str | None = Field(
        default=None,
        description="Call or demo call the payload belongs to",
    )
    encrypted_payload: EncryptedPayload


class DecryptContentResponse(BaseModel):
    content: str
    type: ContentType
    resource_id: str | None = None
    messages: list[TranscriptMessage] | None = Field(
        default=None,
        description="Speaker-tagged messages, for transcripts only",
    )
