"""Decrypt-content endpoint.

The only place encrypted transcripts, summaries and notes are turned back
into text. Frontends never decrypt; they send the payload here after the
requester has been authenticated and authorized for the resource.
"""

from fastapi import APIRouter

from callguard.access.policy import authorize_content_access
from callguard.api.dependencies import CipherDep, OwnershipStoreDep
from callguard.api.exceptions import InvalidRequestError
from callguard.api.middleware.auth import RequesterContextDep
from callguard.api.models.content import DecryptContentRequest, DecryptContentResponse
from callguard.content.transcript import parse_transcript
from callguard.observability.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.post("/decrypt-content", response_model=DecryptContentResponse)
async def decrypt_content(
    body: DecryptContentRequest,
    requester: RequesterContextDep,
    store: OwnershipStoreDep,
    cipher: CipherDep,
) -> DecryptContentResponse:
    """Decrypt one payload for an authorized requester."""
    if body.encrypted_payload.is_empty:
        raise InvalidRequestError("Invalid encrypted payload")

    await authorize_content_access(requester, body.resource_id, store)

    content = cipher.decrypt(body.encrypted_payload)

    logger.info(
        "content_decrypted",
        content_type=body.type,
        resource_id=body.resource_id,
        user_id=requester.user_id,
        role=requester.role.value,
    )

    return DecryptContentResponse(
        content=content,
        type=body.type,
        resource_id=body.resource_id,
        messages=parse_transcript(content) if body.type == "transcript" else None,
    )
