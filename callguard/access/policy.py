"""Authorization for reading decrypted call content."""

from callguard.access.models import RequesterContext
from callguard.access.store import ResourceOwnershipStore
from callguard.errors import AccessDeniedError
from callguard.observability.logging import get_logger
from callguard.observability.metrics import ACCESS_DENIALS
from callguard.privacy.roles import UserRole

logger = get_logger(__name__)


def _deny(requester: RequesterContext, resource_id: str, reason: str) -> AccessDeniedError:
    ACCESS_DENIALS.labels(role=requester.role.value, reason=reason).inc()
    logger.warning(
        "content_access_denied",
        user_id=requester.user_id,
        role=requester.role.value,
        resource_id=resource_id,
        reason=reason,
    )
    return AccessDeniedError("Access denied")


async def authorize_content_access(
    requester: RequesterContext,
    resource_id: str | None,
    store: ResourceOwnershipStore,
) -> None:
    """Check that ``requester`` may decrypt content of ``resource_id``.

    - Admins: always.
    - Clients: only calls they own. Resources with no recorded owner are
      not blocked.
    - Engineers: demo calls they ran; another engineer's demo call only
      while they hold at least one assigned task.

    Payloads sent without a resource id are not resource-scoped and pass.

    Raises:
        AccessDeniedError: The requester may not read this content
    """
    if not resource_id or requester.role is UserRole.ADMIN:
        return

    if requester.role is UserRole.CLIENT:
        owner = await store.get_call_owner(resource_id)
        if owner is not None and owner != requester.user_id:
            raise _deny(requester, resource_id, "not_call_owner")
        return

    engineer = await store.get_demo_call_engineer(resource_id)
    if engineer is not None and engineer != requester.user_id:
        if await store.count_assigned_tasks(requester.user_id) == 0:
            raise _deny(requester, resource_id, "no_assigned_tasks")
