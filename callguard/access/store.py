"""ResourceOwnershipStore abstract interface."""

from abc import ABC, abstractmethod


class ResourceOwnershipStore(ABC):
    """Answers who owns a call-related resource.

    Lookups return None for unknown resources; callers decide what an
    unknown resource means for access.
    """

    @abstractmethod
    async def get_call_owner(self, call_id: str) -> str | None:
        """Client id owning a call."""
        pass

    @abstractmethod
    async def get_demo_call_engineer(self, demo_call_id: str) -> str | None:
        """Engineer id that ran a demo call."""
        pass

    @abstractmethod
    async def count_assigned_tasks(self, user_id: str) -> int:
        """Number of tasks currently assigned to a user."""
        pass
