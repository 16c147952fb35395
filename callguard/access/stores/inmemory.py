"""In-memory implementation of ResourceOwnershipStore."""

from callguard.access.store import ResourceOwnershipStore


class InMemoryResourceOwnershipStore(ResourceOwnershipStore):
    """Dict-backed ownership lookups for testing and development.

    Not suitable for production use.
    """

    def __init__(self) -> None:
        self._call_owners: dict[str, str] = {}
        self._demo_call_engineers: dict[str, str] = {}
        self._task_assignees: dict[str, str] = {}

    def add_call(self, call_id: str, client_id: str) -> None:
        self._call_owners[call_id] = client_id

    def add_demo_call(self, demo_call_id: str, engineer_id: str) -> None:
        self._demo_call_engineers[demo_call_id] = engineer_id

    def assign_task(self, task_id: str, user_id: str) -> None:
        self._task_assignees[task_id] = user_id

    async def get_call_owner(self, call_id: str) -> str | None:
        return self._call_owners.get(call_id)

    async def get_demo_call_engineer(self, demo_call_id: str) -> str | None:
        return self._demo_call_engineers.get(demo_call_id)

    async def count_assigned_tasks(self, user_id: str) -> int:
        return sum(1 for assignee in self._task_assignees.values() if assignee == user_id)
