"""Unit tests for InMemoryResourceOwnershipStore."""

import pytest

from callguard.access.stores import InMemoryResourceOwnershipStore


@pytest.fixture
def store() -> InMemoryResourceOwnershipStore:
    return InMemoryResourceOwnershipStore()


class TestInMemoryResourceOwnershipStore:
    """Tests for the dict-backed store."""

    @pytest.mark.asyncio
    async def test_call_owner(self, store: InMemoryResourceOwnershipStore) -> None:
        store.add_call("call-1", "tenant-a")
        assert await store.get_call_owner("call-1") == "tenant-a"
        assert await store.get_call_owner("call-2") is None

    @pytest.mark.asyncio
    async def test_demo_call_engineer(self, store: InMemoryResourceOwnershipStore) -> None:
        store.add_demo_call("demo-1", "eng-1")
        assert await store.get_demo_call_engineer("demo-1") == "eng-1"
        assert await store.get_demo_call_engineer("demo-2") is None

    @pytest.mark.asyncio
    async def test_count_assigned_tasks(self, store: InMemoryResourceOwnershipStore) -> None:
        store.assign_task("t-1", "eng-1")
        store.assign_task("t-2", "eng-1")
        store.assign_task("t-3", "eng-2")
        assert await store.count_assigned_tasks("eng-1") == 2
        assert await store.count_assigned_tasks("eng-3") == 0

    @pytest.mark.asyncio
    async def test_reassigning_task_moves_it(self, store: InMemoryResourceOwnershipStore) -> None:
        store.assign_task("t-1", "eng-1")
        store.assign_task("t-1", "eng-2")
        assert await store.count_assigned_tasks("eng-1") == 0
        assert await store.count_assigned_tasks("eng-2") == 1
