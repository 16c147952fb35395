"""Resource ownership stores."""

from callguard.access.store import ResourceOwnershipStore
from callguard.access.stores.inmemory import InMemoryResourceOwnershipStore

__all__ = [
    "InMemoryResourceOwnershipStore",
    "ResourceOwnershipStore",
]
