"""Dependency injection for API routes.

Dependencies can be overridden through ``app.dependency_overrides`` in tests.
"""

from typing import Annotated

from fastapi import Depends

from callguard.access.store import ResourceOwnershipStore
from callguard.access.stores.inmemory import InMemoryResourceOwnershipStore
from callguard.config import get_settings as _load_settings
from callguard.config.settings import Settings
from callguard.observability.logging import get_logger
from callguard.privacy.encryption import FieldCipher
from callguard.privacy.encryption import get_cipher as _load_cipher

logger = get_logger(__name__)

_ownership_store: ResourceOwnershipStore | None = None


def get_settings() -> Settings:
    return _load_settings()


def get_cipher() -> FieldCipher:
    return _load_cipher()


def get_ownership_store() -> ResourceOwnershipStore:
    """Shared ownership store.

    Defaults to the in-memory store until ``set_ownership_store`` installs a
    database-backed one at startup.
    """
    global _ownership_store
    if _ownership_store is None:
        _ownership_store = InMemoryResourceOwnershipStore()
        logger.warning("ownership_store_inmemory")
    return _ownership_store


def set_ownership_store(store: ResourceOwnershipStore) -> None:
    global _ownership_store
    _ownership_store = store


def reset_dependencies() -> None:
    """Drop shared instances (used by tests)."""
    global _ownership_store
    _ownership_store = None
    _load_cipher.cache_clear()


SettingsDep = Annotated[Settings, Depends(get_settings)]
CipherDep = Annotated[FieldCipher, Depends(get_cipher)]
OwnershipStoreDep = Annotated[ResourceOwnershipStore, Depends(get_ownership_store)]
