"""Fixtures for API tests."""

from collections.abc import Callable

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from jose import jwt

from callguard.access.stores import InMemoryResourceOwnershipStore
from callguard.api.app import create_app
from callguard.api.dependencies import get_cipher, get_ownership_store, reset_dependencies
from callguard.api.middleware.auth import JWT_SECRET_ENV
from callguard.privacy.encryption import FieldCipher

JWT_SECRET = "test-jwt-secret"


@pytest.fixture
def ownership_store() -> InMemoryResourceOwnershipStore:
    """Store with one client call and one engineer demo call."""
    store = InMemoryResourceOwnershipStore()
    store.add_call("call-a", "tenant-a")
    store.add_demo_call("demo-1", "eng-1")
    return store


@pytest.fixture
def app(
    monkeypatch: pytest.MonkeyPatch,
    cipher: FieldCipher,
    ownership_store: InMemoryResourceOwnershipStore,
) -> FastAPI:
    """Create test FastAPI app."""
    monkeypatch.setenv(JWT_SECRET_ENV, JWT_SECRET)
    reset_dependencies()

    app = create_app()
    app.dependency_overrides[get_cipher] = lambda: cipher
    app.dependency_overrides[get_ownership_store] = lambda: ownership_store
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Test client."""
    return TestClient(app)


@pytest.fixture
def auth_headers() -> Callable[..., dict[str, str]]:
    """Factory for bearer headers signed with the test secret."""

    def _headers(user_id: str, role: str | None = None, secret: str = JWT_SECRET) -> dict[str, str]:
        claims: dict[str, str] = {"sub": user_id}
        if role is not None:
            claims["role"] = role
        token = jwt.encode(claims, secret, algorithm="HS256")
        return {"Authorization": f"Bearer {token}"}

    return _headers
