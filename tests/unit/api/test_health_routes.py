"""Unit tests for health and metrics endpoints."""

from fastapi import FastAPI
from fastapi.testclient import TestClient

from callguard.api.dependencies import get_cipher
from callguard.privacy.encryption import FieldCipher


class TestHealthEndpoint:
    """Tests for GET /health."""

    def test_healthy_with_key(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["encryption_configured"] is True
        assert data["version"]

    def test_degraded_without_key(self, app: FastAPI, client: TestClient) -> None:
        app.dependency_overrides[get_cipher] = lambda: FieldCipher(None)
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "degraded"
        assert response.json()["encryption_configured"] is False

    def test_no_auth_required(self, client: TestClient) -> None:
        assert client.get("/health").status_code == 200


class TestMetricsEndpoint:
    """Tests for GET /metrics."""

    def test_exposes_prometheus_text(self, client: TestClient) -> None:
        response = client.get("/metrics")
        assert response.status_code == 200
        assert "callguard_" in response.text
