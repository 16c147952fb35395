"""Health check and metrics endpoints."""

from datetime import UTC, datetime

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from callguard import __version__
from callguard.api.dependencies import CipherDep, SettingsDep
from callguard.api.models.health import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: SettingsDep, cipher: CipherDep) -> HealthResponse:
    """Report liveness; degraded while no usable encryption key is set."""
    return HealthResponse(
        status="healthy" if cipher.configured else "degraded",
        version=__version__,
        environment=settings.environment,
        encryption_configured=cipher.configured,
        timestamp=datetime.now(UTC),
    )


async def metrics() -> Response:
    """Prometheus exposition of the default registry."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
