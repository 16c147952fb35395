"""API route registration."""

from fastapi import APIRouter, FastAPI

from callguard.observability.logging import get_logger

logger = get_logger(__name__)


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all routes."""
    router = APIRouter(prefix="/v1")

    from callguard.api.routes.content import router as content_router

    router.include_router(content_router, tags=["Content"])

    return router


def register_routes(
    app: FastAPI,
    *,
    metrics_enabled: bool = True,
    metrics_path: str = "/metrics",
) -> None:
    """Register all routes with the FastAPI application."""
    app.include_router(create_v1_router())

    from callguard.api.routes.health import metrics
    from callguard.api.routes.health import router as health_router

    app.include_router(health_router, tags=["Health"])
    if metrics_enabled:
        app.add_api_route(
            metrics_path,
            metrics,
            methods=["GET"],
            tags=["Health"],
            include_in_schema=False,
        )

    logger.info("routes_registered", metrics_enabled=metrics_enabled)
