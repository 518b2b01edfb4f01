"""Top-level API router — aggregates the endpoint routers."""

from fastapi import APIRouter

from video_api.config import Settings
from video_api.presentation.api.endpoints.health import router as health_router
from video_api.presentation.api.endpoints.testing import router as testing_router
from video_api.presentation.api.endpoints.videos import router as videos_router


def build_api_router(settings: Settings) -> APIRouter:
    """Mount the endpoint routers under the configured prefix."""
    router = APIRouter(prefix=settings.api_prefix)
    router.include_router(health_router)
    router.include_router(videos_router)
    if settings.enable_testing_routes:
        router.include_router(testing_router)
    return router
