"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Request

from video_api.application.interfaces import VideoRepository
from video_api.application.services import VideoService


def get_video_repository(request: Request) -> VideoRepository:
    """The store owned by the running application (created in ``create_app``)."""
    return request.app.state.video_repository


async def get_video_service(request: Request) -> AsyncGenerator[VideoService, None]:
    """Provides a VideoService bound to the application's store."""
    yield VideoService(get_video_repository(request))
