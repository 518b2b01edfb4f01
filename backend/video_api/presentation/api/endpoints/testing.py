"""Test-support endpoints — mounted only when enabled in settings."""

from fastapi import APIRouter, Depends, Response, status

from video_api.application.services import VideoService
from video_api.infrastructure.dependencies import get_video_service

router = APIRouter(prefix="/testing", tags=["Testing"])


@router.delete("/all-data", status_code=status.HTTP_204_NO_CONTENT)
async def delete_all_data(
    service: VideoService = Depends(get_video_service),
) -> Response:
    """Remove every video from the store."""
    await service.reset_all()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
