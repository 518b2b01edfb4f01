"""Video CRUD endpoints."""

from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status

from video_api.application.schemas import ErrorsResponse, VideoResponse
from video_api.application.services import VideoService
from video_api.domain.exceptions import EntityNotFoundError
from video_api.infrastructure.dependencies import get_video_service

router = APIRouter(prefix="/videos", tags=["Videos"])

_VALIDATION_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorsResponse},
}
_NOT_FOUND_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_404_NOT_FOUND: {"description": "Video not found"},
}


def _not_found() -> Response:
    return Response(status_code=status.HTTP_404_NOT_FOUND)


@router.get("", response_model=list[VideoResponse])
async def list_videos(
    service: VideoService = Depends(get_video_service),
) -> list[VideoResponse]:
    """Retrieve every video in creation order."""
    videos = await service.list_videos()
    return [VideoResponse.model_validate(v, from_attributes=True) for v in videos]


@router.get(
    "/{video_id}", response_model=VideoResponse, responses=_NOT_FOUND_RESPONSES
)
async def get_video(
    video_id: int,
    service: VideoService = Depends(get_video_service),
) -> VideoResponse | Response:
    """Retrieve a single video by ID."""
    try:
        video = await service.get_video(video_id)
    except EntityNotFoundError:
        return _not_found()
    return VideoResponse.model_validate(video, from_attributes=True)


@router.post(
    "",
    response_model=VideoResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_VALIDATION_RESPONSES,
)
async def create_video(
    payload: dict[str, Any] = Body(..., examples=[{"title": "Intro", "author": "Jane"}]),
    service: VideoService = Depends(get_video_service),
) -> VideoResponse:
    """Create a new video. Invalid payloads are answered with 400 by the app handler."""
    video = await service.create_video(payload)
    return VideoResponse.model_validate(video, from_attributes=True)


@router.put(
    "/{video_id}",
    response_model=VideoResponse,
    responses={**_VALIDATION_RESPONSES, **_NOT_FOUND_RESPONSES},
)
async def update_video(
    video_id: int,
    payload: dict[str, Any] = Body(...),
    service: VideoService = Depends(get_video_service),
) -> VideoResponse | Response:
    """Update only the fields present in the payload."""
    try:
        video = await service.update_video(video_id, payload)
    except EntityNotFoundError:
        return _not_found()
    return VideoResponse.model_validate(video, from_attributes=True)


@router.delete(
    "/{video_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=_NOT_FOUND_RESPONSES,
)
async def delete_video(
    video_id: int,
    service: VideoService = Depends(get_video_service),
) -> Response:
    """Delete a video by ID."""
    try:
        await service.delete_video(video_id)
    except EntityNotFoundError:
        return _not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
