"""Application service (use case) for Video operations."""

import logging
from collections.abc import Mapping
from typing import Any

from video_api.application.interfaces import VideoRepository
from video_api.application.schemas import VideoCreate, VideoUpdate
from video_api.application.validators import ValidationMode, validate_video_input
from video_api.domain.entities import Resolution, Video
from video_api.domain.exceptions import EntityNotFoundError, ValidationFailedError

logger = logging.getLogger(__name__)


class VideoService:
    """Validates payloads and applies them to the store. Depends on the repository port (DI).

    Nothing reaches the repository until validation passes, so a rejected
    payload never leaves a record partially updated.
    """

    def __init__(self, repository: VideoRepository):
        self._repository = repository

    def _ensure_valid(self, payload: Mapping[str, Any], mode: ValidationMode) -> None:
        errors = validate_video_input(payload, mode)
        if errors:
            logger.debug(
                "Rejected %s payload: %s", mode.value, [e.field for e in errors]
            )
            raise ValidationFailedError(errors)

    async def list_videos(self) -> list[Video]:
        return await self._repository.get_all()

    async def get_video(self, video_id: int) -> Video:
        video = await self._repository.get_by_id(video_id)
        if video is None:
            raise EntityNotFoundError("Video", video_id)
        return video

    async def create_video(self, payload: Mapping[str, Any]) -> Video:
        self._ensure_valid(payload, ValidationMode.CREATE)
        data = VideoCreate.model_validate(payload)
        video = Video(
            title=data.title,
            author=data.author,
            available_resolutions=list(data.available_resolutions),
            can_be_downloaded=data.can_be_downloaded,
            min_age_restriction=data.min_age_restriction,
        )
        video = await self._repository.add(video)
        logger.info("Created video %s (%r by %r)", video.id, video.title, video.author)
        return video

    async def update_video(self, video_id: int, payload: Mapping[str, Any]) -> Video:
        await self.get_video(video_id)
        self._ensure_valid(payload, ValidationMode.UPDATE)
        changes = VideoUpdate.model_validate(payload).changes()
        video = await self._repository.update_fields(video_id, changes)
        if video is None:
            raise EntityNotFoundError("Video", video_id)
        logger.info("Updated video %s: %s", video_id, sorted(changes))
        return video

    async def delete_video(self, video_id: int) -> None:
        if not await self._repository.delete(video_id):
            raise EntityNotFoundError("Video", video_id)
        logger.info("Deleted video %s", video_id)

    async def reset_all(self) -> None:
        await self._repository.clear()
        logger.info("Removed all videos")

    async def seed_sample_video(self) -> Video:
        """Insert the demo record the service starts with."""
        video = Video(
            title="Test Video 1",
            author="Author 1",
            available_resolutions=[Resolution.P720],
        )
        return await self._repository.add(video)
