"""Abstract repository interface (port) for Video storage."""

from abc import ABC, abstractmethod
from typing import Any

from video_api.domain.entities import Video


class VideoRepository(ABC):
    """Port for the video store — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_all(self) -> list[Video]:
        """Retrieve every live video in insertion order."""
        ...

    @abstractmethod
    async def get_by_id(self, video_id: int) -> Video | None:
        """Retrieve a single video by its ID."""
        ...

    @abstractmethod
    async def add(self, video: Video) -> Video:
        """Assign a fresh unique ID, store the video and return it."""
        ...

    @abstractmethod
    async def update_fields(self, video_id: int, changes: dict[str, Any]) -> Video | None:
        """Apply ``changes`` to the stored video. Returns None if not found."""
        ...

    @abstractmethod
    async def delete(self, video_id: int) -> bool:
        """Delete a video. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    async def clear(self) -> None:
        """Remove every video."""
        ...
