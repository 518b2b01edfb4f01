"""In-memory implementation of the VideoRepository port."""

import itertools
import threading
from typing import Any

from video_api.application.interfaces import VideoRepository
from video_api.domain.entities import Video


class InMemoryVideoRepository(VideoRepository):
    """Keeps videos in a process-local list guarded by a single lock.

    IDs come from a counter that only moves forward, so an ID is never
    handed out twice within the process, even after ``clear()``.
    """

    def __init__(self) -> None:
        self._videos: list[Video] = []
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def _find(self, video_id: int) -> Video | None:
        return next((v for v in self._videos if v.id == video_id), None)

    async def get_all(self) -> list[Video]:
        with self._lock:
            return list(self._videos)

    async def get_by_id(self, video_id: int) -> Video | None:
        with self._lock:
            return self._find(video_id)

    async def add(self, video: Video) -> Video:
        with self._lock:
            video.id = next(self._ids)
            self._videos.append(video)
            return video

    async def update_fields(self, video_id: int, changes: dict[str, Any]) -> Video | None:
        with self._lock:
            video = self._find(video_id)
            if video is None:
                return None
            video.update(**changes)
            return video

    async def delete(self, video_id: int) -> bool:
        with self._lock:
            video = self._find(video_id)
            if video is None:
                return False
            self._videos.remove(video)
            return True

    async def clear(self) -> None:
        with self._lock:
            self._videos.clear()
