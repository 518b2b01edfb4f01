from .video_service import VideoService

__all__ = [
    "VideoService",
]
