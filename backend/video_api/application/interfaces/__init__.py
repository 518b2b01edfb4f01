from .video_repository import VideoRepository

__all__ = [
    "VideoRepository",
]
