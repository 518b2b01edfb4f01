from .video_repository import InMemoryVideoRepository

__all__ = [
    "InMemoryVideoRepository",
]
