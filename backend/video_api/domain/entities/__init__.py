from .video import PUBLICATION_DELAY, Resolution, Video

__all__ = [
    "PUBLICATION_DELAY",
    "Resolution",
    "Video",
]
