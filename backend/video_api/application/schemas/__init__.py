from .video import (
    ErrorsResponse,
    FieldErrorSchema,
    VideoCreate,
    VideoResponse,
    VideoUpdate,
    format_timestamp,
)

__all__ = [
    "ErrorsResponse",
    "FieldErrorSchema",
    "VideoCreate",
    "VideoResponse",
    "VideoUpdate",
    "format_timestamp",
]
