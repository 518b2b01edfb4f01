from .video_validator import (
    ValidationMode,
    parse_timestamp,
    validate_video_input,
)

__all__ = [
    "ValidationMode",
    "parse_timestamp",
    "validate_video_input",
]
