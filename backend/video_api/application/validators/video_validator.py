"""Field validation for video create/update payloads.

The validator works on the raw parsed JSON object rather than on a pydantic
model so that a key that is absent, a key sent as ``null`` and a key sent
with a falsy value can be told apart. Every rule runs independently and all
violations are returned together.
"""

from collections.abc import Mapping
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from video_api.domain.entities import Resolution
from video_api.domain.exceptions import FieldError

MAX_TITLE_LENGTH = 40
MAX_AUTHOR_LENGTH = 20
MIN_AGE_RESTRICTION = 1
MAX_AGE_RESTRICTION = 18

_MISSING = object()


class ValidationMode(str, Enum):
    """Which rules are mandatory: creation requires title and author."""

    CREATE = "create"
    UPDATE = "update"


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 date or date-time into an aware UTC datetime.

    Naive values are taken as UTC. Raises ``ValueError`` when unparseable or
    when the UTC shift leaves the representable calendar range.
    """
    parsed = datetime.fromisoformat(value.strip())
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    try:
        return parsed.astimezone(timezone.utc)
    except OverflowError as exc:
        raise ValueError(f"Timestamp out of range: {value!r}") from exc


def _is_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def _check_text(
    payload: Mapping[str, Any],
    key: str,
    label: str,
    max_length: int,
    mode: ValidationMode,
) -> FieldError | None:
    value = payload.get(key, _MISSING)
    if mode is ValidationMode.CREATE and (value is _MISSING or not value):
        return FieldError(message=f"{label} is required", field=key)
    if value is _MISSING:
        return None
    if not isinstance(value, str) or not 1 <= len(value.strip()) <= max_length:
        return FieldError(
            message=f"{label} must be a non-empty string of at most {max_length} characters",
            field=key,
        )
    return None


def _check_resolutions(payload: Mapping[str, Any]) -> FieldError | None:
    if "availableResolutions" not in payload:
        return None
    value = payload["availableResolutions"]
    allowed = Resolution.labels()
    if not isinstance(value, (list, tuple)) or any(
        not isinstance(item, str) or item not in allowed for item in value
    ):
        return FieldError(
            message=f"Invalid resolutions. Allowed: {', '.join(allowed)}",
            field="availableResolutions",
        )
    return None


def _check_can_be_downloaded(payload: Mapping[str, Any]) -> FieldError | None:
    if "canBeDownloaded" in payload and not isinstance(payload["canBeDownloaded"], bool):
        return FieldError(message="canBeDownloaded must be boolean", field="canBeDownloaded")
    return None


def _check_min_age_restriction(payload: Mapping[str, Any]) -> FieldError | None:
    value = payload.get("minAgeRestriction")
    if value is None:
        return None
    if not _is_integer(value) or not MIN_AGE_RESTRICTION <= value <= MAX_AGE_RESTRICTION:
        return FieldError(
            message=(
                f"minAgeRestriction must be integer between "
                f"{MIN_AGE_RESTRICTION} and {MAX_AGE_RESTRICTION}"
            ),
            field="minAgeRestriction",
        )
    return None


def _check_publication_date(
    payload: Mapping[str, Any], mode: ValidationMode
) -> FieldError | None:
    if mode is not ValidationMode.UPDATE or "publicationDate" not in payload:
        return None
    value = payload["publicationDate"]
    if isinstance(value, str):
        try:
            parse_timestamp(value)
            return None
        except (ValueError, OverflowError):
            pass
    return FieldError(message="publicationDate must be valid ISO date", field="publicationDate")


def validate_video_input(
    payload: Mapping[str, Any], mode: ValidationMode = ValidationMode.CREATE
) -> list[FieldError]:
    """Return every field violation in ``payload``; an empty list means accepted."""
    checks = (
        _check_text(payload, "title", "Title", MAX_TITLE_LENGTH, mode),
        _check_text(payload, "author", "Author", MAX_AUTHOR_LENGTH, mode),
        _check_resolutions(payload),
        _check_can_be_downloaded(payload),
        _check_min_age_restriction(payload),
        _check_publication_date(payload, mode),
    )
    return [error for error in checks if error is not None]
