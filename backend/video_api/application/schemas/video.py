"""Pydantic DTOs (Data Transfer Objects) for the Video feature.

Wire names are camelCase; attributes are snake_case. The input models are
only built from payloads that already passed ``validate_video_input``.
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

from video_api.application.validators import parse_timestamp
from video_api.domain.entities import Resolution


def format_timestamp(value: datetime) -> str:
    """Render a datetime as ISO-8601 UTC with milliseconds and a ``Z`` suffix."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace(
        "+00:00", "Z"
    )


class _CamelInput(BaseModel):
    """Accepts camelCase wire names only; snake_case keys are ignored like any unknown key."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=False,
        extra="ignore",
        str_strip_whitespace=True,
    )


class VideoCreate(_CamelInput):
    """Schema for creating a new video."""

    title: str = Field(..., examples=["Intro to FastAPI"])
    author: str = Field(..., examples=["Jane Doe"])
    available_resolutions: list[Resolution] = Field(default_factory=list, examples=[["P720"]])
    can_be_downloaded: bool = False
    min_age_restriction: int | None = None


class VideoUpdate(_CamelInput):
    """Schema for a partial update — only keys present in the payload are applied."""

    title: str | None = None
    author: str | None = None
    available_resolutions: list[Resolution] | None = None
    can_be_downloaded: bool | None = None
    min_age_restriction: int | None = None
    publication_date: datetime | None = None

    @field_validator("publication_date", mode="before")
    @classmethod
    def _normalize_publication_date(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_timestamp(value)
        return value

    def changes(self) -> dict[str, Any]:
        """Attribute name → value for every field the caller actually sent."""
        return {name: getattr(self, name) for name in self.model_fields_set}


class VideoResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    title: str
    author: str
    can_be_downloaded: bool
    min_age_restriction: int | None
    created_at: datetime
    publication_date: datetime
    available_resolutions: list[Resolution]

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    @field_serializer("created_at", "publication_date")
    def _serialize_timestamp(self, value: datetime) -> str:
        return format_timestamp(value)


class FieldErrorSchema(BaseModel):
    """One field-level violation."""

    message: str
    field: str


class ErrorsResponse(BaseModel):
    """Body of a 400 response."""

    errorsMessages: list[FieldErrorSchema]
