"""Domain entity — pure Python business object for video metadata."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any

PUBLICATION_DELAY = timedelta(days=1)


class Resolution(str, Enum):
    """Closed set of resolution labels a video may be offered in."""

    P144 = "P144"
    P240 = "P240"
    P360 = "P360"
    P480 = "P480"
    P720 = "P720"
    P1080 = "P1080"
    P1440 = "P1440"
    P2160 = "P2160"

    @classmethod
    def labels(cls) -> list[str]:
        return [member.value for member in cls]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Video:
    """Core domain entity representing one video record in the store.

    ``created_at`` is stamped once; ``publication_date`` defaults to one day
    after creation and is the only timestamp an update may change.
    """

    title: str
    author: str
    available_resolutions: list[Resolution] = field(default_factory=list)
    can_be_downloaded: bool = False
    min_age_restriction: int | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=_utc_now)
    publication_date: datetime | None = None

    def __post_init__(self) -> None:
        if self.publication_date is None:
            self.publication_date = self.created_at + PUBLICATION_DELAY

    def update(self, **changes: Any) -> None:
        """Overwrite only the given mutable fields; absent keys stay unchanged."""
        for name, value in changes.items():
            if name not in _MUTABLE_FIELDS:
                raise AttributeError(f"Video field '{name}' is not mutable")
            setattr(self, name, value)


_MUTABLE_FIELDS = frozenset({
    "title",
    "author",
    "available_resolutions",
    "can_be_downloaded",
    "min_age_restriction",
    "publication_date",
})
