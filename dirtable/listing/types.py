"""Domain datatypes for one listed directory entry."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


class MetadataError(Exception):
    """Raised when a metadata field required for a row cannot be produced."""

    def __init__(self, path: str, field: str, reason: str) -> None:
        super().__init__(f"{path}: {field} unavailable ({reason})")
        self.path = path
        self.field = field
        self.reason = reason


@dataclass(frozen=True)
class EntryMetadata:
    """Metadata observed from one ``stat`` call.

    Timestamps are ``None`` only when they were not requested.
    """

    size: int
    created: datetime | None = None
    updated: datetime | None = None


__all__ = [
    "MetadataError",
    "EntryMetadata",
]
