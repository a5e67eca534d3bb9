"""Single-level directory enumeration and per-entry metadata reads."""

from __future__ import annotations

import os
import sys
from datetime import datetime, timezone

from .types import EntryMetadata, MetadataError


def list_directory(path: str) -> list[os.DirEntry[str]]:
    """Return immediate children of ``path`` in reverse enumeration order.

    Entries are collected eagerly so the directory handle is closed before
    any rendering starts. ``OSError`` (missing path, not a directory,
    permission denied) propagates to the caller unchanged.
    """
    with os.scandir(path) as entries:
        children = list(entries)
    children.reverse()
    return children


def _utc_from_timestamp(path: str, field: str, timestamp: float) -> datetime:
    """Convert a stat timestamp to a second-resolution UTC datetime."""
    try:
        return datetime.fromtimestamp(int(timestamp), tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as exc:
        raise MetadataError(path, field, str(exc)) from exc


def _creation_timestamp(path: str, stat_result: os.stat_result) -> float:
    """Return creation time from ``stat_result`` or raise ``MetadataError``.

    ``st_birthtime`` is used where the platform reports it. Windows builds that
    predate it report creation time in ``st_ctime``; elsewhere ``st_ctime`` is
    inode change time and is not a substitute.
    """
    birthtime = getattr(stat_result, "st_birthtime", None)
    if birthtime is not None:
        return float(birthtime)
    if sys.platform == "win32":
        return float(stat_result.st_ctime)
    raise MetadataError(path, "created", "creation time not reported by this platform")


def read_entry_metadata(
    entry: os.DirEntry[str],
    *,
    with_created: bool = True,
    with_updated: bool = True,
) -> EntryMetadata:
    """Stat ``entry`` and return its size and the requested timestamps.

    Raises ``OSError`` when the stat call fails and ``MetadataError`` when a
    requested timestamp cannot be produced. Timestamps that are not requested
    are never converted and stay ``None``.
    """
    stat_result = entry.stat(follow_symlinks=False)
    created: datetime | None = None
    updated: datetime | None = None
    if with_created:
        created = _utc_from_timestamp(entry.path, "created", _creation_timestamp(entry.path, stat_result))
    if with_updated:
        updated = _utc_from_timestamp(entry.path, "updated", stat_result.st_mtime)
    return EntryMetadata(
        size=int(stat_result.st_size),
        created=created,
        updated=updated,
    )


__all__ = [
    "list_directory",
    "read_entry_metadata",
]
