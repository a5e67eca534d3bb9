"""Filesystem side of the lister.

This package contains non-UI primitives:
- one-level directory enumeration in reversed order
- per-entry metadata reads (size, creation and modification time)
"""

from __future__ import annotations

from .types import EntryMetadata, MetadataError
from .fs import list_directory, read_entry_metadata

__all__ = [
    "EntryMetadata",
    "MetadataError",
    "list_directory",
    "read_entry_metadata",
]
