"""Bordered table rendering for directory listings.

Column widths are fixed. Color escapes wrap already padded cell text, so a
colored row has the same visible layout as a plain one.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator

from ..config import ListingConfig
from ..listing import MetadataError, read_entry_metadata
from ..logs import get_logger
from ..ui_theme import PLAIN_THEME, ListingTheme

NAME_WIDTH = 20
SIZE_WIDTH = 10
TIMESTAMP_WIDTH = 20
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def display_path(path: str) -> str:
    """Return ``path`` as printable text.

    Names that are not valid UTF-8 arrive from ``os.scandir`` with surrogate
    escapes; their undecodable bytes are shown as U+FFFD so writing the row
    can never fail.
    """
    return os.fsencode(path).decode("utf-8", "replace")


def render_heading(config: ListingConfig) -> str:
    """Return the two heading lines: column titles and the dash separator."""
    titles = [f"|{'Name':^22}|"]
    separator = [f"+{'':-<22}+"]
    if config.wants_size():
        titles.append(f"{'Size':^14}|")
        separator.append(f"{'':-<14}+")
    if config.wants_created():
        titles.append(f" {'Created':^21}|")
        separator.append(f"{'':-<22}+")
    if config.wants_updated():
        titles.append(f" {'Updated':^21}|")
        separator.append(f"{'':-<22}+")
    return "".join(titles) + "\n" + "".join(separator) + "\n"


def render_row(entry: os.DirEntry[str], config: ListingConfig, theme: ListingTheme = PLAIN_THEME) -> str | None:
    """Render one entry row, or ``None`` when the row must be skipped.

    Any failure to read the entry type or a metadata field needed by an
    active column drops the whole row; nothing is partially rendered.
    """
    try:
        is_dir = entry.is_dir(follow_symlinks=False)
        metadata = None
        if config.wants_metadata():
            metadata = read_entry_metadata(
                entry,
                with_created=config.wants_created(),
                with_updated=config.wants_updated(),
            )
    except (OSError, MetadataError) as exc:
        get_logger().debug("skipping %s: %s", display_path(entry.path), exc)
        return None

    name = f"{display_path(entry.path):<{NAME_WIDTH}}"
    cells = [f"| {theme.paint(theme.directory if is_dir else theme.file, name)} |"]
    if metadata is not None:
        if config.wants_size():
            cells.append(f" {metadata.size:>{SIZE_WIDTH}} B |")
        if config.wants_created() and metadata.created is not None:
            stamp = f"{metadata.created.strftime(TIMESTAMP_FORMAT):>{TIMESTAMP_WIDTH}}"
            cells.append(f" {theme.paint(theme.created, stamp)} |")
        if config.wants_updated() and metadata.updated is not None:
            stamp = f"{metadata.updated.strftime(TIMESTAMP_FORMAT):>{TIMESTAMP_WIDTH}}"
            cells.append(f" {theme.paint(theme.updated, stamp)} |")
    return "".join(cells) + "\n"


def render_table(
    entries: Iterable[os.DirEntry[str]],
    config: ListingConfig,
    theme: ListingTheme = PLAIN_THEME,
) -> Iterator[str]:
    """Yield the heading followed by every row that renders."""
    yield render_heading(config)
    for entry in entries:
        row = render_row(entry, config, theme)
        if row is not None:
            yield row


__all__ = [
    "NAME_WIDTH",
    "SIZE_WIDTH",
    "TIMESTAMP_WIDTH",
    "TIMESTAMP_FORMAT",
    "display_path",
    "render_heading",
    "render_row",
    "render_table",
]
