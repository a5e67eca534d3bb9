"""Text rendering for the listing table.

Turns a ``ListingConfig`` and directory entries into heading and row strings.
Rendering never writes to a stream; the CLI owns output.
"""

from __future__ import annotations

from .table import render_heading, render_row, render_table

__all__ = [
    "render_heading",
    "render_row",
    "render_table",
]
