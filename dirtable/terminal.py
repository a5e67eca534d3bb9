"""Terminal capability checks for table output.

Decides whether ANSI color should be written to a given output stream.
"""

from __future__ import annotations

from enum import Enum
from typing import TextIO


class ColorMode(Enum):
    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"

    def __str__(self) -> str:
        return self.value


def stream_is_terminal(stream: TextIO) -> bool:
    """Return whether ``stream`` is attached to a TTY.

    Streams without ``isatty`` (or whose ``isatty`` fails, e.g. after close)
    are treated as non-terminals.
    """
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        return False


def color_enabled(mode: ColorMode, stream: TextIO) -> bool:
    """Resolve ``mode`` against ``stream`` into a concrete on/off decision."""
    if mode is ColorMode.ALWAYS:
        return True
    if mode is ColorMode.NEVER:
        return False
    return stream_is_terminal(stream)


__all__ = [
    "ColorMode",
    "stream_is_terminal",
    "color_enabled",
]
