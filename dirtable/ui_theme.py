"""Listing palette definitions and selection helpers.

Palettes are ANSI escape prefixes (from ``pygments.console``) for the name
and timestamp cells. The plain palette carries no escapes at all.
"""

from __future__ import annotations

from dataclasses import dataclass

from pygments.console import codes


@dataclass(frozen=True)
class ListingTheme:
    """Semantic ANSI palette used by the table renderer."""

    name: str
    reset: str
    directory: str
    file: str
    created: str
    updated: str

    def paint(self, style: str, text: str) -> str:
        """Wrap ``text`` in ``style`` and a reset, or return it unchanged."""
        if not style:
            return text
        return f"{style}{text}{self.reset}"


DEFAULT_THEME = ListingTheme(
    name="default",
    reset=codes["reset"],
    directory=codes["blue"],
    file="",
    created=codes["green"],
    updated=codes["yellow"],
)

PLAIN_THEME = ListingTheme(
    name="plain",
    reset="",
    directory="",
    file="",
    created="",
    updated="",
)


def resolve_theme(*, no_color: bool = False) -> ListingTheme:
    """Return concrete palette for the requested color mode."""
    if no_color:
        return PLAIN_THEME
    return DEFAULT_THEME


__all__ = [
    "ListingTheme",
    "DEFAULT_THEME",
    "PLAIN_THEME",
    "resolve_theme",
]
