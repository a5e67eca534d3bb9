"""Listing configuration plus persisted JSON defaults.

``ListingConfig`` is the single value passed from the CLI to the renderer.
Stored defaults can switch optional columns on and pick a color mode; all
access is defensive, so a malformed or missing file means "no defaults".
"""

from __future__ import annotations

import argparse
import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .terminal import ColorMode

APP_NAME = "dirtable"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_PATH = "./"
COLUMN_NAMES = ("size", "created", "updated", "all")


@dataclass(frozen=True)
class ListingDefaults:
    """Defaults loaded from the config file."""

    columns: frozenset[str] = frozenset()
    color: ColorMode | None = None


@dataclass(frozen=True)
class ListingConfig:
    """Effective options for one run.

    ``show_all`` never rewrites the individual flags; call sites ask the
    ``wants_*`` predicates instead.
    """

    path: str = DEFAULT_PATH
    show_all: bool = False
    show_created: bool = False
    show_updated: bool = False
    show_size: bool = False
    color: ColorMode = ColorMode.AUTO
    verbose: bool = False

    def wants_size(self) -> bool:
        return self.show_size or self.show_all

    def wants_created(self) -> bool:
        return self.show_created or self.show_all

    def wants_updated(self) -> bool:
        return self.show_updated or self.show_all

    def wants_metadata(self) -> bool:
        return self.wants_size() or self.wants_created() or self.wants_updated()

    @classmethod
    def from_args(cls, args: argparse.Namespace, defaults: ListingDefaults | None = None) -> "ListingConfig":
        """Merge parsed CLI flags with stored defaults.

        Column flags are OR-ed with the defaults. An explicit ``--color`` or
        ``--no-color`` wins over the stored color mode.
        """
        if defaults is None:
            defaults = ListingDefaults()
        if args.no_color:
            color = ColorMode.NEVER
        elif args.color is not None:
            color = args.color
        elif defaults.color is not None:
            color = defaults.color
        else:
            color = ColorMode.AUTO
        return cls(
            path=args.path,
            show_all=bool(args.all) or "all" in defaults.columns,
            show_created=bool(args.created) or "created" in defaults.columns,
            show_updated=bool(args.updated) or "updated" in defaults.columns,
            show_size=bool(args.size) or "size" in defaults.columns,
            color=color,
            verbose=bool(args.verbose),
        )


def load_config() -> dict[str, object]:
    """Read the stored defaults file as a raw mapping.

    Anything other than a readable JSON object (no file, bad JSON, a list)
    yields ``{}``, which means no stored defaults.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _parse_columns(value: object) -> frozenset[str]:
    """Keep only known column names from a JSON list; anything else is dropped."""
    if not isinstance(value, list):
        return frozenset()
    return frozenset(item for item in value if isinstance(item, str) and item in COLUMN_NAMES)


def _parse_color(value: object) -> ColorMode | None:
    if not isinstance(value, str):
        return None
    try:
        return ColorMode(value.strip().lower())
    except ValueError:
        return None


def load_defaults() -> ListingDefaults:
    """Return sanitized listing defaults from the config file."""
    data = load_config()
    return ListingDefaults(
        columns=_parse_columns(data.get("columns")),
        color=_parse_color(data.get("color")),
    )


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "COLUMN_NAMES",
    "DEFAULT_PATH",
    "ListingConfig",
    "ListingDefaults",
    "load_config",
    "load_defaults",
]
