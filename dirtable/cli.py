"""Command-line front door for dirtable.

Parses CLI options, merges stored defaults, and lists the target directory.
A directory that cannot be read ends the run with exit status 1.
"""

from __future__ import annotations

import argparse
import sys

from . import __version__
from .config import DEFAULT_PATH, ListingConfig, ListingDefaults, load_defaults
from .listing import list_directory
from .logs import setup_logger
from .render import render_table
from .terminal import ColorMode, color_enabled
from .ui_theme import resolve_theme


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the ``dirtable`` command."""
    parser = argparse.ArgumentParser(prog="dirtable", description="List your directory with me")
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH, help="The path to the directory")
    parser.add_argument("-a", "--all", action="store_true", help="Display all information (implies --created)")
    parser.add_argument(
        "-c",
        "--created",
        action="store_true",
        help=(
            "Display the date of creation. Entries whose creation time the platform does not report"
            " are left out; on Linux that is every entry."
        ),
    )
    parser.add_argument("-u", "--updated", action="store_true", help="Display the date of last modification")
    parser.add_argument("-s", "--size", action="store_true", help="Display the size of the file")
    parser.add_argument(
        "--color",
        type=ColorMode,
        choices=list(ColorMode),
        default=None,
        help="When to color output (default: auto, color only on a terminal).",
    )
    parser.add_argument("--no-color", action="store_true", help="Alias for --color=never.")
    parser.add_argument("--no-config", action="store_true", help="Ignore stored defaults.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log skipped entries to stderr.")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(config: ListingConfig) -> None:
    """List ``config.path`` and write the table to stdout.

    ``OSError`` from reading the directory propagates before any output is
    written.
    """
    entries = list_directory(config.path)
    theme = resolve_theme(no_color=not color_enabled(config.color, sys.stdout))
    for chunk in render_table(entries, config, theme):
        sys.stdout.write(chunk)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print the listing.

    ``argv`` defaults to ``sys.argv[1:]``. Failure to read the target
    directory raises ``SystemExit`` with an ``Error:`` message, which the
    interpreter prints to stderr with exit status 1.
    """
    args = build_parser().parse_args(argv)
    defaults = ListingDefaults() if args.no_config else load_defaults()
    config = ListingConfig.from_args(args, defaults)
    logger = setup_logger(config.verbose)
    logger.debug("listing %s", config.path)

    try:
        run(config)
    except OSError as exc:
        raise SystemExit(f"Error: {exc}") from exc


if __name__ == "__main__":
    main()
