"""dirtable: print one directory level as a bordered table.

``main`` is the same entrypoint the ``dirtable`` console script runs.
"""

from __future__ import annotations

__version__ = "1.0"


def main(argv: list[str] | None = None) -> None:
    from .cli import main as cli_main

    cli_main(argv)


__all__ = ["__version__", "main"]
