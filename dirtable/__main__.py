"""Run the lister with ``python -m dirtable``."""

from .cli import main


if __name__ == "__main__":
    main()
