"""CLI entry point for running as `python -m api.cli`.

Usage:
    python -m api.cli import products [--category pumps] [--dry-run]
    python -m api.cli import projects [--dry-run]
    python -m api.cli reclassify [--only-missing] [--category chillers]
    python -m api.cli repair-images products
    python -m api.cli init-db
"""

import sys

from .commands import create_parser, run


def main():
    """Entry point for `python -m api.cli`."""
    parser = create_parser()
    args = parser.parse_args()
    sys.exit(run(args))


if __name__ == "__main__":
    main()
