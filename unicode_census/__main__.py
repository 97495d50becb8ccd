"""Executable module for the Unicode census CLI."""

from __future__ import annotations

import sys

from dotenv import load_dotenv

from unicode_census.cli import main


if __name__ == "__main__":
    # Load environment overrides from a local .env before dispatching to the CLI.
    load_dotenv()
    sys.exit(main())
