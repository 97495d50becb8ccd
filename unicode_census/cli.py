"""Command line interface for the Unicode character census."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from unicode_census import config_loader, settings
from unicode_census.census import CensusOptions, run_census
from unicode_census.reporter import report
from unicode_census.walker import TraversalError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unicode-census",
        description=(
            "Count Unicode characters in every file below a directory and "
            "summarize the ASCII share."
        ),
    )
    parser.add_argument("directory", help="directory to scan recursively")
    parser.add_argument(
        "--by-extension",
        action="store_true",
        default=None,
        help="report a separate histogram for each file extension",
    )
    parser.add_argument(
        "--skip-unreadable-dirs",
        dest="skip_traversal_errors",
        action="store_true",
        default=None,
        help="log and skip directories that cannot be read instead of aborting",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="path to a JSON configuration file (default: $UNICODE_CENSUS_CONFIG)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="logging level for diagnostics on stderr (default: WARNING)",
    )
    return parser


def _configure_logging(level_name: str) -> None:
    level = logging.getLevelName(str(level_name).upper())
    if not isinstance(level, int):
        level = logging.WARNING
    if not logging.getLogger().handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level or settings.default_log_level())

    config_path = args.config or settings.default_config_path()
    try:
        config = config_loader.load_config(config_path)
    except ValueError as exc:
        logger.error("Invalid configuration file %s: %s", config_path, exc)
        return 1

    if args.log_level is None and "log_level" in config:
        _configure_logging(config["log_level"])

    options = CensusOptions(
        by_extension=bool(
            config_loader.select_value(
                args.by_extension, config, "by_extension", settings.default_by_extension()
            )
        ),
        skip_traversal_errors=bool(
            config_loader.select_value(
                args.skip_traversal_errors,
                config,
                "skip_traversal_errors",
                settings.default_skip_traversal_errors(),
            )
        ),
    )

    try:
        aggregator, _stats = run_census(args.directory, options)
    except TraversalError as exc:
        logger.error("%s", exc)
        return 1

    sys.stdout.write(report(aggregator))
    sys.stdout.flush()
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
