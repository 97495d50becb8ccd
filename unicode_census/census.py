"""Sequential census driver tying traversal, accounting and aggregation together."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

from .accountant import AccountResult, AccountStatus, account
from .tally import Aggregator
from .walker import iter_files

__all__ = ["CensusOptions", "CensusStats", "log_census_summary", "run_census"]

logger = logging.getLogger(__name__)


@dataclass
class CensusOptions:
    by_extension: bool = False
    skip_traversal_errors: bool = False


@dataclass
class CensusStats:
    files_seen: int = 0
    files_accounted: int = 0
    files_invalid_utf8: int = 0
    files_unreadable: int = 0
    characters: int = 0

    @property
    def files_skipped(self) -> int:
        return self.files_invalid_utf8 + self.files_unreadable

    def record(self, result: AccountResult) -> None:
        self.files_seen += 1
        if result.status is AccountStatus.ACCOUNTED:
            self.files_accounted += 1
            self.characters += result.characters
        elif result.status is AccountStatus.INVALID_UTF8:
            self.files_invalid_utf8 += 1
        else:
            self.files_unreadable += 1


def run_census(
    root: Union[str, Path],
    options: Optional[CensusOptions] = None,
    aggregator: Optional[Aggregator] = None,
) -> Tuple[Aggregator, CensusStats]:
    """Account every regular file under *root*.

    Raises :class:`~unicode_census.walker.TraversalError` when the walk fails
    and ``options.skip_traversal_errors`` is not set.
    """

    options = options or CensusOptions()
    if aggregator is None:
        aggregator = Aggregator(partitioned=options.by_extension)
    elif aggregator.partitioned != options.by_extension:
        raise ValueError("Aggregator partitioning does not match census options")

    stats = CensusStats()
    for entry in iter_files(root, skip_errors=options.skip_traversal_errors):
        result = account(entry.path, entry.partition_key, aggregator)
        stats.record(result)

    log_census_summary(root, stats, aggregator)
    return aggregator, stats


def log_census_summary(
    root: Union[str, Path],
    stats: CensusStats,
    aggregator: Aggregator,
) -> None:
    logger.info(
        (
            "Census of '%s': files=%d (accounted=%d, invalid utf-8=%d, "
            "unreadable=%d); characters=%d; partitions=%d"
        ),
        root,
        stats.files_seen,
        stats.files_accounted,
        stats.files_invalid_utf8,
        stats.files_unreadable,
        stats.characters,
        len(aggregator),
    )
