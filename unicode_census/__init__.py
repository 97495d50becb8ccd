"""Unicode character census over directory trees."""

from __future__ import annotations

from .accountant import AccountResult, AccountStatus, account, account_text
from .categorizer import Category, category_of
from .census import CensusOptions, CensusStats, run_census
from .reporter import build_report, render_report, report
from .tally import Aggregator, Tally, combine
from .walker import FileEntry, TraversalError, iter_files, partition_key_for

__all__ = [
    "AccountResult",
    "AccountStatus",
    "Aggregator",
    "CensusOptions",
    "CensusStats",
    "Category",
    "FileEntry",
    "Tally",
    "TraversalError",
    "account",
    "account_text",
    "build_report",
    "category_of",
    "combine",
    "iter_files",
    "partition_key_for",
    "render_report",
    "report",
    "run_census",
]
