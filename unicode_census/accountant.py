"""Per-file character accounting.

Each file is decoded as strict UTF-8, normalized to NFC and split into
extended grapheme clusters.  Only the first scalar value of every cluster is
tallied, and control characters are dropped before they reach the tally.
Files that cannot be decoded or read are reported and skipped; they never
leave partial counts behind because decoding completes before any mutation.
"""

from __future__ import annotations

import logging
import unicodedata
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator, Optional, Union

import regex

from .categorizer import is_control
from .tally import DEFAULT_PARTITION, Aggregator

__all__ = [
    "AccountResult",
    "AccountStatus",
    "account",
    "account_text",
    "iter_graphemes",
    "leading_scalars",
    "normalize",
    "read_text",
]

logger = logging.getLogger(__name__)

_GRAPHEME = regex.compile(r"\X")

PathLike = Union[str, Path]


class AccountStatus(str, Enum):
    ACCOUNTED = "accounted"
    INVALID_UTF8 = "invalid_utf8"
    READ_ERROR = "read_error"


@dataclass
class AccountResult:
    path: Path
    status: AccountStatus
    characters: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is AccountStatus.ACCOUNTED


def normalize(text: str) -> str:
    return unicodedata.normalize("NFC", text)


def iter_graphemes(text: str) -> Iterator[str]:
    """Yield the extended grapheme clusters of *text* in order."""

    for match in _GRAPHEME.finditer(text):
        yield match.group()


def leading_scalars(text: str) -> Iterator[int]:
    """Yield the first codepoint of every non-control grapheme in *text*.

    Combining sequences without a precomposed form are counted under their
    base character only.
    """

    for grapheme in iter_graphemes(normalize(text)):
        lead = grapheme[0]
        if is_control(lead):
            continue
        yield ord(lead)


def account_text(
    text: str,
    aggregator: Aggregator,
    partition_key: str = DEFAULT_PARTITION,
) -> int:
    """Tally *text* into *aggregator* and return the number of accepted characters."""

    tally = aggregator.tally_for(partition_key)
    accepted = 0
    for codepoint in leading_scalars(text):
        tally.add(codepoint)
        accepted += 1
    return accepted


def read_text(path: PathLike) -> str:
    """Return the content of *path* decoded as strict UTF-8.

    Raises :class:`UnicodeDecodeError` for invalid byte sequences and
    :class:`OSError` for any other read failure.
    """

    data = Path(path).read_bytes()
    return data.decode("utf-8")


def account(
    path: PathLike,
    partition_key: str,
    aggregator: Aggregator,
) -> AccountResult:
    """Read *path* and add its characters to *aggregator* under *partition_key*."""

    file_path = Path(path)
    try:
        text = read_text(file_path)
    except UnicodeDecodeError as exc:
        logger.warning("Skipping file with invalid UTF-8: %s", file_path)
        return AccountResult(file_path, AccountStatus.INVALID_UTF8, error=str(exc))
    except OSError as exc:
        logger.warning("Error reading file %s: %s", file_path, exc)
        return AccountResult(file_path, AccountStatus.READ_ERROR, error=str(exc))

    accepted = account_text(text, aggregator, partition_key)
    logger.debug("Accounted %d character(s) from %s", accepted, file_path)
    return AccountResult(file_path, AccountStatus.ACCOUNTED, characters=accepted)
