"""Directory traversal for the census.

The walk is lazy and depth-first with entries visited in name order, so two
runs over an unchanged tree see files in the same sequence.  Symlinks to
files are treated as files; symlinked directories are not descended.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Union

__all__ = ["FileEntry", "TraversalError", "iter_files", "partition_key_for"]

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class TraversalError(RuntimeError):
    """Raised when a directory entry cannot be read during the walk."""

    def __init__(self, path: PathLike, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot traverse {self.path}: {reason}")


@dataclass(frozen=True)
class FileEntry:
    path: Path
    partition_key: str


def partition_key_for(path: PathLike) -> str:
    """Return the extension of *path* without its dot, or ``""`` when absent.

    Case is preserved and only the final suffix counts, so ``a.tar.gz`` maps to
    ``gz`` and ``..hidden`` maps to ``hidden``.  A name whose only dot is the
    leading one, such as ``.bashrc``, has no extension, and neither does a name
    ending in a dot.
    """

    name = Path(path).name
    stem, dot, extension = name.rpartition(".")
    if not dot or not stem:
        return ""
    return extension


def _fail(path: Path, exc: OSError, skip_errors: bool) -> None:
    if not skip_errors:
        raise TraversalError(path, exc.strerror or str(exc)) from exc
    logger.warning("Skipping unreadable entry %s: %s", path, exc)


def _list_directory(directory: Path, skip_errors: bool) -> List["os.DirEntry[str]"]:
    """Return the entries of *directory* in reverse name order, ready to pop."""

    try:
        with os.scandir(directory) as iterator:
            return sorted(iterator, key=lambda item: item.name, reverse=True)
    except OSError as exc:
        _fail(directory, exc, skip_errors)
        return []


def _walk(directory: Path, skip_errors: bool) -> Iterator[FileEntry]:
    # One pending list per open directory; depth is bounded by memory only.
    stack = [_list_directory(directory, skip_errors)]
    while stack:
        pending = stack[-1]
        if not pending:
            stack.pop()
            continue
        entry = pending.pop()
        path = Path(entry.path)
        try:
            if entry.is_dir(follow_symlinks=False):
                descend = True
            elif entry.is_file():
                descend = False
            else:
                continue
        except OSError as exc:
            _fail(path, exc, skip_errors)
            continue
        if descend:
            stack.append(_list_directory(path, skip_errors))
        else:
            yield FileEntry(path, partition_key_for(path))


def iter_files(root: PathLike, *, skip_errors: bool = False) -> Iterator[FileEntry]:
    """Yield every regular file below *root*.

    A *root* that is itself a file yields just that file.  A missing root, or
    any directory that cannot be listed, raises :class:`TraversalError` unless
    *skip_errors* is set, in which case nested failures are logged and skipped.
    """

    root_path = Path(root)
    if root_path.is_file():
        yield FileEntry(root_path, partition_key_for(root_path))
        return
    if not root_path.is_dir():
        raise TraversalError(root_path, "no such directory")
    yield from _walk(root_path, skip_errors)
