#!/usr/bin/env python3
"""
List files under a directory that the census would skip.

- Files whose bytes are not valid UTF-8 are reported as ``[invalid-utf8]``.
- Files that cannot be read at all are reported as ``[read-error]``.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Tuple

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from unicode_census.accountant import read_text
from unicode_census.walker import TraversalError, iter_files


def find_undecodable(root: Path, skip_errors: bool) -> Tuple[List[Tuple[Path, str]], List[Tuple[Path, str]]]:
    decode_errors: List[Tuple[Path, str]] = []
    read_errors: List[Tuple[Path, str]] = []
    for entry in iter_files(root, skip_errors=skip_errors):
        try:
            read_text(entry.path)
        except UnicodeDecodeError as exc:
            decode_errors.append((entry.path, str(exc)))
        except OSError as exc:
            read_errors.append((entry.path, str(exc)))
    return decode_errors, read_errors


def main() -> int:
    parser = argparse.ArgumentParser(description="List files the census would skip.")
    parser.add_argument("root", type=Path, help="directory to scan")
    parser.add_argument(
        "--skip-unreadable-dirs",
        action="store_true",
        help="continue past directories that cannot be listed",
    )
    args = parser.parse_args()

    try:
        decode_errors, read_errors = find_undecodable(args.root, args.skip_unreadable_dirs)
    except TraversalError as exc:
        raise SystemExit(str(exc))

    for path, err in sorted(decode_errors):
        print(f"[invalid-utf8] {path}: {err}")
    for path, err in sorted(read_errors):
        print(f"[read-error] {path}: {err}")
    print(f"Skipped files: {len(decode_errors) + len(read_errors)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
