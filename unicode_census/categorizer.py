"""Coarse character categories built on the Unicode general category.

The histogram groups characters into five buckets.  The buckets follow the
major classes of ``unicodedata.category`` and are checked in a fixed order so
that every scalar value lands in exactly one of them.
"""

from __future__ import annotations

import unicodedata
from enum import Enum
from typing import Union

__all__ = ["Category", "category_of", "is_ascii", "is_control", "ASCII_MAX"]

ASCII_MAX = 0x7F

CharLike = Union[str, int]


class Category(str, Enum):
    ALPHANUMERIC = "Alphanumeric"
    SPACE = "Space"
    PUNCTUATION = "Punctuation"
    SYMBOL = "Symbol"
    OTHER = "Other"

    def __str__(self) -> str:
        return self.value


def _as_char(char: CharLike) -> str:
    if isinstance(char, int):
        return chr(char)
    if len(char) != 1:
        raise ValueError(f"Expected a single character, got {char!r}")
    return char


def category_of(char: CharLike) -> Category:
    """Return the :class:`Category` for *char* (a character or codepoint)."""

    general = unicodedata.category(_as_char(char))
    major = general[0]
    if major in {"L", "N"}:
        return Category.ALPHANUMERIC
    if general == "Zs":
        return Category.SPACE
    if major == "P":
        return Category.PUNCTUATION
    if major == "S":
        return Category.SYMBOL
    return Category.OTHER


def is_control(char: CharLike) -> bool:
    return unicodedata.category(_as_char(char)) == "Cc"


def is_ascii(codepoint: int) -> bool:
    return 0 <= codepoint <= ASCII_MAX
