"""Render aggregated tallies as the textual census report."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from .categorizer import Category, category_of, is_ascii
from .tally import MAX_CODEPOINT, Aggregator, Tally

__all__ = [
    "PartitionReport",
    "ReportRow",
    "build_partition_report",
    "build_report",
    "character_for",
    "percentages",
    "render_report",
    "report",
]

REPLACEMENT_CHARACTER = "\ufffd"


def character_for(codepoint: int) -> str:
    """Return the character for *codepoint*, or U+FFFD when it is not a scalar value."""

    if 0 <= codepoint <= MAX_CODEPOINT and not 0xD800 <= codepoint <= 0xDFFF:
        return chr(codepoint)
    return REPLACEMENT_CHARACTER


def percentages(ascii_chars: int, total_chars: int) -> Tuple[float, float]:
    """Return ``(ascii_percent, non_ascii_percent)``.

    An empty partition reports ``0.0`` for both values.
    """

    if total_chars <= 0:
        return 0.0, 0.0
    ascii_percent = ascii_chars / total_chars * 100.0
    return ascii_percent, 100.0 - ascii_percent


@dataclass
class ReportRow:
    character: str
    codepoint: int
    category: Category
    is_ascii: bool
    count: int

    def render(self) -> str:
        return (
            f"Character: {self.character}, Codepoint: {self.codepoint:04x}, "
            f"Category: {self.category.value}, ASCII: {str(self.is_ascii).lower()}, "
            f"Count: {self.count}"
        )


@dataclass
class PartitionReport:
    key: str
    rows: List[ReportRow] = field(default_factory=list)
    total_chars: int = 0
    ascii_chars: int = 0

    @property
    def non_ascii_chars(self) -> int:
        return self.total_chars - self.ascii_chars

    @property
    def ascii_percent(self) -> float:
        return percentages(self.ascii_chars, self.total_chars)[0]

    @property
    def non_ascii_percent(self) -> float:
        return percentages(self.ascii_chars, self.total_chars)[1]

    def summary_lines(self) -> List[str]:
        return [
            "Summary:",
            f"  ASCII encodings: {self.ascii_chars} ({self.ascii_percent:.2f}%)",
            f"  Non-ASCII encodings: {self.non_ascii_chars} ({self.non_ascii_percent:.2f}%)",
        ]


def build_partition_report(key: str, tally: Tally) -> PartitionReport:
    ordered = sorted(tally.counts.items(), key=lambda item: (-item[1], item[0]))
    rows = []
    for codepoint, count in ordered:
        character = character_for(codepoint)
        category = category_of(character)
        rows.append(ReportRow(character, codepoint, category, is_ascii(codepoint), count))
    return PartitionReport(
        key=key,
        rows=rows,
        total_chars=tally.total_chars,
        ascii_chars=tally.ascii_chars,
    )


def build_report(aggregator: Aggregator) -> List[PartitionReport]:
    """Build one :class:`PartitionReport` per partition, ordered by key."""

    return [
        build_partition_report(key, tally)
        for key, tally in aggregator.snapshot().items()
    ]


def render_report(reports: Sequence[PartitionReport], *, partitioned: bool = False) -> str:
    lines: List[str] = []
    for partition in reports:
        if partitioned:
            lines.append(f"File Extension: {partition.key}")
        lines.extend(row.render() for row in partition.rows)
        lines.append("")
        lines.extend(partition.summary_lines())
        if partitioned:
            lines.append("")
    return "\n".join(lines) + "\n" if lines else ""


def report(aggregator: Aggregator) -> str:
    """Return the full report text for *aggregator*."""

    return render_report(build_report(aggregator), partitioned=aggregator.partitioned)
