"""Running codepoint tallies and the aggregator that owns them.

An :class:`Aggregator` keeps one :class:`Tally` per partition.  In the plain
mode there is a single partition stored under the empty key; in the
partitioned mode every file extension gets its own tally.  Counts are Python
integers and therefore never wrap.

Merging is associative and commutative (counts and counters add), so partial
aggregators built independently can be folded together with :func:`combine`
before reporting.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from functools import reduce
from typing import Dict, Iterable, Iterator, List

from .categorizer import is_ascii

__all__ = ["Tally", "Aggregator", "combine", "MAX_CODEPOINT", "DEFAULT_PARTITION"]

MAX_CODEPOINT = 0x10FFFF
DEFAULT_PARTITION = ""


def _check_scalar(codepoint: int) -> None:
    if not 0 <= codepoint <= MAX_CODEPOINT or 0xD800 <= codepoint <= 0xDFFF:
        raise ValueError(f"Not a Unicode scalar value: {codepoint:#x}")


@dataclass
class Tally:
    counts: Counter = field(default_factory=Counter)
    total_chars: int = 0
    ascii_chars: int = 0

    @property
    def non_ascii_chars(self) -> int:
        return self.total_chars - self.ascii_chars

    def add(self, codepoint: int, amount: int = 1) -> None:
        """Record *amount* occurrences of *codepoint*."""

        _check_scalar(codepoint)
        if amount < 0:
            raise ValueError("Tally counts cannot decrease")
        if amount == 0:
            return
        self.counts[codepoint] += amount
        self.total_chars += amount
        if is_ascii(codepoint):
            self.ascii_chars += amount

    def merge(self, other: "Tally") -> "Tally":
        merged = Counter(self.counts)
        merged.update(other.counts)
        return Tally(
            counts=merged,
            total_chars=self.total_chars + other.total_chars,
            ascii_chars=self.ascii_chars + other.ascii_chars,
        )

    def copy(self) -> "Tally":
        return Tally(Counter(self.counts), self.total_chars, self.ascii_chars)

    def __len__(self) -> int:
        return len(self.counts)


class Aggregator:
    """Owns the tallies for one census run."""

    def __init__(self, partitioned: bool = False) -> None:
        self.partitioned = partitioned
        self._tallies: Dict[str, Tally] = {}
        if not partitioned:
            self._tallies[DEFAULT_PARTITION] = Tally()

    def _key(self, partition_key: str) -> str:
        return partition_key if self.partitioned else DEFAULT_PARTITION

    def tally_for(self, partition_key: str = DEFAULT_PARTITION) -> Tally:
        key = self._key(partition_key)
        tally = self._tallies.get(key)
        if tally is None:
            tally = self._tallies[key] = Tally()
        return tally

    def increment(self, codepoint: int, partition_key: str = DEFAULT_PARTITION) -> None:
        self.tally_for(partition_key).add(codepoint)

    @property
    def partitions(self) -> List[str]:
        return sorted(self._tallies)

    def snapshot(self) -> Dict[str, Tally]:
        """Return independent copies of every tally, ordered by partition key."""

        return {key: self._tallies[key].copy() for key in self.partitions}

    def merge(self, other: "Aggregator") -> "Aggregator":
        if self.partitioned != other.partitioned:
            raise ValueError("Cannot merge partitioned and unpartitioned aggregators")
        merged = Aggregator(partitioned=self.partitioned)
        for key in set(self._tallies) | set(other._tallies):
            left = self._tallies.get(key, Tally())
            right = other._tallies.get(key, Tally())
            merged._tallies[key] = left.merge(right)
        return merged

    def __iter__(self) -> Iterator[str]:
        return iter(self.partitions)

    def __len__(self) -> int:
        return len(self._tallies)

    def __contains__(self, partition_key: object) -> bool:
        return partition_key in self._tallies

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        mode = "partitioned" if self.partitioned else "single"
        return f"Aggregator({mode}, partitions={self.partitions!r})"


def combine(aggregators: Iterable[Aggregator], *, partitioned: bool = False) -> Aggregator:
    """Fold *aggregators* into a new aggregator.

    The partitioning mode comes from the inputs; *partitioned* only selects the
    mode of the empty aggregator returned when there is nothing to fold.
    """

    items = list(aggregators)
    if not items:
        return Aggregator(partitioned)
    start = Aggregator(items[0].partitioned)
    return reduce(lambda left, right: left.merge(right), items, start)
