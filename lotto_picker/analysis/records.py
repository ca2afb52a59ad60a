"""Immutable data types passed between the analysis stages."""

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from types import MappingProxyType
from typing import Mapping

PICK_TYPES: tuple[str, ...] = ("frequency", "ai", "random")

Pair = tuple[int, int]
Triplet = tuple[int, int, int]


def freeze_counts(counts: Mapping) -> Mapping:
    """Read-only copy of a counter, keys in ascending order."""
    return MappingProxyType({key: counts[key] for key in sorted(counts)})


@dataclass(frozen=True)
class DrawRecord:
    """One historical draw, regular numbers in source column order."""

    draw_date: date
    numbers: tuple[int, ...]
    secondary: int | None = None

    @property
    def sum_total(self) -> int:
        return sum(self.numbers)

    @property
    def odd_count(self) -> int:
        return sum(1 for n in self.numbers if n % 2 == 1)


@dataclass(frozen=True)
class NormalizationResult:
    draws: tuple[DrawRecord, ...]
    dropped: int = 0


@dataclass(frozen=True)
class FrequencyTable:
    """Occurrence counts, all-time and within the recent window.

    Numbers never observed are absent; look them up with ``.get(n, 0)``.
    """

    all_time: Mapping[int, int]
    recent: Mapping[int, int]
    secondary_all_time: Mapping[int, int] | None = None
    secondary_recent: Mapping[int, int] | None = None
    draw_count: int = 0
    recent_draw_count: int = 0
    window_days: int = 30
    reference_date: date | None = None


@dataclass(frozen=True)
class SumRange:
    """Min/max/average of per-draw sums.

    With no draws, min is +inf and max is -inf; use ``bounded()`` before
    exposing the range to users.
    """

    min: float = math.inf
    max: float = -math.inf
    average: float = 0.0

    @property
    def is_empty(self) -> bool:
        return self.min > self.max

    def bounded(self) -> tuple[int, int]:
        """(min, max) as integers, or a zero-width (0, 0) when there is no data."""
        if self.is_empty:
            return 0, 0
        return int(self.min), int(self.max)


@dataclass(frozen=True)
class OddEvenSplit:
    odd: int
    even: int


@dataclass(frozen=True)
class PatternTable:
    pair_counts: Mapping[Pair, int]
    triplet_counts: Mapping[Triplet, int]
    sum_range: SumRange = field(default_factory=SumRange)
    odd_even: tuple[OddEvenSplit, ...] = ()
    draw_count: int = 0


@dataclass(frozen=True)
class RankedNumber:
    number: int
    score: float


@dataclass(frozen=True)
class WeightedRanking:
    """Priority order over every number of a game, best first."""

    entries: tuple[RankedNumber, ...]

    @property
    def numbers(self) -> list[int]:
        return [entry.number for entry in self.entries]

    def top(self, n: int) -> tuple[RankedNumber, ...]:
        return self.entries[:n]


@dataclass(frozen=True)
class Pick:
    """A complete, rule-valid set of numbers for one game."""

    game: str
    pick_type: str
    numbers: tuple[int, ...]
    secondary: int | None = None
    created_at: datetime = field(default_factory=datetime.now)
