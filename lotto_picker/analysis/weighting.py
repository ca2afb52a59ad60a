"""Weighted selector — scores every number of a game from the analysis tables."""

from typing import Mapping

import numpy as np

from lotto_picker.analysis.records import (
    FrequencyTable,
    PatternTable,
    RankedNumber,
    WeightedRanking,
)
from lotto_picker.games import GameConfig

ALL_TIME_WEIGHT = 0.7
RECENT_WEIGHT = 0.3
SUM_WEIGHT = 0.2


def rank_numbers(
    frequency: FrequencyTable, patterns: PatternTable, game: GameConfig
) -> WeightedRanking:
    """Rank 1..max_num by blended frequency, nudged by the average draw sum.

    score = (all_time * 0.7 + recent * 0.3) * (1 + number / average_sum * 0.2)

    Unseen numbers score 0. With no sum data the adjustment is skipped.
    Sorted by score descending, then number ascending.
    """
    average_sum = patterns.sum_range.average

    entries = []
    for number in range(1, game.max_num + 1):
        score = (
            frequency.all_time.get(number, 0) * ALL_TIME_WEIGHT
            + frequency.recent.get(number, 0) * RECENT_WEIGHT
        )
        if average_sum:
            score *= 1 + (number / average_sum) * SUM_WEIGHT
        entries.append(RankedNumber(number=number, score=score))

    entries.sort(key=lambda e: (-e.score, e.number))
    return WeightedRanking(entries=tuple(entries))


def uniform_backfill(
    selected: list[int], count: int, max_num: int, rng: np.random.Generator
) -> list[int]:
    """Top up ``selected`` with distinct uniform draws from 1..max_num."""
    if count > max_num:
        raise ValueError(f"Cannot pick {count} distinct numbers from 1..{max_num}")
    chosen = set(selected)
    while len(selected) < count:
        num = int(rng.integers(1, max_num + 1))
        if num not in chosen:
            chosen.add(num)
            selected.append(num)
    return selected


def weighted_sample(
    counts: Mapping[int, int] | None,
    count: int,
    max_num: int,
    rng: np.random.Generator | None = None,
) -> list[int]:
    """Draw ``count`` distinct numbers using raw counts as weights.

    Sampling is without replacement. Slots left once the weighted pool is
    exhausted (or when it is empty) are filled uniformly from 1..max_num.
    """
    rng = rng if rng is not None else np.random.default_rng()

    pool = sorted(
        num for num, c in (counts or {}).items() if 1 <= num <= max_num and c > 0
    )
    numbers = np.array(pool, dtype=np.int64)
    weights = np.array([counts[num] for num in pool], dtype=np.float64)

    selected = []
    while len(selected) < count and weights.sum() > 0:
        idx = rng.choice(len(numbers), p=weights / weights.sum())
        selected.append(int(numbers[idx]))
        weights[idx] = 0  # without replacement

    return uniform_backfill(selected, count, max_num, rng)
