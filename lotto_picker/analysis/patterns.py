"""Pattern analyzer — pair/triplet co-occurrence, sum range, odd/even split."""

from collections import Counter
from itertools import combinations
from typing import Sequence

from lotto_picker.analysis.records import (
    DrawRecord,
    OddEvenSplit,
    PatternTable,
    SumRange,
    freeze_counts,
)
from lotto_picker.games import GameConfig


def analyze_patterns(draws: Sequence[DrawRecord], game: GameConfig) -> PatternTable:
    """Co-occurrence and shape statistics of the regular numbers.

    Combination keys are sorted ascending, so (3, 7) and (7, 3) are one key.
    Never raises; with no draws the sum range is the empty sentinel.
    """
    pair_counter = Counter()
    triplet_counter = Counter()
    splits = []
    sum_min, sum_max, sum_total = None, None, 0

    for draw in draws:
        numbers = sorted(draw.numbers)
        pair_counter.update(combinations(numbers, 2))
        triplet_counter.update(combinations(numbers, 3))

        draw_sum = draw.sum_total
        sum_min = draw_sum if sum_min is None else min(sum_min, draw_sum)
        sum_max = draw_sum if sum_max is None else max(sum_max, draw_sum)
        sum_total += draw_sum

        odd = draw.odd_count
        splits.append(OddEvenSplit(odd=odd, even=len(numbers) - odd))

    if draws:
        sum_range = SumRange(min=sum_min, max=sum_max, average=sum_total / len(draws))
    else:
        sum_range = SumRange()

    return PatternTable(
        pair_counts=freeze_counts(pair_counter),
        triplet_counts=freeze_counts(triplet_counter),
        sum_range=sum_range,
        odd_even=tuple(splits),
        draw_count=len(draws),
    )


def common_combinations(counts, n: int = 5) -> list[tuple[tuple[int, ...], int]]:
    """Most frequent pairs or triplets, ties broken by ascending key."""
    return sorted(counts.items(), key=lambda item: (-item[1], item[0]))[:n]


def odd_even_distribution(splits: Sequence[OddEvenSplit]) -> dict[str, int]:
    """Number of draws per "odd-even" split, e.g. {"3-3": 12, "4-2": 9}."""
    counter = Counter(f"{s.odd}-{s.even}" for s in splits)
    return {key: counter[key] for key in sorted(counter, key=lambda k: -int(k.split("-")[0]))}
