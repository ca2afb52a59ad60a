"""Pick assembler — turns a ranked or sampled candidate list into a valid Pick."""

from typing import Iterable

import numpy as np

from lotto_picker.analysis.records import Pick, WeightedRanking
from lotto_picker.analysis.weighting import uniform_backfill, weighted_sample
from lotto_picker.games import GameConfig


def _distinct_in_range(candidates: Iterable[int], upper: int) -> list[int]:
    seen = set()
    result = []
    for num in candidates:
        if 1 <= num <= upper and num not in seen:
            seen.add(num)
            result.append(num)
    return result


def assemble_pick(
    candidates: Iterable[int],
    game: GameConfig,
    pick_type: str,
    *,
    secondary: int | None = None,
    rng: np.random.Generator | None = None,
) -> Pick:
    """Build one Pick from candidates in priority order.

    The first ``pick_count`` distinct in-range candidates become the regular
    numbers; a short list is backfilled with uniform random numbers. For games
    with a secondary number, an explicit in-range ``secondary`` wins, then the
    next candidate after the regular numbers if it fits the secondary range,
    then a uniform draw.
    """
    rng = rng if rng is not None else np.random.default_rng()

    ordered = _distinct_in_range(candidates, game.max_num)
    numbers = uniform_backfill(ordered[:game.pick_count], game.pick_count, game.max_num, rng)

    secondary_num = None
    if game.has_secondary:
        leftover = ordered[game.pick_count:game.pick_count + 1]
        if secondary is not None and 1 <= secondary <= game.secondary_max:
            secondary_num = secondary
        elif leftover and leftover[0] <= game.secondary_max:
            secondary_num = leftover[0]
        else:
            secondary_num = int(rng.integers(1, game.secondary_max + 1))

    _check_pick(numbers, secondary_num, game)
    return Pick(
        game=game.game_id,
        pick_type=pick_type,
        numbers=tuple(sorted(numbers)),
        secondary=secondary_num,
    )


def _check_pick(numbers: list[int], secondary: int | None, game: GameConfig) -> None:
    if len(numbers) != game.pick_count or len(set(numbers)) != game.pick_count:
        raise ValueError(f"Assembled {numbers} for {game.game_id}")
    if any(not 1 <= n <= game.max_num for n in numbers):
        raise ValueError(f"Assembled out-of-range numbers {numbers}")
    if game.has_secondary != (secondary is not None):
        raise ValueError(f"Secondary number mismatch for {game.game_id}")


def ranked_pick(
    ranking: WeightedRanking,
    game: GameConfig,
    pick_type: str = "frequency",
    rng: np.random.Generator | None = None,
) -> Pick:
    """Truncate the ranking to a Pick."""
    return assemble_pick(ranking.numbers, game, pick_type, rng=rng)


def sampled_pick(
    counts,
    secondary_counts,
    game: GameConfig,
    pick_type: str = "frequency",
    rng: np.random.Generator | None = None,
) -> Pick:
    """Frequency-weighted random Pick, sampling without replacement."""
    rng = rng if rng is not None else np.random.default_rng()
    numbers = weighted_sample(counts, game.pick_count, game.max_num, rng)
    secondary = None
    if game.has_secondary:
        secondary = weighted_sample(secondary_counts, 1, game.secondary_max, rng)[0]
    return assemble_pick(numbers, game, pick_type, secondary=secondary, rng=rng)


def random_pick(game: GameConfig, rng: np.random.Generator | None = None) -> Pick:
    """Uniformly random Pick."""
    return assemble_pick([], game, "random", rng=rng)
