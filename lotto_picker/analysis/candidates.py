"""Prompt context and candidate extraction for generative-text picks."""

import re
from dataclasses import dataclass
from typing import Iterable

from lotto_picker.analysis.frequency import cold_numbers, hot_numbers
from lotto_picker.analysis.patterns import common_combinations
from lotto_picker.analysis.records import FrequencyTable, PatternTable
from lotto_picker.games import GameConfig

_INT_RE = re.compile(r"\d+")


@dataclass(frozen=True)
class PickContext:
    game: GameConfig
    hot: tuple[int, ...]
    cold: tuple[int, ...]
    common_pairs: tuple[tuple[int, int], ...]
    sum_min: int
    sum_max: int


@dataclass(frozen=True)
class CandidateDraw:
    numbers: tuple[int, ...]
    secondary: int | None = None


def build_context(
    frequency: FrequencyTable, patterns: PatternTable, game: GameConfig
) -> PickContext:
    sum_min, sum_max = patterns.sum_range.bounded()
    return PickContext(
        game=game,
        hot=tuple(num for num, _ in hot_numbers(frequency.all_time, 10)),
        cold=tuple(num for num, _ in cold_numbers(frequency.all_time, 10)),
        common_pairs=tuple(pair for pair, _ in common_combinations(patterns.pair_counts, 5)),
        sum_min=sum_min,
        sum_max=sum_max,
    )


def build_prompt(context: PickContext) -> str:
    game = context.game
    lines = [
        f"Generate {game.name} numbers based on the following analysis:",
        f"- Hot numbers: {', '.join(map(str, context.hot))}",
        f"- Cold numbers: {', '.join(map(str, context.cold))}",
        f"- Common pairs: {', '.join(f'{a}-{b}' for a, b in context.common_pairs)}",
        f"- Sum range: {context.sum_min} to {context.sum_max}",
        "",
    ]
    ask = f"Generate {game.pick_count} unique numbers between 1 and {game.max_num}"
    if game.has_secondary:
        ask += f", and a {game.name} number between 1 and {game.secondary_max}"
    lines.append(ask + ".")
    return "\n".join(lines)


def extract_integers(text: str) -> list[int]:
    """All non-negative integers in the text, in order of appearance."""
    return [int(match) for match in _INT_RE.findall(text or "")]


def extract_candidates(integers: Iterable[int], game: GameConfig) -> CandidateDraw | None:
    """First ``pick_count`` distinct in-range integers, then the secondary.

    The secondary is the first integer after the regular numbers are filled
    that fits the secondary range. Returns None when nothing usable was found.
    """
    numbers = []
    secondary = None
    for num in integers:
        if len(numbers) < game.pick_count:
            if 1 <= num <= game.max_num and num not in numbers:
                numbers.append(num)
        elif game.has_secondary and 1 <= num <= game.secondary_max:
            secondary = num
            break
        elif not game.has_secondary:
            break

    if not numbers:
        return None
    return CandidateDraw(numbers=tuple(numbers), secondary=secondary)
