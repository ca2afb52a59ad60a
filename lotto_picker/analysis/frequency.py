"""Frequency analyzer — per-number occurrence counts."""

from collections import Counter
from datetime import date, timedelta
from typing import Sequence

from lotto_picker.analysis.records import DrawRecord, FrequencyTable, freeze_counts
from lotto_picker.games import GameConfig

RECENT_WINDOW_DAYS = 30


def _count(draws: Sequence[DrawRecord], with_secondary: bool) -> tuple[Counter, Counter | None]:
    numbers = Counter()
    secondary = Counter() if with_secondary else None
    for draw in draws:
        # Each entry of the draw is counted; a repeated number counts once per repeat.
        numbers.update(draw.numbers)
        if secondary is not None and draw.secondary is not None:
            secondary[draw.secondary] += 1
    return numbers, secondary


def analyze_frequency(
    draws: Sequence[DrawRecord],
    game: GameConfig,
    *,
    today: date | None = None,
    window_days: int = RECENT_WINDOW_DAYS,
) -> FrequencyTable:
    """Count each number across all draws and across the recent window.

    The recent window holds draws dated from ``today - window_days`` up to
    ``today``, both inclusive. An empty input gives empty tables.
    """
    today = today or date.today()
    cutoff = today - timedelta(days=window_days)

    all_time, secondary_all_time = _count(draws, game.has_secondary)
    recent_draws = [d for d in draws if cutoff <= d.draw_date <= today]
    recent, secondary_recent = _count(recent_draws, game.has_secondary)

    return FrequencyTable(
        all_time=freeze_counts(all_time),
        recent=freeze_counts(recent),
        secondary_all_time=freeze_counts(secondary_all_time) if secondary_all_time is not None else None,
        secondary_recent=freeze_counts(secondary_recent) if secondary_recent is not None else None,
        draw_count=len(draws),
        recent_draw_count=len(recent_draws),
        window_days=window_days,
        reference_date=today,
    )


def hot_numbers(counts, n: int = 10) -> list[tuple[int, int]]:
    """Most frequent numbers, ties broken by ascending number."""
    return sorted(counts.items(), key=lambda item: (-item[1], item[0]))[:n]


def cold_numbers(counts, n: int = 10) -> list[tuple[int, int]]:
    """Least frequent observed numbers, ties broken by ascending number."""
    return sorted(counts.items(), key=lambda item: (item[1], item[0]))[:n]
