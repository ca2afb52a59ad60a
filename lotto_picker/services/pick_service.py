"""Pick service — orchestrates dataset snapshots, analysis and pick generation."""

import asyncio
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Callable

import numpy as np
from loguru import logger

from lotto_picker.analysis.assembler import assemble_pick, random_pick, ranked_pick, sampled_pick
from lotto_picker.analysis.cache import AnalysisCache
from lotto_picker.analysis.candidates import build_context, extract_candidates
from lotto_picker.analysis.frequency import analyze_frequency, cold_numbers, hot_numbers
from lotto_picker.analysis.normalizer import normalize_rows
from lotto_picker.analysis.patterns import analyze_patterns, common_combinations, odd_even_distribution
from lotto_picker.analysis.records import (
    DrawRecord,
    FrequencyTable,
    PatternTable,
    Pick,
    PICK_TYPES,
    WeightedRanking,
)
from lotto_picker.analysis.weighting import rank_numbers
from lotto_picker.config import settings
from lotto_picker.exceptions import EmptyDataset
from lotto_picker.games import GameConfig, get_game_config
from lotto_picker.schemas.statistics import (
    AnalyticsResponse,
    CombinationFrequency,
    FrequencySummary,
    NumberFrequency,
    PatternSummary,
    SecondaryFrequencySummary,
    SumRangeSchema,
)
from lotto_picker.sources.base import BaseCandidateGenerator, BaseDatasetSource

SAMPLING_MODES = ("ranked", "weighted")


@dataclass(frozen=True)
class DatasetSnapshot:
    """Normalized draws of one load of a game's dataset."""

    game: str
    version: int
    draws: tuple[DrawRecord, ...]
    total_rows: int
    dropped: int
    loaded_at: datetime = field(default_factory=datetime.now)


def _frequencies(counts, n: int, cold: bool = False) -> list[NumberFrequency]:
    rows = cold_numbers(counts, n) if cold else hot_numbers(counts, n)
    return [NumberFrequency(number=num, count=count) for num, count in rows]


def _combinations(counts, n: int) -> list[CombinationFrequency]:
    return [
        CombinationFrequency(numbers=list(combo), count=count)
        for combo, count in common_combinations(counts, n)
    ]


class PickService:
    """Owns the dataset snapshots and analysis cache for all games.

    Analysis is pure and synchronous; only dataset loading, text generation
    and persistence touch the outside world.
    """

    def __init__(
        self,
        source: BaseDatasetSource,
        generator: BaseCandidateGenerator | None = None,
        store=None,
        *,
        cache: AnalysisCache | None = None,
        window_days: int | None = None,
        ai_enabled: bool | None = None,
        today: Callable[[], date] = date.today,
    ):
        self.source = source
        self.generator = generator
        self.store = store
        self.cache = cache or AnalysisCache()
        self.window_days = window_days or settings.RECENT_WINDOW_DAYS
        self.ai_enabled = settings.AI_ENABLED if ai_enabled is None else ai_enabled
        self._today = today
        self._snapshots: dict[str, DatasetSnapshot] = {}
        self._versions: dict[str, int] = {}
        self._load_lock = asyncio.Lock()

    # --- Dataset snapshots ---

    async def reload(self, game: str) -> DatasetSnapshot:
        """Re-read a game's dataset and drop its cached analysis."""
        config = get_game_config(game)
        async with self._load_lock:
            return await self._load(config)

    async def get_snapshot(self, game: str) -> DatasetSnapshot:
        config = get_game_config(game)
        snapshot = self._snapshots.get(config.game_id)
        if snapshot is not None:
            return snapshot
        async with self._load_lock:
            snapshot = self._snapshots.get(config.game_id)
            if snapshot is None:
                snapshot = await self._load(config)
            return snapshot

    async def _load(self, config: GameConfig) -> DatasetSnapshot:
        loop = asyncio.get_running_loop()
        rows = await loop.run_in_executor(None, self.source.load_rows, config.game_id)

        try:
            result = normalize_rows(rows, config)
            draws, dropped = result.draws, result.dropped
        except EmptyDataset as e:
            logger.warning("[{}] dataset has no valid draws", config.game_id)
            draws, dropped = (), e.dropped

        version = self._versions.get(config.game_id, 0) + 1
        self._versions[config.game_id] = version
        snapshot = DatasetSnapshot(
            game=config.game_id,
            version=version,
            draws=draws,
            total_rows=len(rows),
            dropped=dropped,
        )
        self._snapshots[config.game_id] = snapshot
        self.cache.invalidate(config.game_id)
        logger.info(
            "[{}] dataset v{} ready: {} draws ({} dropped)",
            config.game_id, version, len(draws), dropped,
        )
        return snapshot

    # --- Analysis ---

    async def get_tables(
        self, game: str
    ) -> tuple[GameConfig, DatasetSnapshot, FrequencyTable, PatternTable]:
        """Frequency and pattern tables for the current snapshot.

        Raises:
            EmptyDataset: the snapshot holds no valid draws.
        """
        config = get_game_config(game)
        snapshot = await self.get_snapshot(config.game_id)
        if not snapshot.draws:
            raise EmptyDataset(config.game_id, dropped=snapshot.dropped)

        today = self._today()
        frequency = self.cache.get_or_compute(
            config.game_id, "frequency", snapshot.version,
            lambda: analyze_frequency(
                snapshot.draws, config, today=today, window_days=self.window_days,
            ),
        )
        if frequency.reference_date != today:
            # The recent window moved since this table was cached.
            self.cache.invalidate(config.game_id, "frequency")
            frequency = self.cache.get_or_compute(
                config.game_id, "frequency", snapshot.version,
                lambda: analyze_frequency(
                    snapshot.draws, config, today=today, window_days=self.window_days,
                ),
            )
        patterns = self.cache.get_or_compute(
            config.game_id, "patterns", snapshot.version,
            lambda: analyze_patterns(snapshot.draws, config),
        )
        return config, snapshot, frequency, patterns

    async def get_ranking(self, game: str) -> WeightedRanking:
        config, _, frequency, patterns = await self.get_tables(game)
        return rank_numbers(frequency, patterns, config)

    async def get_analysis(self, game: str) -> AnalyticsResponse:
        config, snapshot, frequency, patterns = await self.get_tables(game)
        sum_min, sum_max = patterns.sum_range.bounded()

        secondary = None
        if config.has_secondary:
            secondary = SecondaryFrequencySummary(
                hot=_frequencies(frequency.secondary_all_time, 5),
                cold=_frequencies(frequency.secondary_all_time, 5, cold=True),
            )

        return AnalyticsResponse(
            game=config.game_id,
            game_name=config.name,
            total_draws=len(snapshot.draws),
            dropped_rows=snapshot.dropped,
            frequency=FrequencySummary(
                hot=_frequencies(frequency.all_time, 10),
                cold=_frequencies(frequency.all_time, 10, cold=True),
                recent_hot=_frequencies(frequency.recent, 10),
                window_days=frequency.window_days,
                recent_draws=frequency.recent_draw_count,
            ),
            secondary=secondary,
            patterns=PatternSummary(
                sum_range=SumRangeSchema(
                    min=sum_min, max=sum_max, average=round(patterns.sum_range.average, 2),
                ),
                common_pairs=_combinations(patterns.pair_counts, 5),
                common_triplets=_combinations(patterns.triplet_counts, 5),
                odd_even_distribution=odd_even_distribution(patterns.odd_even),
            ),
        )

    # --- Pick generation ---

    async def generate_picks(
        self,
        game: str,
        draws: int = 1,
        pick_type: str = "frequency",
        *,
        sampling: str = "ranked",
        rng: np.random.Generator | None = None,
    ) -> list[Pick]:
        """Generate ``draws`` independent picks and hand each to the store.

        Raises:
            UnknownGame: game has no configuration.
            EmptyDataset: no valid historical draws to work from.
        """
        if pick_type not in PICK_TYPES:
            raise ValueError(f"Unknown pick type: {pick_type}. Valid: {list(PICK_TYPES)}")
        if sampling not in SAMPLING_MODES:
            raise ValueError(f"Unknown sampling mode: {sampling}. Valid: {list(SAMPLING_MODES)}")
        if draws < 1:
            raise ValueError("draws must be at least 1")

        rng = rng if rng is not None else np.random.default_rng()
        config, _, frequency, patterns = await self.get_tables(game)
        ranking = rank_numbers(frequency, patterns, config)

        picks = []
        for _ in range(draws):
            if pick_type == "random":
                pick = random_pick(config, rng=rng)
            elif pick_type == "ai":
                pick = await self._ai_pick(config, frequency, patterns, ranking, rng)
            elif sampling == "weighted":
                pick = sampled_pick(
                    frequency.all_time, frequency.secondary_all_time, config, rng=rng,
                )
            else:
                pick = ranked_pick(ranking, config, rng=rng)

            await self._persist(pick)
            picks.append(pick)

        logger.info("[{}] generated {} {} picks", config.game_id, len(picks), pick_type)
        return picks

    async def _ai_pick(
        self,
        config: GameConfig,
        frequency: FrequencyTable,
        patterns: PatternTable,
        ranking: WeightedRanking,
        rng: np.random.Generator,
    ) -> Pick:
        """Pick from generated text, or the ranked frequency pick when that fails."""
        integers = None
        if self.ai_enabled and self.generator is not None:
            context = build_context(frequency, patterns, config)
            try:
                integers = await self.generator.request_candidates(context)
            except Exception as e:
                logger.warning("[{}] candidate generator raised: {}", config.game_id, e)
                integers = None

        candidates = extract_candidates(integers or [], config)
        if candidates is None:
            logger.warning("[{}] no AI candidates, falling back to frequency pick", config.game_id)
            return ranked_pick(ranking, config, "frequency", rng=rng)

        return assemble_pick(
            candidates.numbers, config, "ai", secondary=candidates.secondary, rng=rng,
        )

    async def _persist(self, pick: Pick) -> None:
        if self.store is None:
            return
        try:
            await self.store.save(pick)
        except Exception as e:
            logger.error("[{}] pick persistence failed: {}", pick.game, e)
