"""Shared fixtures: game configs, draw builders and fake collaborators."""

from datetime import date, timedelta

import numpy as np
import pytest

from lotto_picker.analysis.records import DrawRecord
from lotto_picker.exceptions import DatasetNotFound
from lotto_picker.games import GAME_CONFIG
from lotto_picker.services.pick_service import PickService
from lotto_picker.sources.base import BaseCandidateGenerator, BaseDatasetSource

TODAY = date(2024, 6, 30)
OLD = date(2020, 1, 1)


def draw(numbers, on=OLD, secondary=None) -> DrawRecord:
    return DrawRecord(draw_date=on, numbers=tuple(numbers), secondary=secondary)


def lotto_row(numbers, on=OLD, **extra) -> dict:
    row = {"Year": str(on.year), "Month": str(on.month), "Day": str(on.day)}
    row.update({f"Num{i}": str(n) for i, n in enumerate(numbers, start=1)})
    row.update(extra)
    return row


def powerball_row(numbers, powerball, on=OLD) -> dict:
    return lotto_row(numbers, on=on, Powerball=str(powerball))


class FakeSource(BaseDatasetSource):
    def __init__(self, rows_by_game: dict[str, list[dict]]):
        self.rows_by_game = rows_by_game
        self.calls = 0

    def load_rows(self, game_id: str) -> list[dict]:
        self.calls += 1
        if game_id not in self.rows_by_game:
            raise DatasetNotFound(game_id)
        return list(self.rows_by_game[game_id])


class FakeGenerator(BaseCandidateGenerator):
    def __init__(self, result=None, error: Exception | None = None):
        self.result = result
        self.error = error
        self.contexts = []

    async def request_candidates(self, context):
        self.contexts.append(context)
        if self.error is not None:
            raise self.error
        return self.result


class FakeStore:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.saved = []

    async def save(self, pick):
        if self.fail:
            raise RuntimeError("disk full")
        self.saved.append(pick)
        return True


@pytest.fixture
def lotto():
    return GAME_CONFIG["lotto"]


@pytest.fixture
def powerball():
    return GAME_CONFIG["powerball"]


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def two_draws():
    return [draw([1, 2, 3, 4, 5, 6]), draw([1, 2, 3, 4, 5, 7])]


@pytest.fixture
def source():
    return FakeSource({
        "lotto": [
            lotto_row([1, 2, 3, 4, 5, 6]),
            lotto_row([1, 2, 3, 4, 5, 7], on=OLD + timedelta(days=3)),
        ],
        "powerball": [
            powerball_row([10, 20, 30, 40, 50], 7),
            powerball_row([10, 20, 30, 41, 51], 7, on=OLD + timedelta(days=3)),
            powerball_row([10, 21, 31, 41, 52], 9, on=OLD + timedelta(days=7)),
        ],
    })


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def make_service(source, store):
    def _make(generator=None, ai_enabled=True, source_=None, store_=store):
        return PickService(
            source=source_ or source,
            generator=generator,
            store=store_,
            ai_enabled=ai_enabled,
            window_days=30,
            today=lambda: TODAY,
        )
    return _make
