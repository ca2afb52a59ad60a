"""Dependency injection for FastAPI."""

from functools import lru_cache

from lotto_picker.db.engine import async_session_factory
from lotto_picker.services.pick_service import PickService
from lotto_picker.services.pick_store import PickStore
from lotto_picker.sources.csv_dataset import CsvDatasetSource
from lotto_picker.sources.text_generator import TextGeneratorClient


@lru_cache
def get_pick_store() -> PickStore:
    return PickStore(async_session_factory)


@lru_cache
def get_pick_service() -> PickService:
    """Process-wide pick service; datasets and analysis cache live here."""
    return PickService(
        source=CsvDatasetSource(),
        generator=TextGeneratorClient(),
        store=get_pick_store(),
    )
