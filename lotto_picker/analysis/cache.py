"""Analysis cache — computed tables keyed by (game, partition)."""

import threading
from typing import Any, Callable

from loguru import logger


class AnalysisCache:
    """Read-through cache of analysis results.

    Each entry remembers the dataset version it was computed from; a lookup
    with a different version recomputes. Results are stored only after the
    compute function returns, so readers never see a partial value. Two
    callers racing on a cold key may both compute.
    """

    def __init__(self):
        self._entries: dict[tuple[str, str], tuple[int, Any]] = {}
        self._lock = threading.Lock()

    def get_or_compute(
        self, game: str, partition: str, version: int, compute: Callable[[], Any]
    ) -> Any:
        key = (game, partition)
        with self._lock:
            entry = self._entries.get(key)
        if entry is not None and entry[0] == version:
            logger.debug("Analysis cache hit: {} {} v{}", game, partition, version)
            return entry[1]

        logger.debug("Analysis cache miss: {} {} v{}", game, partition, version)
        value = compute()
        with self._lock:
            current = self._entries.get(key)
            if current is None or current[0] <= version:
                self._entries[key] = (version, value)
        return value

    def invalidate(self, game: str | None = None, partition: str | None = None) -> None:
        """Clear cached results."""
        with self._lock:
            if game and partition:
                self._entries.pop((game, partition), None)
            elif game:
                for key in [k for k in self._entries if k[0] == game]:
                    del self._entries[key]
            else:
                self._entries.clear()

    def __contains__(self, key: tuple[str, str]) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
