"""Abstract collaborators the pick service depends on."""

from abc import ABC, abstractmethod

from lotto_picker.analysis.candidates import PickContext


class BaseDatasetSource(ABC):
    """Supplies raw historical rows for a game."""

    @abstractmethod
    def load_rows(self, game_id: str) -> list[dict]:
        """Return raw rows (column label -> cell).

        Raises:
            DatasetNotFound: no data exists for the game.
        """
        ...


class BaseCandidateGenerator(ABC):
    """Produces candidate integers for a pick from an analysis summary."""

    @abstractmethod
    async def request_candidates(self, context: PickContext) -> list[int] | None:
        """Return integers extracted from the response, or None on failure."""
        ...
