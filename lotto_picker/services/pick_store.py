"""Pick persistence sink (append-only generated picks log)."""

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from lotto_picker.analysis.records import Pick
from lotto_picker.db.crud import generated_pick as crud


class PickStore:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def save(self, pick: Pick) -> bool:
        """Persist a pick. Returns False (and logs) when the write failed."""
        try:
            async with self._session_factory() as session:
                await crud.create_pick(session, {
                    "game": pick.game,
                    "pick_type": pick.pick_type,
                    "regular_numbers": list(pick.numbers),
                    "secondary_number": pick.secondary,
                    "created_at": pick.created_at,
                })
                await session.commit()
        except (SQLAlchemyError, OSError) as e:
            logger.error("Failed to save {} pick for {}: {}", pick.pick_type, pick.game, e)
            return False
        return True

    async def history(self, game: str | None = None, limit: int = 50) -> list:
        async with self._session_factory() as session:
            return await crud.list_picks(session, game=game, limit=limit)
