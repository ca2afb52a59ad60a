"""CRUD operations for generated picks."""

from sqlalchemy import select, desc
from sqlalchemy.ext.asyncio import AsyncSession

from lotto_picker.db.models.generated_pick import GeneratedPick


async def create_pick(session: AsyncSession, pick: dict) -> GeneratedPick:
    obj = GeneratedPick(**pick)
    session.add(obj)
    await session.flush()
    return obj


async def list_picks(
    session: AsyncSession, game: str | None = None, limit: int = 50
) -> list[GeneratedPick]:
    query = select(GeneratedPick).order_by(desc(GeneratedPick.id)).limit(limit)
    if game:
        query = query.where(GeneratedPick.game == game)
    result = await session.execute(query)
    return list(result.scalars().all())
