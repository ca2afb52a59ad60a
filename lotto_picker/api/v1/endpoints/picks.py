"""Pick generation API endpoints."""

from typing import Literal

from fastapi import APIRouter, Depends, Query

from lotto_picker.api.deps import get_pick_service, get_pick_store
from lotto_picker.api.v1.endpoints.errors import http_errors
from lotto_picker.config import settings
from lotto_picker.games import resolve_game_id
from lotto_picker.schemas.picks import PickSchema, SavedPickSchema
from lotto_picker.services.pick_service import PickService
from lotto_picker.services.pick_store import PickStore

router = APIRouter()


@router.get("", response_model=list[PickSchema])
async def generate_picks(
    game: str = Query("lotto", description="lotto / powerball"),
    draws: int = Query(1, ge=1, le=settings.MAX_DRAWS_PER_REQUEST),
    pick_type: Literal["frequency", "ai", "random"] = "frequency",
    sampling: Literal["ranked", "weighted"] = Query(
        "ranked", description="frequency picks: top of ranking or count-weighted sampling",
    ),
    service: PickService = Depends(get_pick_service),
):
    """Generate picks. AI picks that fail come back labelled "frequency"."""
    with http_errors():
        picks = await service.generate_picks(game, draws, pick_type, sampling=sampling)
    return [PickSchema.from_pick(p) for p in picks]


@router.get("/history", response_model=list[SavedPickSchema])
async def pick_history(
    game: str | None = None,
    limit: int = Query(50, ge=1, le=500),
    store: PickStore = Depends(get_pick_store),
):
    """Previously generated picks, newest first."""
    with http_errors():
        game_id = resolve_game_id(game) if game else None
    return await store.history(game=game_id, limit=limit)
