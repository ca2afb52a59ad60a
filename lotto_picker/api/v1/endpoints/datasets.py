"""Dataset management endpoints."""

from fastapi import APIRouter, Depends

from lotto_picker.api.deps import get_pick_service
from lotto_picker.api.v1.endpoints.errors import http_errors
from lotto_picker.schemas.picks import ReloadResponse
from lotto_picker.services.pick_service import PickService

router = APIRouter()


@router.post("/{game}/reload", response_model=ReloadResponse)
async def reload_dataset(
    game: str,
    service: PickService = Depends(get_pick_service),
):
    """Re-read a game's historical data and drop its cached analysis."""
    with http_errors():
        snapshot = await service.reload(game)
    return ReloadResponse(
        game=snapshot.game,
        version=snapshot.version,
        total_rows=snapshot.total_rows,
        valid_draws=len(snapshot.draws),
        dropped_rows=snapshot.dropped,
        loaded_at=snapshot.loaded_at,
    )
