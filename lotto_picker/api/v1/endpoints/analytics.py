"""Analytics API endpoints."""

from fastapi import APIRouter, Depends, Query

from lotto_picker.api.deps import get_pick_service
from lotto_picker.api.v1.endpoints.errors import http_errors
from lotto_picker.schemas.statistics import AnalyticsResponse, RankedNumberSchema
from lotto_picker.services.pick_service import PickService

router = APIRouter()


@router.get("", response_model=AnalyticsResponse)
async def analytics(
    game: str = Query("lotto", description="lotto / powerball"),
    service: PickService = Depends(get_pick_service),
):
    """Hot/cold numbers, common pairs and triplets, sum range, odd/even split."""
    with http_errors():
        return await service.get_analysis(game)


@router.get("/ranking", response_model=list[RankedNumberSchema])
async def ranking(
    game: str = Query("lotto", description="lotto / powerball"),
    top_n: int | None = Query(None, ge=1, le=100),
    service: PickService = Depends(get_pick_service),
):
    """Weighted number ranking, best first."""
    with http_errors():
        result = await service.get_ranking(game)
    entries = result.top(top_n) if top_n else result.entries
    return [
        RankedNumberSchema(rank=i, number=e.number, score=round(e.score, 4))
        for i, e in enumerate(entries, start=1)
    ]
