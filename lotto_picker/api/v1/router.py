"""Aggregate API v1 router."""

from fastapi import APIRouter

from lotto_picker.api.v1.endpoints import (
    picks,
    analytics,
    datasets,
)

api_router = APIRouter()

api_router.include_router(picks.router, prefix="/picks", tags=["Picks"])
api_router.include_router(analytics.router, prefix="/analytics", tags=["Analytics"])
api_router.include_router(datasets.router, prefix="/datasets", tags=["Datasets"])
