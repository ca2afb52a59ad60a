"""Pydantic schemas for statistics."""

from pydantic import BaseModel


class NumberFrequency(BaseModel):
    number: int
    count: int


class CombinationFrequency(BaseModel):
    numbers: list[int]
    count: int


class SumRangeSchema(BaseModel):
    min: int
    max: int
    average: float


class FrequencySummary(BaseModel):
    hot: list[NumberFrequency]
    cold: list[NumberFrequency]
    recent_hot: list[NumberFrequency]
    window_days: int
    recent_draws: int


class SecondaryFrequencySummary(BaseModel):
    hot: list[NumberFrequency]
    cold: list[NumberFrequency]


class PatternSummary(BaseModel):
    sum_range: SumRangeSchema
    common_pairs: list[CombinationFrequency]
    common_triplets: list[CombinationFrequency]
    odd_even_distribution: dict[str, int]  # {"3-3": 12, "4-2": 9, ...}


class AnalyticsResponse(BaseModel):
    game: str
    game_name: str
    total_draws: int
    dropped_rows: int
    frequency: FrequencySummary
    secondary: SecondaryFrequencySummary | None = None
    patterns: PatternSummary


class RankedNumberSchema(BaseModel):
    rank: int
    number: int
    score: float
