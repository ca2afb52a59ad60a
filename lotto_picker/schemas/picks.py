"""Pydantic schemas for generated picks."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

from lotto_picker.analysis.records import Pick
from lotto_picker.games import GAME_CONFIG


class PickSchema(BaseModel):
    game: str
    game_name: str
    pick_type: Literal["frequency", "ai", "random"]
    regular_numbers: list[int]
    secondary_number: int | None = None

    @classmethod
    def from_pick(cls, pick: Pick) -> "PickSchema":
        return cls(
            game=pick.game,
            game_name=GAME_CONFIG[pick.game].name,
            pick_type=pick.pick_type,
            regular_numbers=list(pick.numbers),
            secondary_number=pick.secondary,
        )


class SavedPickSchema(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    game: str
    pick_type: str
    regular_numbers: list[int]
    secondary_number: int | None
    created_at: datetime


class ReloadResponse(BaseModel):
    game: str
    version: int
    total_rows: int
    valid_draws: int
    dropped_rows: int
    loaded_at: datetime
