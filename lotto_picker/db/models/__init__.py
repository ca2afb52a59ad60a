"""ORM models package."""

from lotto_picker.db.models.generated_pick import GeneratedPick

__all__ = [
    "GeneratedPick",
]
