"""Generated pick ORM model."""

from datetime import datetime

from sqlalchemy import JSON, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from lotto_picker.db.base import Base


class GeneratedPick(Base):
    """Append-only log of every pick handed out."""

    __tablename__ = "generated_picks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    game: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    pick_type: Mapped[str] = mapped_column(String(20), nullable=False)  # frequency / ai / random
    regular_numbers: Mapped[list[int]] = mapped_column(JSON, nullable=False)
    secondary_number: Mapped[int | None] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())

    def __repr__(self) -> str:
        return f"<GeneratedPick game={self.game} type={self.pick_type} numbers={self.regular_numbers}>"
