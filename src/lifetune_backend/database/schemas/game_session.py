"""Finished game session database schema."""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from lifetune_backend.database.base import BaseSchema


class GameSessionSchema(BaseSchema):
    """SQLAlchemy model for archived game summaries."""

    __tablename__ = "game_sessions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    players: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False)
    winner: Mapped[str | None] = mapped_column(String(128), nullable=True)
    played_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True
    )
