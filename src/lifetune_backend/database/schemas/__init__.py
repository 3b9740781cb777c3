"""SQLAlchemy schemas."""

from lifetune_backend.database.schemas.game_session import GameSessionSchema

__all__ = ["GameSessionSchema"]
