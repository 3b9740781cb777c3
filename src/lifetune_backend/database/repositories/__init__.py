"""Repositories wrapping SQLAlchemy sessions."""

from lifetune_backend.database.repositories.game_session import GameSessionRepository

__all__ = ["GameSessionRepository"]
