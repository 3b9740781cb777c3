"""Dependency providers for FastAPI routers."""

from lifetune_backend.api.services import GameTableService
from lifetune_backend.database import get_session_archive

_game_table_service = GameTableService()


def get_game_table_service() -> GameTableService:
    """Return the process-wide registry of game tables."""

    return _game_table_service


__all__ = ["get_game_table_service", "get_session_archive"]
