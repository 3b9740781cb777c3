"""FastAPI dependencies for the game session archive."""

from functools import cache
from typing import Annotated

from fastapi import Depends

from lifetune_backend.database.archive import DatabaseSessionArchive
from lifetune_backend.database.service import DatabaseService
from lifetune_backend.game_logic.persistence import SessionArchive
from lifetune_backend.settings import BackendSettings, get_settings

SettingsDep = Annotated[BackendSettings, Depends(get_settings)]


@cache
def _database_for(database_url: str) -> DatabaseService:
    """Build one :class:`DatabaseService` per connection string."""
    return DatabaseService(database_url)


def get_database(settings: SettingsDep) -> DatabaseService:
    """Return the database service for the configured URL."""
    return _database_for(settings.database_url)


def get_session_archive(
    db: Annotated[DatabaseService, Depends(get_database)],
) -> SessionArchive:
    """Return the archive finished games are written to."""
    return DatabaseSessionArchive(db)
