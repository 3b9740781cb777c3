"""Database connectivity helpers and configuration objects."""

from lifetune_backend.database.archive import DatabaseSessionArchive
from lifetune_backend.database.base import BaseSchema
from lifetune_backend.database.dependencies import get_database, get_session_archive
from lifetune_backend.database.repositories import GameSessionRepository
from lifetune_backend.database.schemas import GameSessionSchema
from lifetune_backend.database.service import DatabaseService
from lifetune_backend.settings import BackendSettings, get_settings

__all__ = [
    "BackendSettings",
    "BaseSchema",
    "DatabaseService",
    "DatabaseSessionArchive",
    "GameSessionRepository",
    "GameSessionSchema",
    "get_database",
    "get_session_archive",
    "get_settings",
]
