"""Database-backed implementation of the session archive protocol."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from lifetune_backend.database.repositories import GameSessionRepository
from lifetune_backend.database.schemas import GameSessionSchema
from lifetune_backend.game_logic.persistence import (
    DEFAULT_SESSION_LIST_LIMIT,
    GameSessionRecord,
    SessionCreate,
    SessionStorageError,
    validate_session_input,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from lifetune_backend.database.service import DatabaseService

logger = logging.getLogger(__name__)


def to_record(row: GameSessionSchema) -> GameSessionRecord:
    """Convert a stored row into the archive's record model."""
    try:
        return GameSessionRecord.model_validate(
            {
                "id": row.id,
                "players": row.players,
                "winner": row.winner,
                "played_at": row.played_at,
            }
        )
    except ValidationError as exc:
        msg = f"Stored game session {row.id} is malformed."
        raise SessionStorageError(msg) from exc


class DatabaseSessionArchive:
    """Store and list finished games through SQLAlchemy."""

    def __init__(self, database: DatabaseService) -> None:
        self._database = database

    def create_session(
        self, payload: SessionCreate | Mapping[str, Any]
    ) -> GameSessionRecord:
        """Validate and insert *payload*, returning the stored record."""
        data = validate_session_input(payload)
        row = GameSessionSchema(
            players=[
                player.model_dump(mode="json", by_alias=True) for player in data.players
            ],
            winner=data.winner,
            played_at=data.played_at,
        )
        try:
            with self._database.session() as session:
                stored = GameSessionRepository(session).add(row)
                return to_record(stored)
        except SQLAlchemyError as exc:
            logger.error("Create session failed: %s", exc)
            msg = "Failed to create session."
            raise SessionStorageError(msg) from exc

    def list_sessions(
        self, limit: int = DEFAULT_SESSION_LIST_LIMIT
    ) -> list[GameSessionRecord]:
        """Return the newest *limit* archived games."""
        try:
            with self._database.session() as session:
                rows = GameSessionRepository(session).list_recent(limit)
                return [to_record(row) for row in rows]
        except SQLAlchemyError as exc:
            logger.error("List sessions failed: %s", exc)
            msg = "Failed to fetch sessions."
            raise SessionStorageError(msg) from exc


__all__ = ["DatabaseSessionArchive", "to_record"]
