"""Repository helpers for working with archived game sessions."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from lifetune_backend.database.schemas import GameSessionSchema


class GameSessionRepository:
    """Encapsulates persistence operations for :class:`GameSessionSchema`."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, session_id: int) -> GameSessionSchema | None:
        """Return an archived game by its ID."""
        return self._session.get(GameSessionSchema, session_id)

    def list_recent(self, limit: int) -> list[GameSessionSchema]:
        """Return up to *limit* archived games, newest first."""
        stmt = (
            select(GameSessionSchema)
            .order_by(GameSessionSchema.id.desc())
            .limit(limit)
        )
        return list(self._session.scalars(stmt))

    def add(self, game_session: GameSessionSchema) -> GameSessionSchema:
        """Add a new archived game to the database."""
        self._session.add(game_session)
        self._session.flush()
        self._session.refresh(game_session)
        return game_session
