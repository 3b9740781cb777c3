"""Persistence abstractions for completed-game summaries.

The engine hands its final standings to a :class:`SessionArchive` exactly
once. The game logic layer only depends on this protocol; the database layer
and the in-memory store below provide concrete adapters.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime  # noqa: TC003
from typing import Any, Protocol

from pydantic import BaseModel, Field, ValidationError
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

DEFAULT_SESSION_LIST_LIMIT = 10


class SessionArchiveError(Exception):
    """Base class for failures raised at the persistence boundary."""


class SessionValidationError(SessionArchiveError):
    """Raised when a summary payload does not match the stored schema."""


class SessionStorageError(SessionArchiveError):
    """Raised when the underlying store cannot be reached or written."""


class _WireModel(BaseModel):
    model_config = ConfigDict(
        frozen=True, populate_by_name=True, alias_generator=to_camel
    )


class PlayerSummary(_WireModel):
    """Final, liquidated state of a single player."""

    name: str = Field(..., min_length=1)
    job: str | None = None
    goal: str | None = None
    cash: int
    liquidation_total: float = Field(default=0.0, ge=0)
    goal_bonus: int = Field(default=0, ge=0)
    final_money: float
    rank: int = Field(..., ge=1)
    rolls: list[int] = Field(default_factory=list)


class SessionCreate(_WireModel):
    """Input accepted when archiving a finished game."""

    players: list[PlayerSummary] = Field(..., min_length=1)
    winner: str = Field(..., min_length=1)
    played_at: datetime


class GameSessionRecord(SessionCreate):
    """Stored game summary, including the identifier assigned by the store."""

    id_: int = Field(..., alias="id")
    winner: str | None = None


def validate_session_input(
    payload: SessionCreate | Mapping[str, Any],
) -> SessionCreate:
    """Return *payload* as a :class:`SessionCreate` or raise a validation error."""
    if isinstance(payload, SessionCreate):
        return payload
    try:
        return SessionCreate.model_validate(payload)
    except ValidationError as exc:
        msg = "Session payload failed validation."
        raise SessionValidationError(msg) from exc


class SessionArchive(Protocol):
    """Protocol describing how finished games are stored and listed."""

    def create_session(
        self, payload: SessionCreate | Mapping[str, Any]
    ) -> GameSessionRecord:
        """Persist *payload* and return the stored record."""

    def list_sessions(
        self, limit: int = DEFAULT_SESSION_LIST_LIMIT
    ) -> list[GameSessionRecord]:
        """Return up to *limit* records, most recent first."""


class InMemorySessionArchive:
    """Trivial in-memory implementation of :class:`SessionArchive`."""

    def __init__(self) -> None:
        self._records: list[GameSessionRecord] = []

    def create_session(
        self, payload: SessionCreate | Mapping[str, Any]
    ) -> GameSessionRecord:
        """Validate *payload* and store it under the next identifier."""
        data = validate_session_input(payload)
        record = GameSessionRecord(
            id=len(self._records) + 1,
            players=data.players,
            winner=data.winner,
            played_at=data.played_at,
        )
        self._records.append(record)
        return record

    def list_sessions(
        self, limit: int = DEFAULT_SESSION_LIST_LIMIT
    ) -> list[GameSessionRecord]:
        """Return the newest *limit* records."""
        return list(reversed(self._records))[:limit]


__all__ = [
    "DEFAULT_SESSION_LIST_LIMIT",
    "GameSessionRecord",
    "InMemorySessionArchive",
    "PlayerSummary",
    "SessionArchive",
    "SessionArchiveError",
    "SessionCreate",
    "SessionStorageError",
    "SessionValidationError",
    "validate_session_input",
]
