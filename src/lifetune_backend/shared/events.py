"""Narration primitives shared between the engine and its presenters."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from lifetune_backend.shared.enums import LogTone


class LogEntry(BaseModel):
    """Represents a single immutable narration line produced by the engine."""

    model_config = ConfigDict(frozen=True)

    message: str = Field(..., min_length=1)
    tone: LogTone = LogTone.INFO
    occurred_at: datetime = Field(default_factory=lambda: datetime.now(tz=UTC))


__all__ = ["LogEntry"]
