"""Bounded narration log consumed by presentation layers."""

from __future__ import annotations

import logging
from collections import deque

from lifetune_backend.shared.enums import LogTone
from lifetune_backend.shared.events import LogEntry

logger = logging.getLogger(__name__)

DEFAULT_LOG_CAPACITY = 50


class GameLog:
    """Append-only log that keeps the most recent *capacity* entries."""

    def __init__(self, capacity: int = DEFAULT_LOG_CAPACITY) -> None:
        if capacity < 1:
            msg = "Log capacity must be positive."
            raise ValueError(msg)
        self._entries: deque[LogEntry] = deque(maxlen=capacity)

    def add(self, message: str, tone: LogTone = LogTone.INFO) -> LogEntry:
        """Append a narration line and return it."""
        entry = LogEntry(message=message, tone=tone)
        self._entries.append(entry)
        logger.debug("[%s] %s", tone.value, message)
        return entry

    def recent(self, limit: int | None = None) -> list[LogEntry]:
        """Return up to *limit* entries, newest first."""
        ordered = list(reversed(self._entries))
        if limit is None:
            return ordered
        return ordered[:limit]

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["DEFAULT_LOG_CAPACITY", "GameLog"]
