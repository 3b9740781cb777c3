"""Service layer for API-specific business logic."""

from lifetune_backend.api.services.game_table import (
    AppliedAction,
    GameTable,
    GameTableNotFoundError,
    GameTableService,
)

__all__ = ["AppliedAction", "GameTable", "GameTableNotFoundError", "GameTableService"]
