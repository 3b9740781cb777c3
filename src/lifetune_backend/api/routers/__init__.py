"""Route definitions for public HTTP endpoints."""

from lifetune_backend.api.routers.games import router as games_router
from lifetune_backend.api.routers.history import router as history_router

__all__ = ["games_router", "history_router"]
