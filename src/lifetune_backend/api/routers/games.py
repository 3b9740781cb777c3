"""Endpoints driving a local game table from a browser front-end."""

from __future__ import annotations

from asyncio import sleep
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.concurrency import run_in_threadpool

from lifetune_backend.api.dependencies import (
    get_game_table_service,
    get_session_archive,
)
from lifetune_backend.api.models import (
    CreateGameRequest,
    GameActionRequest,
    GameActionResponse,
    GameTableResponse,
)
from lifetune_backend.api.services import GameTableNotFoundError, GameTableService
from lifetune_backend.game_logic.persistence import SessionArchive
from lifetune_backend.settings import BackendSettings, get_settings

router = APIRouter(prefix="/api/games", tags=["games"])

ServiceDep = Annotated[GameTableService, Depends(get_game_table_service)]


@router.post(
    "",
    response_model=GameTableResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_game(
    service: ServiceDep,
    archive: Annotated[SessionArchive, Depends(get_session_archive)],
    payload: CreateGameRequest | None = None,
) -> GameTableResponse:
    """Open a new table in the setup state."""

    overrides = payload.overrides if payload else None
    game_id, view = service.create_table(archive=archive, overrides=overrides)
    return GameTableResponse(game_id=game_id, view=view)


@router.get("/{game_id}", response_model=GameTableResponse)
def get_game(game_id: str, service: ServiceDep) -> GameTableResponse:
    """Return the current snapshot of a table."""

    try:
        view = service.get_view(game_id)
    except GameTableNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Game not found"
        ) from exc
    return GameTableResponse(game_id=game_id, view=view)


@router.post("/{game_id}/actions", response_model=GameActionResponse)
async def submit_action(
    game_id: str,
    payload: GameActionRequest,
    service: ServiceDep,
    settings: Annotated[BackendSettings, Depends(get_settings)],
) -> GameActionResponse:
    """Apply one player input and return the resulting snapshot."""

    try:
        applied = await run_in_threadpool(service.apply, game_id, payload.action)
    except GameTableNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Game not found"
        ) from exc

    if applied.ended_game and settings.liquidation_reveal_delay_seconds > 0:
        await sleep(settings.liquidation_reveal_delay_seconds)

    result = applied.result

    return GameActionResponse(
        game_id=game_id,
        accepted=result.accepted,
        message=result.message,
        view=result.view,
    )


@router.delete("/{game_id}", status_code=status.HTTP_204_NO_CONTENT)
def close_game(game_id: str, service: ServiceDep) -> None:
    """Drop a table from the registry once the players are done with it."""

    try:
        service.discard(game_id)
    except GameTableNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Game not found"
        ) from exc
