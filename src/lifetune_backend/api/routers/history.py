"""Endpoints for archiving and listing finished games."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.concurrency import run_in_threadpool

from lifetune_backend.api.dependencies import get_session_archive
from lifetune_backend.game_logic.persistence import (
    DEFAULT_SESSION_LIST_LIMIT,
    GameSessionRecord,
    SessionArchive,
    SessionStorageError,
    SessionValidationError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/sessions", tags=["sessions"])

ArchiveDep = Annotated[SessionArchive, Depends(get_session_archive)]


@router.post(
    "",
    response_model=GameSessionRecord,
    status_code=status.HTTP_201_CREATED,
)
async def create_session(request: Request, archive: ArchiveDep) -> GameSessionRecord:
    """Store the summary of a finished game."""

    try:
        payload = await request.json()
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid request body"
        ) from exc

    try:
        return await run_in_threadpool(archive.create_session, payload)
    except SessionValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid request body"
        ) from exc
    except SessionStorageError as exc:
        logger.error("Create session failed: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create session",
        ) from exc


@router.get("", response_model=list[GameSessionRecord])
def list_sessions(
    archive: ArchiveDep,
    limit: Annotated[int, Query(ge=1, le=100)] = DEFAULT_SESSION_LIST_LIMIT,
) -> list[GameSessionRecord]:
    """Return the most recent finished games."""

    try:
        return archive.list_sessions(limit)
    except SessionStorageError as exc:
        logger.error("List sessions failed: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch sessions",
        ) from exc
