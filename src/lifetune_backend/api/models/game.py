"""Pydantic models for the local-play game table endpoints."""

# ruff: noqa: TC001

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from lifetune_backend.game_logic.configuration import RulesOverrides
from lifetune_backend.game_logic.engine import GameView
from lifetune_backend.shared.enums import JobId


class ChoosePlayerCountPayload(BaseModel):
    """Pick how many local players share the table."""

    kind: Literal["choose_player_count"]
    count: int


class ChooseJobPayload(BaseModel):
    """Pick a career for the player currently in setup."""

    kind: Literal["choose_job"]
    job: JobId


class CollectPayload(BaseModel):
    """Start the turn by collecting salary."""

    kind: Literal["collect"]


class ResolvePremiumPayload(BaseModel):
    """Pay or decline the insurance premium."""

    kind: Literal["resolve_premium"]
    pay: bool


class BuyInsurancePayload(BaseModel):
    """Buy insurance before drawing."""

    kind: Literal["buy_insurance"]


class DrawCardPayload(BaseModel):
    """Draw the next card from the pile."""

    kind: Literal["draw_card"]


class DecideInvestmentPayload(BaseModel):
    """Buy or pass on the pending investment."""

    kind: Literal["decide_investment"]
    buy: bool


class EndTurnPayload(BaseModel):
    """Acknowledge the turn summary."""

    kind: Literal["end_turn"]


GameActionPayload = Annotated[
    ChoosePlayerCountPayload
    | ChooseJobPayload
    | CollectPayload
    | ResolvePremiumPayload
    | BuyInsurancePayload
    | DrawCardPayload
    | DecideInvestmentPayload
    | EndTurnPayload,
    Field(discriminator="kind"),
]


class CreateGameRequest(BaseModel):
    """Optional rule overrides for a new table."""

    overrides: RulesOverrides | None = None


class GameActionRequest(BaseModel):
    """Single player input for a table."""

    action: GameActionPayload


class GameTableResponse(BaseModel):
    """Current snapshot of a table."""

    game_id: str
    view: GameView


class GameActionResponse(BaseModel):
    """Outcome of a submitted action."""

    game_id: str
    accepted: bool
    message: str | None = None
    view: GameView


__all__ = [
    "BuyInsurancePayload",
    "ChooseJobPayload",
    "ChoosePlayerCountPayload",
    "CollectPayload",
    "CreateGameRequest",
    "DecideInvestmentPayload",
    "DrawCardPayload",
    "EndTurnPayload",
    "GameActionPayload",
    "GameActionRequest",
    "GameActionResponse",
    "GameTableResponse",
    "ResolvePremiumPayload",
]
