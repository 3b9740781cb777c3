"""End-of-game liquidation of investments, goal bonuses and ranking."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence  # noqa: TC003
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Protocol

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from lifetune_backend.game_logic.persistence import PlayerSummary, SessionCreate
from lifetune_backend.shared.enums import InvestmentCategory

if TYPE_CHECKING:
    from lifetune_backend.game_logic.catalog import Card
    from lifetune_backend.game_logic.state import Player

logger = logging.getLogger(__name__)

DEFAULT_DIE_SIDES = 8
FALLBACK_ROLL_DIVISOR = 4

# Ascending (highest roll, payout) tiers. Rolls above the last tier pay the
# last tier's amount.
PAYOUT_TABLES: dict[InvestmentCategory, tuple[tuple[int, int], ...]] = {
    InvestmentCategory.BIG_COMPANY: ((2, 0), (6, 500), (8, 900)),
    InvestmentCategory.STARTUP: ((6, 0), (8, 2000)),
    InvestmentCategory.BOND: ((1, 0), (8, 400)),
    InvestmentCategory.BANK: ((1, 0), (8, 200)),
}


class DieRoller(Protocol):
    """Anything able to roll a fair die."""

    def roll_die(self, sides: int) -> int:
        """Return a roll in ``1..sides`` inclusive."""


class FinalStandings(BaseModel):
    """Ranked outcome of a finished game."""

    model_config = ConfigDict(frozen=True)

    players: tuple[PlayerSummary, ...] = Field(..., min_length=1)
    winner: str
    played_at: datetime

    def to_session_input(self) -> SessionCreate:
        """Return the payload handed to the session archive."""
        return SessionCreate(
            players=list(self.players),
            winner=self.winner,
            played_at=self.played_at,
        )


def payout(card: Card, roll: int) -> float:
    """Return the cash value of *card* for a single liquidation *roll*."""
    tiers = PAYOUT_TABLES.get(card.category) if card.category else None
    if tiers is None:
        return (card.cost or 0) * (roll / FALLBACK_ROLL_DIVISOR)
    for highest_roll, amount in tiers:
        if roll <= highest_roll:
            return float(amount)
    return float(tiers[-1][1])


class LiquidationEngine:
    """Convert every player's holdings into a final, ranked balance."""

    def __init__(
        self,
        roller: DieRoller,
        *,
        die_sides: int = DEFAULT_DIE_SIDES,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._roller = roller
        self._die_sides = die_sides
        self._clock = clock or (lambda: datetime.now(tz=UTC))

    def liquidate(self, players: Sequence[Player]) -> FinalStandings:
        """Roll for every held investment, apply goal bonuses and rank players."""
        if not players:
            msg = "Cannot liquidate a game without players."
            raise ValueError(msg)

        scored: list[PlayerSummary] = []
        for player in players:
            rolls = [self._roller.roll_die(self._die_sides) for _ in player.investments]
            total = sum(
                payout(card, roll)
                for card, roll in zip(player.investments, rolls, strict=True)
            )
            candidate = player.money + total
            goal = player.life_goal
            bonus = 0
            if goal is not None and goal.is_satisfied(
                balance=candidate,
                investment_count=len(player.investments),
                insured=player.insurance,
            ):
                bonus = goal.bonus
            scored.append(
                PlayerSummary(
                    name=player.name,
                    job=player.job.name if player.job else None,
                    goal=goal.name if goal else None,
                    cash=player.money,
                    liquidation_total=total,
                    goal_bonus=bonus,
                    final_money=candidate + bonus,
                    rank=1,
                    rolls=rolls,
                )
            )
            logger.debug(
                "Liquidated %s: rolls=%s total=%s bonus=%s",
                player.name,
                rolls,
                total,
                bonus,
            )

        ordered = sorted(scored, key=lambda summary: summary.final_money, reverse=True)
        ranked = tuple(
            summary.model_copy(update={"rank": position})
            for position, summary in enumerate(ordered, start=1)
        )
        return FinalStandings(
            players=ranked, winner=ranked[0].name, played_at=self._clock()
        )


__all__ = [
    "DEFAULT_DIE_SIDES",
    "PAYOUT_TABLES",
    "DieRoller",
    "FinalStandings",
    "LiquidationEngine",
    "payout",
]
