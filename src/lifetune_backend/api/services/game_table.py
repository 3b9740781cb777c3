"""In-process registry of game tables exposed to the API layer."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING
from uuid import uuid4

from lifetune_backend.api.models.game import (
    BuyInsurancePayload,
    ChooseJobPayload,
    ChoosePlayerCountPayload,
    CollectPayload,
    DecideInvestmentPayload,
    DrawCardPayload,
    EndTurnPayload,
    ResolvePremiumPayload,
)
from lifetune_backend.game_logic import TurnEngine, build_table_rules
from lifetune_backend.shared.enums import GameStatus

if TYPE_CHECKING:
    from lifetune_backend.api.models.game import GameActionPayload
    from lifetune_backend.game_logic import (
        ActionResult,
        GameView,
        RulesOverrides,
        SessionArchive,
    )

logger = logging.getLogger(__name__)


class GameTableNotFoundError(LookupError):
    """Raised when a table identifier is unknown."""


@dataclass
class GameTable:
    """A running engine and the lock serialising its transitions."""

    game_id: str
    engine: TurnEngine
    lock: threading.Lock = field(default_factory=threading.Lock)


@dataclass(frozen=True)
class AppliedAction:
    """Result of one input plus whether that input finished the game."""

    result: ActionResult
    ended_game: bool


class GameTableService:
    """Create tables and route player inputs to their engines.

    Every input for a table runs under that table's lock, so exactly one
    transition is in flight per game even when requests arrive concurrently.
    """

    def __init__(self) -> None:
        self._tables: dict[str, GameTable] = {}
        self._registry_lock = threading.Lock()

    def create_table(
        self,
        *,
        archive: SessionArchive | None = None,
        overrides: RulesOverrides | None = None,
    ) -> tuple[str, GameView]:
        """Open a new table and return its identifier with the initial view."""
        engine = TurnEngine(build_table_rules(overrides), archive=archive)
        game_id = uuid4().hex
        with self._registry_lock:
            self._tables[game_id] = GameTable(game_id=game_id, engine=engine)
        logger.info("Opened game table %s", game_id)
        return game_id, engine.view()

    def get_view(self, game_id: str) -> GameView:
        """Return the current snapshot of *game_id*."""
        table = self._require_table(game_id)
        with table.lock:
            return table.engine.view()

    def apply(self, game_id: str, action: GameActionPayload) -> AppliedAction:
        """Run *action* against the table identified by *game_id*."""
        table = self._require_table(game_id)
        with table.lock:
            was_running = table.engine.status is not GameStatus.ENDED
            result = self._dispatch(table.engine, action)
        ended_game = was_running and result.view.game_state is GameStatus.ENDED
        if ended_game:
            logger.info("Game table %s finished", game_id)
        return AppliedAction(result=result, ended_game=ended_game)

    def discard(self, game_id: str) -> None:
        """Forget a table."""
        with self._registry_lock:
            table = self._tables.pop(game_id, None)
        if table is None:
            msg = f"Game table '{game_id}' does not exist."
            raise GameTableNotFoundError(msg)
        logger.info("Closed game table %s", game_id)

    @staticmethod
    def _dispatch(engine: TurnEngine, action: GameActionPayload) -> ActionResult:
        match action:
            case ChoosePlayerCountPayload(count=count):
                return engine.choose_player_count(count)
            case ChooseJobPayload(job=job):
                return engine.choose_job(job)
            case CollectPayload():
                return engine.collect()
            case ResolvePremiumPayload(pay=pay):
                return engine.resolve_premium(pay=pay)
            case BuyInsurancePayload():
                return engine.buy_insurance()
            case DrawCardPayload():
                return engine.draw_card()
            case DecideInvestmentPayload(buy=buy):
                return engine.decide_investment(buy=buy)
            case EndTurnPayload():
                return engine.end_turn()
        msg = f"Unsupported action: {action!r}"
        raise ValueError(msg)

    def _require_table(self, game_id: str) -> GameTable:
        with self._registry_lock:
            table = self._tables.get(game_id)
        if table is None:
            msg = f"Game table '{game_id}' does not exist."
            raise GameTableNotFoundError(msg)
        return table


__all__ = ["AppliedAction", "GameTable", "GameTableNotFoundError", "GameTableService"]
