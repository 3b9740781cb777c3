"""Turn engine sequencing setup, per-player phases and the end of the game."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence  # noqa: TC003

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from lifetune_backend.game_logic.catalog import (
    GAME_CARDS,
    JOBS,
    LIFE_GOALS,
    Card,
    Job,
    LifeGoal,
)
from lifetune_backend.game_logic.configuration import GameRules, get_default_rules
from lifetune_backend.game_logic.deck import Deck
from lifetune_backend.game_logic.journal import GameLog
from lifetune_backend.game_logic.liquidation import FinalStandings, LiquidationEngine
from lifetune_backend.game_logic.persistence import (  # noqa: TC001
    SessionArchive,
    SessionStorageError,
    SessionValidationError,
)
from lifetune_backend.game_logic.state import Player
from lifetune_backend.shared.enums import (
    CardEffect,
    CardType,
    GameStatus,
    JobId,
    LogTone,
    TurnPhase,
)
from lifetune_backend.shared.events import LogEntry  # noqa: TC001
from lifetune_backend.shared.rng import DeterministicRandomService

logger = logging.getLogger(__name__)

RECENT_LOG_LIMIT = 20

DeckFactory = Callable[[Sequence[Card], DeterministicRandomService], Deck]


class GameView(BaseModel):
    """Read-only snapshot handed to presentation layers."""

    model_config = ConfigDict(frozen=True)

    game_state: GameStatus
    turn_phase: TurnPhase
    players: tuple[Player, ...] = Field(default_factory=tuple)
    current_player_index: int = Field(default=0, ge=0)
    deck_remaining: int = Field(default=0, ge=0)
    round_number: int = Field(default=0, ge=0)
    pending_investment: Card | None = None
    last_drawn_card: Card | None = None
    recent_log: tuple[LogEntry, ...] = Field(default_factory=tuple)
    standings: FinalStandings | None = None
    archived_session_id: int | None = None


class ActionResult(BaseModel):
    """Outcome of a single player input."""

    model_config = ConfigDict(frozen=True)

    accepted: bool
    message: str | None = None
    view: GameView


class TurnEngine:
    """Own one game table and advance it in response to discrete inputs.

    Each public action runs to completion before returning. Invalid inputs
    never raise; they are declined, narrated as warnings and reported through
    :class:`ActionResult`. When the deck runs out the engine liquidates every
    player and hands the standings to the archive in a single attempt.
    """

    def __init__(
        self,
        rules: GameRules | None = None,
        *,
        archive: SessionArchive | None = None,
        rng_service: DeterministicRandomService | None = None,
        catalog: Sequence[Card] = GAME_CARDS,
        jobs: Mapping[JobId, Job] = JOBS,
        goals: Sequence[LifeGoal] = LIFE_GOALS,
        deck_factory: DeckFactory = Deck.build,
        liquidation: LiquidationEngine | None = None,
    ) -> None:
        self._rules = rules or get_default_rules()
        self._archive = archive
        self._rng = rng_service or DeterministicRandomService(self._rules.rng_seed)
        self._catalog = tuple(catalog)
        self._jobs = dict(jobs)
        self._goals = tuple(goals)
        self._deck_factory = deck_factory
        self._liquidation = liquidation or LiquidationEngine(
            self._rng, die_sides=self._rules.liquidation_die_sides
        )
        self._log = GameLog(self._rules.log_capacity)

        self._status = GameStatus.SETUP_COUNT
        self._phase = TurnPhase.COLLECT
        self._players: list[Player] = []
        self._current_index = 0
        self._deck = Deck()
        self._pending: Card | None = None
        self._last_drawn: Card | None = None
        self._standings: FinalStandings | None = None
        self._archived_session_id: int | None = None

    @property
    def rules(self) -> GameRules:
        """Rule constants this table was created with."""
        return self._rules

    @property
    def status(self) -> GameStatus:
        """Current top-level game state."""
        return self._status

    @property
    def phase(self) -> TurnPhase:
        """Current phase of the active player's turn."""
        return self._phase

    @property
    def players(self) -> tuple[Player, ...]:
        """Seated players in turn order."""
        return tuple(self._players)

    @property
    def current_player(self) -> Player | None:
        """Player whose turn (or setup step) it is."""
        if not self._players:
            return None
        return self._players[self._current_index]

    @property
    def deck(self) -> Deck:
        """Remaining draw pile."""
        return self._deck

    @property
    def log(self) -> GameLog:
        """Narration log for this table."""
        return self._log

    @property
    def standings(self) -> FinalStandings | None:
        """Final ranking once the game has ended."""
        return self._standings

    # ------------------------------------------------------------------ setup

    def choose_player_count(self, count: int) -> ActionResult:
        """Seat *count* players with the starting balance."""
        rejection = self._guard(GameStatus.SETUP_COUNT)
        if rejection:
            return rejection
        if not self._rules.allows_player_count(count):
            return self._reject(
                f"Player count must be between {self._rules.min_players} "
                f"and {self._rules.max_players}."
            )

        self._players = [
            Player(
                id_=index,
                name=f"Player {index + 1}",
                money=self._rules.starting_money,
            )
            for index in range(count)
        ]
        self._current_index = 0
        self._status = GameStatus.SETUP_JOBS
        logger.debug("Seated %d players", count)
        return self._accept(f"Seated {count} players.")

    def choose_job(self, job_id: JobId | str) -> ActionResult:
        """Give the current setup player a job and a random life goal."""
        rejection = self._guard(GameStatus.SETUP_JOBS)
        if rejection:
            return rejection
        try:
            job = self._jobs[JobId(job_id)]
        except (KeyError, ValueError):
            return self._reject(f"Unknown job '{job_id}'.")

        player = self._players[self._current_index]
        goal = self._rng.choice(self._goals)
        player.assign_job(job, goal)
        self._log.add(f"{player.name} assigned life goal: {goal.name}")

        if self._current_index < len(self._players) - 1:
            self._current_index += 1
        else:
            self._start_play()
        return self._accept(f"{player.name} became {job.name}.")

    def _start_play(self) -> None:
        self._current_index = 0
        self._deck = self._deck_factory(self._catalog, self._rng)
        self._status = GameStatus.PLAYING
        self._phase = TurnPhase.COLLECT
        self._log.add("Game Started! Good luck everyone.", LogTone.SUCCESS)
        logger.debug("Game started with %d cards", self._deck.remaining)

    # ------------------------------------------------------------------ turns

    def collect(self) -> ActionResult:
        """Pay the salary, or forfeit the turn when skip-turns are pending."""
        rejection = self._guard(GameStatus.PLAYING, TurnPhase.COLLECT)
        if rejection:
            return rejection
        player = self._players[self._current_index]

        if player.skip_turns > 0:
            player.adjust_skip_turns(-1)
            self._log.add(f"{player.name} skips this turn.", LogTone.WARNING)
            self._finish_turn()
            return self._accept(f"{player.name} skipped the turn.")

        salary = player.job.salary if player.job else 0
        player.credit(salary)
        self._log.add(f"{player.name} collected salary ${salary}.", LogTone.SUCCESS)
        self._phase = TurnPhase.PREMIUM
        return self._accept()

    def resolve_premium(self, *, pay: bool) -> ActionResult:
        """Renew insurance by paying the premium, or let coverage lapse."""
        rejection = self._guard(GameStatus.PLAYING, TurnPhase.PREMIUM)
        if rejection:
            return rejection
        player = self._players[self._current_index]
        premium = self._rules.insurance_premium

        if pay and not player.insurance:
            self._log.add(f"{player.name} has no policy to renew.")
        elif pay:
            player.debit(premium)
            self._log.add(f"{player.name} paid ${premium} insurance premium.")
        else:
            self._log.add(
                f"{player.name} skipped insurance payment. "
                "Warning: You are at risk!",
                LogTone.WARNING,
            )
            if player.insurance:
                player.revoke_insurance()
                self._log.add(
                    f"{player.name} lost insurance coverage!", LogTone.DANGER
                )

        self._phase = TurnPhase.ACTION
        return self._accept()

    def buy_insurance(self) -> ActionResult:
        """Purchase coverage before drawing, if the player can afford it."""
        rejection = self._guard(GameStatus.PLAYING, TurnPhase.ACTION)
        if rejection:
            return rejection
        player = self._players[self._current_index]
        price = self._rules.insurance_price

        if player.insurance:
            return self._reject(f"{player.name} is already insured.")
        if not player.can_afford(price):
            self._log.add("Not enough money for insurance.", LogTone.DANGER)
            logger.info("Insurance purchase declined for %s", player.name)
            return self._result(
                accepted=False, message="Not enough money for insurance."
            )

        player.debit(price)
        player.grant_insurance()
        self._log.add(f"{player.name} bought insurance for ${price}.", LogTone.SUCCESS)
        return self._accept()

    def draw_card(self) -> ActionResult:
        """Draw the next card and either offer it or resolve it immediately."""
        rejection = self._guard(GameStatus.PLAYING, TurnPhase.ACTION)
        if rejection:
            return rejection
        if self._deck.is_empty():
            self._finish_game()
            return self._accept("The deck is empty.")

        player = self._players[self._current_index]
        card = self._deck.draw()
        self._last_drawn = card

        if card.card_type is CardType.INVESTMENT:
            cost = card.cost or 0
            if player.can_afford(cost):
                self._pending = card
                self._phase = TurnPhase.DECISION
                self._log.add(f"{player.name} may invest in {card.title} for ${cost}.")
            else:
                self._log.add(
                    f"{player.name} drew {card.title} but can't afford ${cost}.",
                    LogTone.WARNING,
                )
                self._phase = TurnPhase.END
            return self._accept(card.title)

        self._apply_card_effect(player, card)
        self._phase = TurnPhase.END
        return self._accept(card.title)

    def decide_investment(self, *, buy: bool) -> ActionResult:
        """Buy or pass on the pending investment."""
        rejection = self._guard(GameStatus.PLAYING, TurnPhase.DECISION)
        if rejection:
            return rejection
        player = self._players[self._current_index]
        card = self._pending
        if card is None:
            return self._reject("There is no pending investment.")

        if buy:
            player.debit(card.cost or 0)
            player.add_investment(card)
            self._log.add(f"{player.name} invested in {card.title}!", LogTone.SUCCESS)
        else:
            self._log.add(f"{player.name} passed on the investment.")

        self._pending = None
        self._phase = TurnPhase.END
        return self._accept()

    def end_turn(self) -> ActionResult:
        """Acknowledge the turn summary and hand over to the next player."""
        rejection = self._guard(GameStatus.PLAYING, TurnPhase.END)
        if rejection:
            return rejection
        self._finish_turn()
        return self._accept()

    def _apply_card_effect(self, player: Player, card: Card) -> None:
        delta = card.value or 0
        skips = card.turns_skipped or 0

        match card.effect:
            case CardEffect.SHARED_GIFT:
                delta = self._resolve_shared_gift(player, card)
            case CardEffect.STANDARD:
                if card.card_type is CardType.EVENT and delta < 0 and player.insurance:
                    self._log.add(
                        f"{player.name} used insurance to cover {card.title}!",
                        LogTone.SUCCESS,
                    )
                    delta = 0
                if delta > 0:
                    player.credit(delta)
                elif delta < 0:
                    player.debit(-delta)

        if skips:
            player.adjust_skip_turns(skips)

        if delta > 0:
            tone = LogTone.SUCCESS
        elif delta < 0:
            tone = LogTone.DANGER
        else:
            tone = LogTone.INFO
        self._log.add(f"{player.name} drew {card.title}: {card.description}", tone)

    def _resolve_shared_gift(self, player: Player, card: Card) -> int:
        """Move the gift from *player* to everyone else; return the giver's delta."""
        gift = card.gift_amount
        others = [other for other in self._players if other is not player]
        total = gift * len(others)
        if not player.can_afford(total):
            self._log.add(
                f"{player.name} can't afford to give ${gift} to everyone.",
                LogTone.WARNING,
            )
            return 0

        player.debit(total)
        for other in others:
            other.credit(gift)
        self._log.add(f"{player.name} gave ${gift} to everyone!")
        return -total

    def _finish_turn(self) -> None:
        if self._deck.is_empty():
            self._finish_game()
            return
        self._last_drawn = None
        self._current_index = (self._current_index + 1) % len(self._players)
        self._phase = TurnPhase.COLLECT
        logger.debug("Turn passes to player index %d", self._current_index)

    # ------------------------------------------------------------ game end

    def _finish_game(self) -> None:
        self._status = GameStatus.ENDED
        self._pending = None
        self._log.add("Game Over! Rolling for investment liquidation...")

        standings = self._liquidation.liquidate(self._players)
        for summary in standings.players:
            if summary.rolls:
                rolls = ", ".join(str(roll) for roll in summary.rolls)
                self._log.add(f"{summary.name} rolled for investments: {rolls}")
        self._log.add(
            f"{standings.winner} wins with ${standings.players[0].final_money:,.0f}!",
            LogTone.SUCCESS,
        )
        self._standings = standings
        self._archive_standings(standings)

    def _archive_standings(self, standings: FinalStandings) -> None:
        """Store the summary once; failures never undo the local result."""
        if self._archive is None:
            return
        try:
            record = self._archive.create_session(standings.to_session_input())
        except SessionValidationError:
            logger.warning(
                "Final standings were rejected by the archive", exc_info=True
            )
        except SessionStorageError:
            logger.error("Failed to archive final standings", exc_info=True)
        else:
            self._archived_session_id = record.id_
            logger.info("Archived finished game as session %s", record.id_)

    # ---------------------------------------------------------------- views

    def view(self) -> GameView:
        """Return a detached snapshot of the table."""
        return GameView(
            game_state=self._status,
            turn_phase=self._phase,
            players=tuple(player.model_copy(deep=True) for player in self._players),
            current_player_index=self._current_index,
            deck_remaining=self._deck.remaining,
            round_number=self._round_number(),
            pending_investment=self._pending,
            last_drawn_card=self._last_drawn,
            recent_log=tuple(self._log.recent(RECENT_LOG_LIMIT)),
            standings=self._standings,
            archived_session_id=self._archived_session_id,
        )

    def _round_number(self) -> int:
        if self._status is not GameStatus.PLAYING or not self._players:
            return 0
        drawn = self._deck.initial_size - self._deck.remaining
        return drawn // len(self._players) + 1

    def _guard(
        self, status: GameStatus, phase: TurnPhase | None = None
    ) -> ActionResult | None:
        if self._status is not status:
            return self._reject(
                f"Action not allowed while the game is in '{self._status.value}'."
            )
        if phase is not None and self._phase is not phase:
            return self._reject(
                f"Action not allowed during the '{self._phase.value}' phase."
            )
        return None

    def _reject(self, message: str) -> ActionResult:
        self._log.add(message, LogTone.WARNING)
        logger.info("Rejected input: %s", message)
        return self._result(accepted=False, message=message)

    def _accept(self, message: str | None = None) -> ActionResult:
        return self._result(accepted=True, message=message)

    def _result(self, *, accepted: bool, message: str | None) -> ActionResult:
        return ActionResult(accepted=accepted, message=message, view=self.view())


__all__ = ["RECENT_LOG_LIMIT", "ActionResult", "GameView", "TurnEngine"]
