"""Core rules and mechanics that drive LIFEtune gameplay."""

from lifetune_backend.game_logic.catalog import (
    GAME_CARDS,
    JOBS,
    LIFE_GOALS,
    Card,
    Job,
    LifeGoal,
)
from lifetune_backend.game_logic.configuration import (
    GameRules,
    RulesDefaults,
    RulesOverrides,
    build_table_rules,
    get_default_rules,
)
from lifetune_backend.game_logic.deck import Deck, DeckExhaustedError
from lifetune_backend.game_logic.engine import ActionResult, GameView, TurnEngine
from lifetune_backend.game_logic.journal import GameLog
from lifetune_backend.game_logic.liquidation import (
    PAYOUT_TABLES,
    FinalStandings,
    LiquidationEngine,
    payout,
)
from lifetune_backend.game_logic.persistence import (
    GameSessionRecord,
    InMemorySessionArchive,
    PlayerSummary,
    SessionArchive,
    SessionArchiveError,
    SessionCreate,
    SessionStorageError,
    SessionValidationError,
)
from lifetune_backend.game_logic.state import Player

__all__ = [
    "GAME_CARDS",
    "JOBS",
    "LIFE_GOALS",
    "PAYOUT_TABLES",
    "ActionResult",
    "Card",
    "Deck",
    "DeckExhaustedError",
    "FinalStandings",
    "GameLog",
    "GameRules",
    "GameSessionRecord",
    "GameView",
    "InMemorySessionArchive",
    "Job",
    "LifeGoal",
    "LiquidationEngine",
    "Player",
    "PlayerSummary",
    "RulesDefaults",
    "RulesOverrides",
    "SessionArchive",
    "SessionArchiveError",
    "SessionCreate",
    "SessionStorageError",
    "SessionValidationError",
    "TurnEngine",
    "build_table_rules",
    "get_default_rules",
    "payout",
]
