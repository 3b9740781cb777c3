"""Shared enumerations used across the backend."""

from enum import StrEnum


class GameStatus(StrEnum):
    """Top-level lifecycle of a game table."""

    SETUP_COUNT = "setup_count"
    SETUP_JOBS = "setup_jobs"
    PLAYING = "playing"
    ENDED = "ended"


class TurnPhase(StrEnum):
    """Phases a single player's turn moves through."""

    COLLECT = "collect"
    PREMIUM = "premium"
    ACTION = "action"
    DECISION = "decision"
    END = "end"


class CardType(StrEnum):
    """Families of draw-pile cards."""

    INVESTMENT = "investment"
    EVENT = "event"
    INTERACTION = "interaction"
    PERSONAL = "personal"


class CardEffect(StrEnum):
    """Closed set of effects the turn engine knows how to resolve."""

    STANDARD = "standard"
    SHARED_GIFT = "shared_gift"


class InvestmentCategory(StrEnum):
    """Payout table keys for investment cards."""

    BIG_COMPANY = "big_company"
    STARTUP = "startup"
    BOND = "bond"
    BANK = "bank"


class GoalCondition(StrEnum):
    """Predicates a life goal can be evaluated with."""

    MIN_BALANCE = "min_balance"
    MIN_INVESTMENTS = "min_investments"
    HAS_INSURANCE = "has_insurance"
    ALWAYS = "always"


class JobId(StrEnum):
    """Identifiers of the two careers on offer."""

    BLUE = "blue"
    WHITE = "white"


class LogTone(StrEnum):
    """Severity of a narration entry, used for presentation only."""

    INFO = "info"
    SUCCESS = "success"
    DANGER = "danger"
    WARNING = "warning"
