"""Shared utilities, shared models and cross-cutting helpers for the backend."""

from lifetune_backend.shared.enums import (
    CardEffect,
    CardType,
    GameStatus,
    GoalCondition,
    InvestmentCategory,
    JobId,
    LogTone,
    TurnPhase,
)
from lifetune_backend.shared.events import LogEntry
from lifetune_backend.shared.rng import DeterministicRandomService

__all__ = [
    "CardEffect",
    "CardType",
    "DeterministicRandomService",
    "GameStatus",
    "GoalCondition",
    "InvestmentCategory",
    "JobId",
    "LogEntry",
    "LogTone",
    "TurnPhase",
]
