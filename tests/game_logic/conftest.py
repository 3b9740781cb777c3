"""Shared builders for game logic tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from lifetune_backend.game_logic import (
    Card,
    Deck,
    GameRules,
    InMemorySessionArchive,
    TurnEngine,
)
from lifetune_backend.shared import CardType, DeterministicRandomService, JobId

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence


class FixedRoller:
    """Die roller returning a scripted sequence of values."""

    def __init__(self, *rolls: int) -> None:
        self._rolls = list(rolls)
        self.calls = 0

    def roll_die(self, sides: int) -> int:
        self.calls += 1
        if len(self._rolls) == 1:
            return self._rolls[0]
        return self._rolls.pop(0)


def quiet_card(index: int = 0) -> Card:
    """A card without any economic effect."""
    return Card(
        identifier=f"quiet_{index}",
        card_type=CardType.EVENT,
        title="Quiet Week",
        description="Nothing happens.",
    )


def quiet_cards(count: int) -> list[Card]:
    return [quiet_card(index) for index in range(count)]


def fixed_deck(cards: Sequence[Card]) -> Callable[..., Deck]:
    """Deck factory that ignores the catalog; the last card is drawn first."""

    def factory(
        _catalog: Sequence[Card], _rng: DeterministicRandomService
    ) -> Deck:
        return Deck(cards)

    return factory


@pytest.fixture
def archive() -> InMemorySessionArchive:
    return InMemorySessionArchive()


@pytest.fixture
def make_engine(
    archive: InMemorySessionArchive,
) -> Callable[..., TurnEngine]:
    """Build an engine, optionally seated and with a scripted deck."""

    def _make(
        *,
        jobs: Iterable[JobId] | None = None,
        cards: Sequence[Card] | None = None,
        rules: GameRules | None = None,
        seed: int = 7,
    ) -> TurnEngine:
        engine = TurnEngine(
            rules or GameRules(),
            archive=archive,
            rng_service=DeterministicRandomService(seed),
            deck_factory=fixed_deck(cards) if cards is not None else Deck.build,
        )
        if jobs is not None:
            job_list = list(jobs)
            engine.choose_player_count(len(job_list))
            for job in job_list:
                engine.choose_job(job)
        return engine

    return _make


@pytest.fixture
def fixed_roller() -> type[FixedRoller]:
    return FixedRoller


@pytest.fixture
def make_quiet_cards() -> Callable[[int], list[Card]]:
    return quiet_cards
