"""Draw pile built from the card catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from lifetune_backend.game_logic.catalog import Card
    from lifetune_backend.shared.rng import DeterministicRandomService


class DeckExhaustedError(LookupError):
    """Raised when drawing from a pile with no cards left."""


class Deck:
    """Ordered, shrinking pile of card references."""

    def __init__(self, cards: Sequence[Card] = ()) -> None:
        self._cards: list[Card] = list(cards)
        self._initial_size = len(self._cards)

    @classmethod
    def build(
        cls, catalog: Sequence[Card], rng: DeterministicRandomService
    ) -> Deck:
        """Concatenate two independently shuffled copies of *catalog*."""
        return cls((*rng.shuffle(catalog), *rng.shuffle(catalog)))

    @property
    def remaining(self) -> int:
        """Number of cards left to draw."""
        return len(self._cards)

    @property
    def initial_size(self) -> int:
        """Number of cards the pile started with."""
        return self._initial_size

    def is_empty(self) -> bool:
        """Whether the pile is exhausted."""
        return not self._cards

    def draw(self) -> Card:
        """Remove and return the card at the end of the pile."""
        if not self._cards:
            msg = "Cannot draw from an exhausted deck."
            raise DeckExhaustedError(msg)
        return self._cards.pop()


__all__ = ["Deck", "DeckExhaustedError"]
