"""Seedable randomness for deck order, goal draws and liquidation dice."""

from __future__ import annotations

from collections.abc import Iterable, Sequence  # noqa: TC003
from random import Random
from typing import TypeVar

_T = TypeVar("_T")


class DeterministicRandomService:
    """Single source of chance for one game table.

    Every random decision of a table goes through one instance, so a fixed
    seed replays the same shuffles, goals and rolls in the same order.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._random = Random(seed)  # noqa: S311

    @property
    def seed(self) -> int | None:
        """Seed the service was created with, if any."""
        return self._seed

    def choice(self, population: Sequence[_T]) -> _T:
        """Pick one element of *population* uniformly."""
        if not population:
            msg = "Cannot choose from an empty population."
            raise ValueError(msg)
        return self._random.choice(population)

    def shuffle(self, items: Iterable[_T]) -> tuple[_T, ...]:
        """Return a uniformly shuffled copy of *items*."""
        shuffled = list(items)
        self._random.shuffle(shuffled)
        return tuple(shuffled)

    def roll_die(self, sides: int) -> int:
        """Roll a fair die numbered ``1..sides``."""
        if sides < 1:
            msg = "A die needs at least one side."
            raise ValueError(msg)
        return self._random.randint(1, sides)


__all__ = ["DeterministicRandomService"]
