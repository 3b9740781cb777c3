"""Player-centric state containers used by the game logic layer."""

from __future__ import annotations

from pydantic import BaseModel, Field

from lifetune_backend.game_logic.catalog import Card, Job, LifeGoal  # noqa: TC001


class Player(BaseModel):
    """Participant whose ledger the turn engine mutates.

    Money may go negative; the ledger never refuses a debit. Whether a
    purchase is affordable is decided by the engine before it calls in.
    """

    id_: int = Field(..., ge=0)
    name: str = Field(..., min_length=1)
    money: int
    job: Job | None = None
    insurance: bool = False
    investments: list[Card] = Field(default_factory=list)
    life_goal: LifeGoal | None = None
    skip_turns: int = Field(default=0, ge=0)
    has_debt: bool = False

    @property
    def is_ready(self) -> bool:
        """Whether setup has given the player both a job and a goal."""
        return self.job is not None and self.life_goal is not None

    def can_afford(self, amount: int) -> bool:
        """Return whether the balance covers *amount*."""
        return self.money >= amount

    def credit(self, amount: int) -> None:
        """Add *amount* to the balance."""
        if amount < 0:
            msg = "Credit amount must be non-negative."
            raise ValueError(msg)
        self.money += amount

    def debit(self, amount: int) -> None:
        """Remove *amount* from the balance, overdraft allowed."""
        if amount < 0:
            msg = "Debit amount must be non-negative."
            raise ValueError(msg)
        self.money -= amount

    def grant_insurance(self) -> None:
        """Start insurance coverage."""
        self.insurance = True

    def revoke_insurance(self) -> None:
        """Drop insurance coverage."""
        self.insurance = False

    def add_investment(self, card: Card) -> None:
        """Record ownership of an investment card."""
        self.investments.append(card)

    def adjust_skip_turns(self, delta: int) -> None:
        """Shift the skip-turn counter by *delta*, never below zero."""
        updated = self.skip_turns + delta
        if updated < 0:
            msg = f"Skip-turn counter would become negative ({updated})."
            raise ValueError(msg)
        self.skip_turns = updated

    def assign_job(self, job: Job, goal: LifeGoal) -> None:
        """Apply the setup choice: goal, schooling penalty and starting debt."""
        self.job = job
        self.life_goal = goal
        self.skip_turns = job.starting_skip_turns
        self.has_debt = job.starting_debt > 0
        self.debit(job.starting_debt)


__all__ = ["Player"]
