"""Static catalog of jobs, life goals and draw-pile cards."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

from lifetune_backend.shared.enums import (
    CardEffect,
    CardType,
    GoalCondition,
    InvestmentCategory,
    JobId,
)


class Card(BaseModel):
    """Immutable definition of a draw-pile card."""

    model_config = ConfigDict(frozen=True)

    identifier: str = Field(..., min_length=1)
    card_type: CardType
    title: str = Field(..., min_length=1)
    description: str
    cost: int | None = Field(default=None, ge=0)
    value: int | None = None
    turns_skipped: int | None = Field(default=None, ge=0)
    category: InvestmentCategory | None = None
    effect: CardEffect = CardEffect.STANDARD

    @model_validator(mode="after")
    def _validate_shape(self) -> Card:
        """Ensure investment-only fields only appear on investments."""
        is_investment = self.card_type is CardType.INVESTMENT
        if is_investment and self.cost is None:
            msg = f"Investment card {self.identifier} must declare a cost."
            raise ValueError(msg)
        if not is_investment and self.category is not None:
            msg = f"Only investment cards may carry a category ({self.identifier})."
            raise ValueError(msg)
        if self.effect is CardEffect.SHARED_GIFT and not self.value:
            msg = f"Shared gift card {self.identifier} needs a non-zero value."
            raise ValueError(msg)
        return self

    @property
    def gift_amount(self) -> int:
        """Amount handed to each other player by a shared gift card."""
        return abs(self.value or 0)


class Job(BaseModel):
    """Career chosen during setup."""

    model_config = ConfigDict(frozen=True)

    identifier: JobId
    name: str
    description: str
    salary: int = Field(..., ge=0)
    starting_debt: int = Field(default=0, ge=0)
    starting_skip_turns: int = Field(default=0, ge=0)


class LifeGoal(BaseModel):
    """End-of-game objective that awards a cash bonus when satisfied.

    The predicate is data, not code: ``condition`` picks one of the known
    checks and ``threshold`` parameterises it where relevant.
    """

    model_config = ConfigDict(frozen=True)

    identifier: str = Field(..., min_length=1)
    name: str
    description: str
    bonus: int = Field(..., ge=0)
    condition: GoalCondition
    threshold: int = 0

    def is_satisfied(
        self, *, balance: float, investment_count: int, insured: bool
    ) -> bool:
        """Evaluate the goal against a player's final economic state."""
        match self.condition:
            case GoalCondition.MIN_BALANCE:
                return balance > self.threshold
            case GoalCondition.MIN_INVESTMENTS:
                return investment_count >= self.threshold
            case GoalCondition.HAS_INSURANCE:
                return insured
            case GoalCondition.ALWAYS:
                return True
        msg = f"Unsupported goal condition: {self.condition}"
        raise ValueError(msg)


BLUE_COLLAR = Job(
    identifier=JobId.BLUE,
    name="Blue Collar",
    description="Steady income, no debt.",
    salary=250,
)

WHITE_COLLAR = Job(
    identifier=JobId.WHITE,
    name="White Collar",
    description="Higher salary, but starts with debt and study time.",
    salary=400,
    starting_debt=500,
    starting_skip_turns=2,
)

JOBS: dict[JobId, Job] = {
    JobId.BLUE: BLUE_COLLAR,
    JobId.WHITE: WHITE_COLLAR,
}

LIFE_GOALS: tuple[LifeGoal, ...] = (
    LifeGoal(
        identifier="retire",
        name="Early Retiree",
        description="Finish with > $5,000",
        bonus=1000,
        condition=GoalCondition.MIN_BALANCE,
        threshold=5000,
    ),
    LifeGoal(
        identifier="tycoon",
        name="Tycoon",
        description="Own 5+ Investments",
        bonus=800,
        condition=GoalCondition.MIN_INVESTMENTS,
        threshold=5,
    ),
    LifeGoal(
        identifier="safe",
        name="Safety First",
        description="Have Insurance",
        bonus=500,
        condition=GoalCondition.HAS_INSURANCE,
    ),
    # Spending on cards is not tracked, so this goal is always met.
    LifeGoal(
        identifier="saver",
        name="Penny Pincher",
        description="Spend < $1000 on cards",
        bonus=600,
        condition=GoalCondition.ALWAYS,
    ),
)


def _investment(
    identifier: str,
    title: str,
    description: str,
    cost: int,
    category: InvestmentCategory,
) -> Card:
    return Card(
        identifier=identifier,
        card_type=CardType.INVESTMENT,
        title=title,
        description=description,
        cost=cost,
        category=category,
    )


GAME_CARDS: tuple[Card, ...] = (
    _investment(
        "inv_1",
        "Big Company",
        "Established market leader.",
        300,
        InvestmentCategory.BIG_COMPANY,
    ),
    _investment(
        "inv_2",
        "Startup",
        "High risk, high reward potential.",
        500,
        InvestmentCategory.STARTUP,
    ),
    _investment(
        "inv_3", "Bonds", "Steady debt security.", 200, InvestmentCategory.BOND
    ),
    _investment(
        "inv_4", "Bank", "Traditional savings account.", 100, InvestmentCategory.BANK
    ),
    _investment(
        "inv_5",
        "Big Company",
        "Established market leader.",
        300,
        InvestmentCategory.BIG_COMPANY,
    ),
    _investment(
        "inv_6",
        "Startup",
        "High risk, high reward potential.",
        500,
        InvestmentCategory.STARTUP,
    ),
    _investment(
        "inv_7", "Bonds", "Steady debt security.", 200, InvestmentCategory.BOND
    ),
    _investment(
        "inv_8", "Bank", "Traditional savings account.", 100, InvestmentCategory.BANK
    ),
    Card(
        identifier="evt_1",
        card_type=CardType.EVENT,
        title="Tax Refund",
        description="Unexpected bonus from the IRS.",
        value=200,
    ),
    Card(
        identifier="evt_2",
        card_type=CardType.EVENT,
        title="Car Repair",
        description="Your transmission broke down.",
        value=-300,
    ),
    Card(
        identifier="evt_3",
        card_type=CardType.EVENT,
        title="Lottery Win",
        description="Small scratch-off victory!",
        value=150,
    ),
    Card(
        identifier="evt_4",
        card_type=CardType.EVENT,
        title="Medical Bill",
        description="Emergency room visit.",
        value=-400,
    ),
    Card(
        identifier="pers_1",
        card_type=CardType.PERSONAL,
        title="Sick Day",
        description="Flu season hits hard.",
        turns_skipped=1,
    ),
    Card(
        identifier="pers_2",
        card_type=CardType.PERSONAL,
        title="Vacation",
        description="Taking a break to recharge.",
        value=-200,
        turns_skipped=1,
    ),
    Card(
        identifier="pers_3",
        card_type=CardType.PERSONAL,
        title="Promotion",
        description="Hard work pays off! One-time bonus.",
        value=500,
    ),
    Card(
        identifier="int_1",
        card_type=CardType.INTERACTION,
        title="Birthday Gift",
        description="Give $50 to each other player.",
        value=-50,
        effect=CardEffect.SHARED_GIFT,
    ),
    Card(
        identifier="int_2",
        card_type=CardType.INTERACTION,
        title="Community Service",
        description="Skip a turn to help others.",
        turns_skipped=1,
    ),
)


__all__ = [
    "BLUE_COLLAR",
    "GAME_CARDS",
    "JOBS",
    "LIFE_GOALS",
    "WHITE_COLLAR",
    "Card",
    "Job",
    "LifeGoal",
]
