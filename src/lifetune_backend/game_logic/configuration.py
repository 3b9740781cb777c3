"""Rule configuration objects for game tables."""

from __future__ import annotations

from functools import cache

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict


class RulesDefaults(BaseSettings):
    """Load default rule parameters from the environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LIFETUNE_RULES_",
        extra="ignore",
    )

    starting_money: int = Field(default=1200, ge=0)
    insurance_price: int = Field(default=200, ge=0)
    insurance_premium: int = Field(default=50, ge=0)
    min_players: int = Field(default=2, ge=1)
    max_players: int = Field(default=4, ge=1)
    liquidation_die_sides: int = Field(default=8, ge=1)
    log_capacity: int = Field(default=50, ge=1)
    rng_seed: int | None = Field(default=None)

    def to_config(self) -> GameRules:
        """Convert defaults into an immutable rules object."""
        return GameRules(
            starting_money=self.starting_money,
            insurance_price=self.insurance_price,
            insurance_premium=self.insurance_premium,
            min_players=self.min_players,
            max_players=self.max_players,
            liquidation_die_sides=self.liquidation_die_sides,
            log_capacity=self.log_capacity,
            rng_seed=self.rng_seed,
        )


class GameRules(BaseModel):
    """Immutable representation of the rule constants for one table."""

    model_config = ConfigDict(frozen=True)

    starting_money: int = Field(default=1200, ge=0)
    insurance_price: int = Field(default=200, ge=0)
    insurance_premium: int = Field(default=50, ge=0)
    min_players: int = Field(default=2, ge=1)
    max_players: int = Field(default=4, ge=1)
    liquidation_die_sides: int = Field(default=8, ge=1)
    log_capacity: int = Field(default=50, ge=1)
    rng_seed: int | None = None

    @model_validator(mode="after")
    def _validate_player_bounds(self) -> GameRules:
        """Ensure the player-count window is not inverted."""
        if self.min_players > self.max_players:
            msg = "min_players must not exceed max_players."
            raise ValueError(msg)
        return self

    def allows_player_count(self, count: int) -> bool:
        """Return whether *count* seats fit the configured window."""
        return self.min_players <= count <= self.max_players

    def for_table(self, overrides: RulesOverrides | None = None) -> GameRules:
        """Create a table-specific rule set by applying overrides if provided."""
        if overrides is None:
            return self
        return overrides.apply(self)


class RulesOverrides(BaseModel):
    """Optional per-table overrides for rule constants."""

    model_config = ConfigDict(frozen=True)

    starting_money: int | None = Field(default=None, ge=0)
    insurance_price: int | None = Field(default=None, ge=0)
    insurance_premium: int | None = Field(default=None, ge=0)
    liquidation_die_sides: int | None = Field(default=None, ge=1)
    rng_seed: int | None = None

    def apply(self, rules: GameRules) -> GameRules:
        """Return a copy of *rules* with every provided override applied."""
        return rules.model_copy(update=self.model_dump(exclude_none=True))


@cache
def get_default_rules() -> GameRules:
    """Return the cached default rule set."""
    return RulesDefaults().to_config()


def build_table_rules(overrides: RulesOverrides | None = None) -> GameRules:
    """Construct the rules for a new table, applying optional overrides."""
    return get_default_rules().for_table(overrides)


__all__ = [
    "GameRules",
    "RulesDefaults",
    "RulesOverrides",
    "build_table_rules",
    "get_default_rules",
]
