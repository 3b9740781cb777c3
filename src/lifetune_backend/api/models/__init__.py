"""Models used for API request and response payloads."""

from lifetune_backend.api.models.game import (
    BuyInsurancePayload,
    ChooseJobPayload,
    ChoosePlayerCountPayload,
    CollectPayload,
    CreateGameRequest,
    DecideInvestmentPayload,
    DrawCardPayload,
    EndTurnPayload,
    GameActionPayload,
    GameActionRequest,
    GameActionResponse,
    GameTableResponse,
    ResolvePremiumPayload,
)

__all__ = [
    "BuyInsurancePayload",
    "ChooseJobPayload",
    "ChoosePlayerCountPayload",
    "CollectPayload",
    "CreateGameRequest",
    "DecideInvestmentPayload",
    "DrawCardPayload",
    "EndTurnPayload",
    "GameActionPayload",
    "GameActionRequest",
    "GameActionResponse",
    "GameTableResponse",
    "ResolvePremiumPayload",
]
