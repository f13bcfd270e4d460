"""BetQuoteRequest, BetQuoteResult, QuoteError - inputs and outputs of the odds engine."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from goatmouth.models.market import Outcome

QuoteErrorKind = Literal["invalid_probability", "invalid_stake"]

INVALID_PROBABILITY: QuoteErrorKind = "invalid_probability"
INVALID_STAKE: QuoteErrorKind = "invalid_stake"

# Shown in place of odds/amounts when a quote cannot be computed
PLACEHOLDER = "-"


class BetQuoteRequest(BaseModel):
    """Proposed bet: outcome, stake and the outcome's probability at quote time."""

    outcome: Outcome
    stake: float
    probability: float


class BetQuoteResult(BaseModel):
    """Numbers a bettor sees before confirming. Pure function of (probability, stake)."""

    model_config = {"frozen": True}

    probability: float = Field(..., gt=0, lt=1)
    stake: float = Field(..., gt=0)
    decimal_odds: float
    potential_payout: float
    potential_profit: float
    odds_formatted: str

    @property
    def ok(self) -> bool:
        return True


class QuoteError(BaseModel):
    """Expected quote failure, returned instead of raised."""

    model_config = {"frozen": True}

    kind: QuoteErrorKind
    message: str = ""

    @property
    def ok(self) -> bool:
        return False

    @property
    def odds_formatted(self) -> str:
        return PLACEHOLDER


QuoteResult = BetQuoteResult | QuoteError
