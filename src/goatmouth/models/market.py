"""Market - read-only view of a binary YES/NO market row."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, Field

Outcome = Literal["yes", "no"]
MarketStatus = Literal["active", "closed", "resolved"]


class Market(BaseModel):
    """Binary prediction market as fetched from the backend."""

    id: str = Field(..., coerce_numbers_to_str=True, description="Opaque backend id")
    title: str = ""
    yes_price: float = Field(0.5, ge=0, le=1, description="Probability/price of YES in [0, 1]")
    no_price: float = Field(0.5, ge=0, le=1, description="Probability/price of NO in [0, 1]")
    status: MarketStatus = "active"
    total_volume: float = Field(0.0, ge=0)
    end_date: datetime | None = None

    def price_for(self, outcome: Outcome) -> float:
        return self.yes_price if outcome == "yes" else self.no_price

    def accepts_bets(self, now: datetime | None = None) -> bool:
        """Active and not past end_date. Naive end dates are read as UTC."""
        if self.status != "active":
            return False
        if self.end_date is None:
            return True
        end = self.end_date
        if end.tzinfo is None:
            end = end.replace(tzinfo=timezone.utc)
        current = now or datetime.now(timezone.utc)
        if current.tzinfo is None:
            current = current.replace(tzinfo=timezone.utc)
        return current < end
