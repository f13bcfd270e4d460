"""Canonical schema (Pydantic) - Market, quotes, activity events."""

from goatmouth.models.activity import ActivityEvent, ActivityKind, ActivitySource
from goatmouth.models.market import Market, MarketStatus, Outcome
from goatmouth.models.quote import BetQuoteRequest, BetQuoteResult, QuoteError, QuoteResult

__all__ = [
    "Market",
    "MarketStatus",
    "Outcome",
    "BetQuoteRequest",
    "BetQuoteResult",
    "QuoteError",
    "QuoteResult",
    "ActivityEvent",
    "ActivityKind",
    "ActivitySource",
]
