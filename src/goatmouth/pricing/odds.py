"""Odds/quote engine - the single place where 1/probability is computed and formatted."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from goatmouth.models.market import Market, Outcome
from goatmouth.models.quote import (
    INVALID_PROBABILITY,
    INVALID_STAKE,
    PLACEHOLDER,
    BetQuoteRequest,
    BetQuoteResult,
    QuoteError,
    QuoteResult,
)
from goatmouth.utils.numbers import to_float

CURRENCY_SYMBOL = "J$"
MIN_STAKE = 1.0


def _valid_probability(value: Any) -> float | None:
    p = to_float(value)
    if p is None or not 0 < p < 1:
        return None
    return p


def quote(outcome_probability: Any, stake: Any) -> QuoteResult:
    """Quote a stake on an outcome priced at outcome_probability.

    Returns a BetQuoteResult, or a QuoteError when the probability is outside
    (0, 1) or the stake is not a positive number. Probability is checked first.
    """
    p = _valid_probability(outcome_probability)
    if p is None:
        return QuoteError(
            kind=INVALID_PROBABILITY,
            message=f"probability must be in (0, 1), got {outcome_probability!r}",
        )
    decimal_odds = 1 / p
    if not math.isfinite(decimal_odds):
        return QuoteError(
            kind=INVALID_PROBABILITY,
            message=f"probability too small to price, got {outcome_probability!r}",
        )
    amount = to_float(stake)
    if amount is None or amount <= 0:
        return QuoteError(kind=INVALID_STAKE, message=f"stake must be a positive number, got {stake!r}")
    payout = amount * decimal_odds
    if not math.isfinite(payout):
        return QuoteError(kind=INVALID_STAKE, message=f"stake too large to price, got {stake!r}")
    return BetQuoteResult(
        probability=p,
        stake=amount,
        decimal_odds=decimal_odds,
        potential_payout=payout,
        potential_profit=payout - amount,
        odds_formatted=format_decimal_odds(decimal_odds),
    )


def quote_request(request: BetQuoteRequest) -> QuoteResult:
    """Re-quote a submitted request at the probability it was captured with."""
    return quote(request.probability, request.stake)


def quote_outcome(market: Market, outcome: Outcome, stake: Any) -> QuoteResult:
    """Quote against the market's current price for outcome."""
    return quote(market.price_for(outcome), stake)


def validate_stake(stake: Any, min_stake: float = MIN_STAKE, currency: str = CURRENCY_SYMBOL) -> QuoteError | None:
    """Caller-level stake check (minimum bet). None when the stake can be submitted."""
    amount = to_float(stake)
    if amount is None or amount <= 0:
        return QuoteError(kind=INVALID_STAKE, message=f"stake must be a positive number, got {stake!r}")
    if amount < min_stake:
        return QuoteError(kind=INVALID_STAKE, message=f"minimum stake is {format_currency(min_stake, currency)}")
    return None


def format_decimal_odds(odds: Any) -> str:
    """Two-decimal odds with an x suffix (4 -> '4.00x'); '-' when not finite."""
    num = to_float(odds)
    if num is None:
        return PLACEHOLDER
    return f"{num:.2f}x"


def _half_up_percent(probability: float) -> int:
    # Clamp before quantize; huge values overflow Decimal's context precision
    probability = max(0.0, min(1.0, probability))
    # Decimal from the shortest repr so 0.285 rounds to 29, not 28
    pct = (Decimal(repr(probability)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return int(pct)


def percent_from_probability(probability: Any, suffix: str = "%") -> str:
    """Whole percent, half-up, clamped to 0..100 (0.25 -> '25%', or '25¢' with suffix='¢')."""
    p = to_float(probability)
    if p is None:
        return PLACEHOLDER
    return f"{_half_up_percent(p)}{suffix}"


def calculate_percentages(yes_price: Any, no_price: Any) -> tuple[int, int]:
    """(yes_percent, no_percent) as whole numbers; missing prices count as 0."""
    return (
        _half_up_percent(to_float(yes_price) or 0.0),
        _half_up_percent(to_float(no_price) or 0.0),
    )


def probability_to_odds(probability: Any) -> float | None:
    """1/probability, or None outside (0, 1)."""
    p = _valid_probability(probability)
    if p is None:
        return None
    odds = 1 / p
    return odds if math.isfinite(odds) else None


def odds_to_probability(odds: Any) -> float | None:
    """Implied probability in percent for decimal odds >= 1."""
    num = to_float(odds)
    if num is None or num < 1:
        return None
    return 100 / num


def format_currency(amount: Any, symbol: str = CURRENCY_SYMBOL, decimals: int = 2) -> str:
    """'J$80.00'; negative amounts as '-J$5.00'; invalid amounts as zero."""
    num = to_float(amount)
    if num is None:
        num = 0.0
    sign = "-" if num < 0 else ""
    return f"{sign}{symbol}{abs(num):.{decimals}f}"
