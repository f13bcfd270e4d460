"""Bet slip view-model: what the bet dialog shows for the current outcome and stake."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from goatmouth.config.settings import Settings
from goatmouth.models.market import Market, Outcome
from goatmouth.models.quote import PLACEHOLDER, BetQuoteRequest, BetQuoteResult
from goatmouth.pricing.odds import (
    CURRENCY_SYMBOL,
    MIN_STAKE,
    format_currency,
    percent_from_probability,
    quote_outcome,
    validate_stake,
)
from goatmouth.pricing.sequencer import QuoteSequencer
from goatmouth.utils.numbers import to_float

NO_OUTCOME = "no_outcome"
MARKET_CLOSED = "market_closed"


@dataclass(frozen=True)
class BetSummary:
    """Rendered numbers for the bet dialog. can_submit gates the Place Bet button."""

    can_submit: bool
    button_label: str
    shares: str = PLACEHOLDER
    price_display: str = PLACEHOLDER
    odds_display: str = PLACEHOLDER
    payout_display: str = PLACEHOLDER
    profit_display: str = PLACEHOLDER
    reason: str | None = None


class BetSlip:
    """Holds the selected outcome and raw stake for one market; re-quotes on every summary()."""

    def __init__(
        self,
        market: Market,
        min_stake: float = MIN_STAKE,
        currency: str = CURRENCY_SYMBOL,
        sequencer: QuoteSequencer | None = None,
    ) -> None:
        self.market = market
        self.min_stake = min_stake
        self.currency = currency
        self.sequencer = sequencer or QuoteSequencer()
        self.outcome: Outcome | None = None
        self.stake: Any = None

    @classmethod
    def from_settings(cls, market: Market, settings: Settings) -> BetSlip:
        return cls(
            market,
            min_stake=settings.min_stake,
            currency=settings.currency_symbol,
            sequencer=QuoteSequencer.from_settings(settings),
        )

    def select_outcome(self, outcome: Outcome) -> None:
        if outcome not in ("yes", "no"):
            raise ValueError(f"outcome must be 'yes' or 'no', got {outcome!r}")
        self.outcome = outcome

    def set_stake(self, stake: Any) -> None:
        self.stake = stake

    async def type_stake(self, stake: Any, now: datetime | None = None) -> BetSummary | None:
        """Stake edit from the form. None when a later edit superseded this one."""
        self.set_stake(stake)
        return await self.sequencer.run(self.summary, now)

    def request(self, now: datetime | None = None) -> BetQuoteRequest | None:
        """The bet to submit on Place Bet, or None while the button is disabled."""
        if self.outcome is None or not self.summary(now).can_submit:
            return None
        return BetQuoteRequest(
            outcome=self.outcome,
            stake=to_float(self.stake),
            probability=self.market.price_for(self.outcome),
        )

    def summary(self, now: datetime | None = None) -> BetSummary:
        if not self.market.accepts_bets(now):
            return BetSummary(can_submit=False, button_label="Market Closed", reason=MARKET_CLOSED)
        if self.outcome is None:
            return BetSummary(can_submit=False, button_label="Place Bet", reason=NO_OUTCOME)

        price = self.market.price_for(self.outcome)
        result = quote_outcome(self.market, self.outcome, self.stake)
        if not isinstance(result, BetQuoteResult):
            return BetSummary(
                can_submit=False,
                button_label="Place Bet",
                price_display=percent_from_probability(price, suffix="¢"),
                reason=result.kind,
            )

        # Each share pays out 1 unit, so share count equals gross payout
        displays = dict(
            shares=f"{result.potential_payout:.2f}",
            price_display=percent_from_probability(price, suffix="¢"),
            odds_display=result.odds_formatted,
            payout_display=format_currency(result.potential_payout, self.currency),
            profit_display="+" + format_currency(result.potential_profit, self.currency),
        )
        error = validate_stake(result.stake, self.min_stake, self.currency)
        if error is not None:
            return BetSummary(can_submit=False, button_label="Place Bet", reason=error.kind, **displays)
        return BetSummary(
            can_submit=True,
            button_label=f"Place Bet: {format_currency(result.stake, self.currency)}",
            **displays,
        )
