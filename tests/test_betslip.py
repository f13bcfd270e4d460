"""Bet slip view-model tests."""

import asyncio
from datetime import datetime, timezone

import pytest

from goatmouth.config import Settings
from goatmouth.models import BetQuoteRequest, Market
from goatmouth.pricing.betslip import BetSlip


@pytest.fixture
def market():
    return Market(id="m1", title="Will it rain?", yes_price=0.25, no_price=0.75)


def test_no_outcome_selected(market, now):
    slip = BetSlip(market)
    slip.set_stake("20")
    summary = slip.summary(now)
    assert not summary.can_submit
    assert summary.reason == "no_outcome"
    assert summary.button_label == "Place Bet"


def test_valid_yes_bet(market, now):
    slip = BetSlip(market)
    slip.select_outcome("yes")
    slip.set_stake("20")
    summary = slip.summary(now)
    assert summary.can_submit
    assert summary.reason is None
    assert summary.button_label == "Place Bet: J$20.00"
    assert summary.shares == "80.00"
    assert summary.price_display == "25¢"
    assert summary.odds_display == "4.00x"
    assert summary.payout_display == "J$80.00"
    assert summary.profit_display == "+J$60.00"


def test_switching_outcome_requotes(market, now):
    slip = BetSlip(market)
    slip.set_stake(30)
    slip.select_outcome("yes")
    assert slip.summary(now).odds_display == "4.00x"
    slip.select_outcome("no")
    summary = slip.summary(now)
    assert summary.odds_display == "1.33x"
    assert summary.price_display == "75¢"
    assert summary.payout_display == "J$40.00"


def test_below_minimum_stake_disables_submit(market, now):
    slip = BetSlip(market)
    slip.select_outcome("yes")
    slip.set_stake("0.5")
    summary = slip.summary(now)
    assert not summary.can_submit
    assert summary.reason == "invalid_stake"
    assert summary.button_label == "Place Bet"
    assert summary.payout_display == "J$2.00"


def test_empty_stake_shows_dashes(market, now):
    slip = BetSlip(market)
    slip.select_outcome("yes")
    slip.set_stake("")
    summary = slip.summary(now)
    assert not summary.can_submit
    assert summary.reason == "invalid_stake"
    assert summary.odds_display == "-"
    assert summary.payout_display == "-"
    assert summary.price_display == "25¢"


def test_zero_price_outcome_is_not_quotable(now):
    slip = BetSlip(Market(id="m2", yes_price=0.0, no_price=1.0))
    slip.select_outcome("yes")
    slip.set_stake(10)
    summary = slip.summary(now)
    assert not summary.can_submit
    assert summary.reason == "invalid_probability"
    assert summary.odds_display == "-"
    assert summary.price_display == "0¢"


def test_resolved_market_is_closed(now):
    slip = BetSlip(Market(id="m3", yes_price=0.6, no_price=0.4, status="resolved"))
    slip.select_outcome("yes")
    slip.set_stake(10)
    summary = slip.summary(now)
    assert not summary.can_submit
    assert summary.reason == "market_closed"
    assert summary.button_label == "Market Closed"


def test_past_end_date_is_closed(now):
    market = Market(id="m4", end_date=datetime(2026, 1, 1, tzinfo=timezone.utc))
    slip = BetSlip(market)
    slip.select_outcome("no")
    slip.set_stake(10)
    assert slip.summary(now).reason == "market_closed"
    assert market.accepts_bets(datetime(2025, 12, 31, tzinfo=timezone.utc))


def test_custom_min_stake_and_currency(market, now):
    slip = BetSlip(market, min_stake=5, currency="$")
    slip.select_outcome("yes")
    slip.set_stake(4)
    assert slip.summary(now).reason == "invalid_stake"
    slip.set_stake(5)
    summary = slip.summary(now)
    assert summary.can_submit
    assert summary.button_label == "Place Bet: $5.00"


def test_invalid_outcome_rejected(market):
    with pytest.raises(ValueError):
        BetSlip(market).select_outcome("maybe")


def test_from_settings_applies_betting_config(market, now):
    settings = Settings.from_dict({"betting": {"min_stake": 5, "currency_symbol": "$", "quote_debounce_ms": 0}})
    slip = BetSlip.from_settings(market, settings)
    assert slip.min_stake == 5
    assert slip.currency == "$"
    assert slip.sequencer.debounce_sec == 0.0


def test_typing_stake_keeps_only_latest_summary(market, now):
    settings = Settings.from_dict({"betting": {"quote_debounce_ms": 10}})
    slip = BetSlip.from_settings(market, settings)
    slip.select_outcome("yes")

    async def typing():
        return await asyncio.gather(slip.type_stake("2", now), slip.type_stake("20", now))

    first, second = asyncio.run(typing())
    assert first is None
    assert second.button_label == "Place Bet: J$20.00"


def test_request_built_only_when_submittable(market, now):
    slip = BetSlip(market)
    assert slip.request(now) is None
    slip.select_outcome("no")
    slip.set_stake("0.5")
    assert slip.request(now) is None
    slip.set_stake("30")
    request = slip.request(now)
    assert request == BetQuoteRequest(outcome="no", stake=30.0, probability=0.75)


def test_numeric_market_id_is_kept_as_string():
    assert Market.model_validate({"id": 1, "yes_price": 0.5, "no_price": 0.5}).id == "1"
