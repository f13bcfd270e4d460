"""Odds subcommand: quote, slip."""

from __future__ import annotations

from pathlib import Path

import typer
from pydantic import ValidationError

from goatmouth.cli._io import read_json
from goatmouth.models import BetQuoteResult, Market
from goatmouth.pricing.betslip import BetSlip
from goatmouth.pricing.odds import format_currency, quote

app = typer.Typer(help="Bet quotes and bet slip summaries")


@app.command("quote")
def quote_cmd(
    ctx: typer.Context,
    probability: float = typer.Option(..., "--probability", "-P", help="Outcome probability in (0, 1)"),
    stake: float = typer.Option(..., "--stake", "-s", help="Stake in currency units"),
) -> None:
    """Decimal odds, payout and profit for a stake at a probability."""
    settings = ctx.obj["settings"]
    result = quote(probability, stake)
    if not isinstance(result, BetQuoteResult):
        typer.echo(f"Odds: {result.odds_formatted}")
        typer.echo(f"Error: {result.kind} ({result.message})")
        raise typer.Exit(1)
    currency = settings.currency_symbol
    typer.echo(f"Odds: {result.odds_formatted}")
    typer.echo(f"Payout: {format_currency(result.potential_payout, currency)}")
    typer.echo(f"Profit: {format_currency(result.potential_profit, currency)}")


@app.command("slip")
def slip_cmd(
    ctx: typer.Context,
    market_file: Path = typer.Argument(..., help="JSON file with one market row"),
    outcome: str = typer.Option("yes", "--outcome", "-o", help="yes or no"),
    stake: str = typer.Option(..., "--stake", "-s", help="Stake as typed into the bet form"),
) -> None:
    """Render the bet dialog summary for a market row."""
    settings = ctx.obj["settings"]
    try:
        market = Market.model_validate(read_json(market_file))
    except ValidationError as e:
        typer.echo(f"Invalid market row: {e.error_count()} error(s)")
        raise typer.Exit(1)
    slip = BetSlip.from_settings(market, settings)
    try:
        slip.select_outcome(outcome.lower())
    except ValueError as e:
        typer.echo(str(e))
        raise typer.Exit(1)
    slip.set_stake(stake)
    summary = slip.summary()
    typer.echo(f"{market.title or market.id}  {outcome.upper()} @ {summary.price_display}")
    typer.echo(f"  Shares: {summary.shares}  Odds: {summary.odds_display}")
    typer.echo(f"  Payout: {summary.payout_display}  Profit: {summary.profit_display}")
    typer.echo(f"  [{summary.button_label}]" + ("" if summary.can_submit else f"  ({summary.reason})"))
    if not summary.can_submit:
        raise typer.Exit(1)
