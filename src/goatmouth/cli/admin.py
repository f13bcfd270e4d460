"""Admin subcommand: stats."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import typer

from goatmouth.admin.stats import market_stats, user_stats
from goatmouth.cli._io import read_json
from goatmouth.pricing.odds import format_currency

app = typer.Typer(help="Admin dashboard counters")


def _read_rows(path: Path) -> list[dict[str, Any]]:
    data = read_json(path)
    if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
        typer.echo(f"{path} must contain a JSON list of objects")
        raise typer.Exit(1)
    return data


@app.command("stats")
def stats(
    ctx: typer.Context,
    markets_file: Path = typer.Argument(..., help="JSON list of market rows"),
    users_file: Path | None = typer.Option(None, "--users", "-u", help="JSON list of profile rows"),
) -> None:
    """Market (and optionally user) totals."""
    currency = ctx.obj["settings"].currency_symbol
    m = market_stats(_read_rows(markets_file))
    typer.echo(f"Markets: {m.total}  Active: {m.active}  Resolved: {m.resolved}")
    typer.echo(f"Total volume: {format_currency(m.total_volume, currency)}")
    if users_file is not None:
        u = user_stats(_read_rows(users_file))
        typer.echo(f"Users: {u.total}  Admins: {u.admins}  Members: {u.users}")
        typer.echo(f"Total balance: {format_currency(u.total_balance, currency)}")
