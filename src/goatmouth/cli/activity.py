"""Activity subcommand: feed."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import typer

from goatmouth.activity.aggregator import aggregate, sources_from_mapping
from goatmouth.cli._io import read_json
from goatmouth.errors import GoatMouthError
from goatmouth.utils.timefmt import time_ago

app = typer.Typer(help="Unified activity feed")


@app.command("feed")
def feed(
    ctx: typer.Context,
    sources_file: Path = typer.Argument(
        ..., help='JSON: {"bets": [...], ...} or [{"kind": "bets", "rows": [...]}, ...]'
    ),
    limit: int | None = typer.Option(None, "--limit", "-n", help="Max events (default: full_limit from config)"),
    compact: bool = typer.Option(False, "--compact", help="Dashboard feed length (compact_limit from config)"),
) -> None:
    """Merge event collections and print newest first."""
    settings = ctx.obj["settings"]
    data = read_json(sources_file)
    if isinstance(data, Mapping):
        sources = sources_from_mapping(data)
    elif isinstance(data, list):
        sources = data
    else:
        typer.echo(f"{sources_file} must contain a JSON object or list")
        raise typer.Exit(1)
    if compact:
        limit = settings.compact_feed_limit
    elif limit is None:
        limit = settings.full_feed_limit
    try:
        events = aggregate(sources, limit=limit)
    except (GoatMouthError, ValueError) as e:
        typer.echo(f"Cannot build feed: {e}")
        raise typer.Exit(1)
    for ev in events:
        desc = f": {ev.description}" if ev.description else ""
        typer.echo(f"  [{ev.label}] {ev.actor}{desc}  ({time_ago(ev.occurred_at)})")
    typer.echo(f"Total: {len(events)} events")
