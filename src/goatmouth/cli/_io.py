"""JSON input for CLI commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import typer


def read_json(path: Path) -> Any:
    """Parse a JSON file or exit with status 1."""
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        typer.echo(f"Cannot read {path}: {e}")
        raise typer.Exit(1)
