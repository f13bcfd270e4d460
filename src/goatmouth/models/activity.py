"""ActivityEvent - normalized feed entry built from one backend row."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field

ActivityKind = Literal[
    "bet",
    "market_created",
    "comment",
    "user_joined",
    "proposal",
    "payout",
    "deposit",
    "withdrawal",
    "other",
]

UNKNOWN_ACTOR = "Unknown"


class ActivitySource(BaseModel):
    """One independently fetched collection of rows of a single kind."""

    kind: str
    rows: list[dict[str, Any]] = Field(default_factory=list)


class ActivityEvent(BaseModel):
    """Feed entry with its presentation (icon, color, label, description) resolved."""

    kind: ActivityKind
    source_kind: str
    occurred_at: datetime
    actor: str = UNKNOWN_ACTOR
    icon: str
    color: str
    label: str
    description: str = ""
    payload: dict[str, Any] = Field(default_factory=dict)
