"""Admin dashboard counters - reductions over already-fetched market, profile and position rows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from goatmouth.utils.numbers import to_float


@dataclass(frozen=True)
class MarketStats:
    total: int
    active: int
    resolved: int
    total_volume: float


@dataclass(frozen=True)
class UserStats:
    total: int
    admins: int
    users: int
    total_balance: float


@dataclass(frozen=True)
class PortfolioSummary:
    total_invested: float
    current_value: float

    @property
    def profit_loss(self) -> float:
        return self.current_value - self.total_invested


def _sum(rows: list[Mapping[str, Any]], key: str) -> float:
    return sum(to_float(r.get(key)) or 0.0 for r in rows)


def market_stats(rows: Iterable[Mapping[str, Any]] | None) -> MarketStats:
    """Counts by status plus summed total_volume."""
    markets = list(rows or [])
    return MarketStats(
        total=len(markets),
        active=sum(1 for m in markets if m.get("status") == "active"),
        resolved=sum(1 for m in markets if m.get("status") == "resolved"),
        total_volume=_sum(markets, "total_volume"),
    )


def user_stats(rows: Iterable[Mapping[str, Any]] | None) -> UserStats:
    """Counts by role plus summed balance."""
    profiles = list(rows or [])
    return UserStats(
        total=len(profiles),
        admins=sum(1 for p in profiles if p.get("role") == "admin"),
        users=sum(1 for p in profiles if p.get("role") == "user"),
        total_balance=_sum(profiles, "balance"),
    )


def portfolio_summary(positions: Iterable[Mapping[str, Any]] | None) -> PortfolioSummary:
    rows = list(positions or [])
    return PortfolioSummary(
        total_invested=_sum(rows, "total_invested"),
        current_value=_sum(rows, "current_value"),
    )
