"""Per-kind projection of backend rows into ActivityEvents, with the feed's presentation table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping

from goatmouth.errors import MalformedActivityRow
from goatmouth.models.activity import UNKNOWN_ACTOR, ActivityEvent, ActivityKind
from goatmouth.pricing.odds import format_currency
from goatmouth.utils.numbers import to_float
from goatmouth.utils.timefmt import parse_timestamp

UNKNOWN_MARKET = "Unknown market"


@dataclass(frozen=True)
class Presentation:
    icon: str
    color: str
    label: str


PRESENTATION: dict[str, Presentation] = {
    "bet": Presentation("chart-line", "green", "Bet Placed"),
    "market_created": Presentation("plus-circle", "purple", "Market Created"),
    "comment": Presentation("comment", "dark-green", "Comment Posted"),
    "user_joined": Presentation("user-plus", "yellow", "New Member"),
    "proposal": Presentation("lightbulb", "teal", "Proposal Created"),
    "payout": Presentation("trophy", "yellow", "Payout"),
    "deposit": Presentation("arrow-down", "green", "Deposit"),
    "withdrawal": Presentation("arrow-up", "red", "Withdrawal"),
}
OTHER_PRESENTATION = Presentation("circle-info", "purple", "")

# Source names the UI shell uses (usually the backend table) -> canonical kind
KIND_ALIASES: dict[str, str] = {
    "bets": "bet",
    "markets": "market_created",
    "comments": "comment",
    "users": "user_joined",
    "profiles": "user_joined",
    "signups": "user_joined",
    "proposals": "proposal",
    "payouts": "payout",
    "deposits": "deposit",
    "withdrawals": "withdrawal",
}

# Ledger sources whose rows carry their own kind in 'type'
LEDGER_SOURCES = frozenset({"transactions", "transaction", "ledger"})
LEDGER_KINDS = frozenset({"payout", "deposit", "withdrawal"})

_USER_RELATIONS = ("user", "profiles", "profile", "creator", "author")
_MARKET_RELATIONS = ("market", "markets")


def _relation(row: Mapping[str, Any], names: tuple[str, ...]) -> Mapping[str, Any]:
    """First joined relation present on the row. Joins can come back as a one-element list or null."""
    for name in names:
        value = row.get(name)
        if isinstance(value, list) and value:
            value = value[0]
        if isinstance(value, Mapping):
            return value
    return {}


def resolve_kind(source_kind: str, row: Mapping[str, Any]) -> tuple[ActivityKind, str]:
    """(kind, raw kind string). Unknown kinds map to 'other' keeping the raw string as label."""
    raw = (source_kind or "").strip()
    key = raw.lower()
    if key in LEDGER_SOURCES:
        raw = str(row.get("type") or raw)
        key = raw.lower()
        # Only money movements are presented by ledger type; other types render as 'other'
        return (key, raw) if key in LEDGER_KINDS else ("other", raw)  # type: ignore[return-value]
    key = KIND_ALIASES.get(key, key)
    if key in PRESENTATION:
        return key, raw  # type: ignore[return-value]
    return "other", raw


def resolve_actor(kind: str, row: Mapping[str, Any]) -> str:
    user = _relation(row, _USER_RELATIONS)
    name = user.get("username")
    if not name and kind == "user_joined":
        name = row.get("username")
    return str(name) if name else UNKNOWN_ACTOR


def market_title(row: Mapping[str, Any]) -> str:
    title = _relation(row, _MARKET_RELATIONS).get("title")
    return str(title) if title else UNKNOWN_MARKET


def _amount(row: Mapping[str, Any]) -> float:
    return to_float(row.get("amount")) or 0.0


def _describe_bet(row: Mapping[str, Any], actor: str) -> str:
    outcome = str(row.get("outcome") or "").upper()
    return f'{outcome} on "{market_title(row)}" - {format_currency(_amount(row))}'


def _describe_market_created(row: Mapping[str, Any], actor: str) -> str:
    return str(row.get("title") or UNKNOWN_MARKET)


def _describe_comment(row: Mapping[str, Any], actor: str) -> str:
    return f'On "{market_title(row)}"'


def _describe_user_joined(row: Mapping[str, Any], actor: str) -> str:
    return f"@{row.get('username') or actor} joined"


def _describe_proposal(row: Mapping[str, Any], actor: str) -> str:
    return str(row.get("title") or "")


def _describe_payout(row: Mapping[str, Any], actor: str) -> str:
    return f"Won {format_currency(abs(_amount(row)))}"


def _describe_deposit(row: Mapping[str, Any], actor: str) -> str:
    return f"+{format_currency(abs(_amount(row)))}"


def _describe_withdrawal(row: Mapping[str, Any], actor: str) -> str:
    return f"-{format_currency(abs(_amount(row)))}"


def _describe_other(row: Mapping[str, Any], actor: str) -> str:
    return str(row.get("description") or "")


DESCRIBERS: dict[str, Callable[[Mapping[str, Any], str], str]] = {
    "bet": _describe_bet,
    "market_created": _describe_market_created,
    "comment": _describe_comment,
    "user_joined": _describe_user_joined,
    "proposal": _describe_proposal,
    "payout": _describe_payout,
    "deposit": _describe_deposit,
    "withdrawal": _describe_withdrawal,
    "other": _describe_other,
}


def project_row(source_kind: str, row: Any) -> ActivityEvent:
    """Normalize one backend row. Raises MalformedActivityRow for non-mappings or missing created_at."""
    if not isinstance(row, Mapping):
        raise MalformedActivityRow(source_kind, row, reason="not a mapping")
    try:
        occurred_at = parse_timestamp(row.get("created_at"))
    except ValueError as e:
        raise MalformedActivityRow(source_kind, row) from e
    kind, raw = resolve_kind(source_kind, row)
    presentation = PRESENTATION.get(kind, OTHER_PRESENTATION)
    actor = resolve_actor(kind, row)
    return ActivityEvent(
        kind=kind,
        source_kind=raw,
        occurred_at=occurred_at,
        actor=actor,
        icon=presentation.icon,
        color=presentation.color,
        label=presentation.label if kind != "other" else raw,
        description=DESCRIBERS[kind](row, actor),
        payload=dict(row),
    )
