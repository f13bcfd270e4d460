"""Merge independently fetched event collections into one feed, newest first."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

import structlog

from goatmouth.activity.projectors import project_row
from goatmouth.models.activity import ActivityEvent, ActivitySource

log = structlog.get_logger(__name__)

DASHBOARD_FEED_LIMIT = 25

SourceLike = ActivitySource | tuple[str, Any] | Mapping[str, Any]


def _unpack(source: Any) -> tuple[str, list[Any]]:
    """(kind, rows) from any accepted source shape. Unusable sources come back empty."""
    if isinstance(source, ActivitySource):
        return source.kind, list(source.rows)
    if isinstance(source, Mapping) and "kind" in source:
        kind, rows = source.get("kind"), source.get("rows")
    elif isinstance(source, (tuple, list)) and len(source) == 2:
        kind, rows = source
    else:
        log.warning("activity_source_malformed", source_type=type(source).__name__)
        return "", []
    kind = str(kind or "")
    if rows is None:
        return kind, []
    if not isinstance(rows, (list, tuple)):
        log.warning("activity_rows_malformed", kind=kind, rows_type=type(rows).__name__)
        return kind, []
    return kind, list(rows)


def sources_from_mapping(collections: Mapping[str, Any]) -> list[tuple[str, Any]]:
    """{'bets': [...], 'comments': [...]} -> [(kind, rows), ...] in mapping order."""
    return list(collections.items())


def aggregate(sources: Iterable[SourceLike] | None, limit: int | None = None) -> list[ActivityEvent]:
    """Project every row, stable-sort by occurred_at descending, keep the first `limit`.

    Missing or malformed collections count as empty. A row without a usable
    created_at raises MalformedActivityRow.
    """
    if limit is not None and limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    events: list[ActivityEvent] = []
    for source in sources or ():
        kind, rows = _unpack(source)
        events.extend(project_row(kind, row) for row in rows)
    # sort() with reverse=True keeps equal timestamps in input order
    events.sort(key=lambda e: e.occurred_at, reverse=True)
    if limit is not None:
        return events[:limit]
    return events


def compact_feed(sources: Iterable[SourceLike] | None, limit: int = DASHBOARD_FEED_LIMIT) -> list[ActivityEvent]:
    """Admin dashboard feed (capped at 25 by default)."""
    return aggregate(sources, limit=limit)
