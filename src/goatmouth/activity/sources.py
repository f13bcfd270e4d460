"""Best-effort collection of feed sources: a failing fetch becomes an empty collection, never an error."""

from __future__ import annotations

import asyncio
import inspect
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

import structlog

from goatmouth.activity.aggregator import aggregate
from goatmouth.models.activity import ActivityEvent, ActivitySource

log = structlog.get_logger(__name__)

Fetcher = Callable[[], Any]


@dataclass(frozen=True)
class PartialSourceFailure:
    """One source that could not be fetched (e.g. a relational join rejected with HTTP 400)."""

    kind: str
    error: str


@dataclass
class SourceBundle:
    """Sources that loaded plus the ones that failed."""

    sources: list[ActivitySource] = field(default_factory=list)
    failures: list[PartialSourceFailure] = field(default_factory=list)

    @property
    def partial(self) -> bool:
        return bool(self.failures)

    def aggregate(self, limit: int | None = None) -> list[ActivityEvent]:
        return aggregate(self.sources, limit=limit)


def _record_failure(bundle: SourceBundle, kind: str, exc: Exception) -> None:
    log.warning("activity_source_failed", kind=kind, error=str(exc), error_type=type(exc).__name__)
    bundle.failures.append(PartialSourceFailure(kind=kind, error=str(exc)))
    bundle.sources.append(ActivitySource(kind=kind))


def _to_source(kind: str, rows: Any) -> ActivitySource:
    return ActivitySource(kind=kind, rows=list(rows or []))


def collect_sources(fetchers: Mapping[str, Fetcher]) -> SourceBundle:
    """Call each fetcher in order. Errors (including rows that fail validation) are recorded, not raised."""
    bundle = SourceBundle()
    for kind, fetch in fetchers.items():
        try:
            bundle.sources.append(_to_source(kind, fetch()))
        except Exception as e:
            _record_failure(bundle, kind, e)
    return bundle


async def _fetch_one(kind: str, fetch: Fetcher) -> tuple[str, ActivitySource | Exception]:
    try:
        rows = fetch()
        if inspect.isawaitable(rows):
            rows = await rows
        return kind, _to_source(kind, rows)
    except Exception as e:
        return kind, e


async def gather_sources(fetchers: Mapping[str, Fetcher]) -> SourceBundle:
    """Run all fetchers concurrently; source order in the bundle follows the mapping order."""
    results = await asyncio.gather(*(_fetch_one(kind, fetch) for kind, fetch in fetchers.items()))
    bundle = SourceBundle()
    for kind, outcome in results:
        if isinstance(outcome, Exception):
            _record_failure(bundle, kind, outcome)
        else:
            bundle.sources.append(outcome)
    if bundle.partial:
        log.info("activity_sources_partial", loaded=len(fetchers) - len(bundle.failures), failed=len(bundle.failures))
    return bundle
