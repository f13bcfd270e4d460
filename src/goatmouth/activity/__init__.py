"""Activity feed: per-kind projection, aggregation, best-effort source collection."""

from goatmouth.activity.aggregator import DASHBOARD_FEED_LIMIT, aggregate, compact_feed
from goatmouth.activity.sources import PartialSourceFailure, SourceBundle, collect_sources, gather_sources

__all__ = [
    "DASHBOARD_FEED_LIMIT",
    "aggregate",
    "compact_feed",
    "collect_sources",
    "gather_sources",
    "PartialSourceFailure",
    "SourceBundle",
]
