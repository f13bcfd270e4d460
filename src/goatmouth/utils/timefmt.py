"""Timestamp parsing and display - relative ('1h ago'), absolute ('Jan 15, 2026'), countdown ('2d 5h left')."""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Any

UNKNOWN = "Unknown"
INVALID = "Invalid date"

_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR


def parse_timestamp(value: Any) -> datetime:
    """Timezone-aware datetime from a datetime or ISO-8601 string. Naive values are read as UTC."""
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError("empty timestamp")
        dt = datetime.fromisoformat(text)
    else:
        raise ValueError(f"unsupported timestamp: {value!r}")
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def _now(now: datetime | None) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    return parse_timestamp(now)


def _elapsed_seconds(start: datetime, end: datetime) -> int:
    return math.floor((end - start).total_seconds())


def time_ago(timestamp: Any, now: datetime | None = None) -> str:
    """Largest whole unit elapsed: '2y ago', '3mo ago', '1w ago', '4d ago', '1h ago', '5m ago', 'just now'."""
    if timestamp is None or timestamp == "":
        return UNKNOWN
    try:
        when = parse_timestamp(timestamp)
    except ValueError:
        return INVALID
    seconds = _elapsed_seconds(when, _now(now))
    if seconds < _MINUTE:
        return "just now"
    days = seconds // _DAY
    for count, unit in (
        (days // 365, "y"),
        (days // 30, "mo"),
        (days // 7, "w"),
        (days, "d"),
        (seconds // _HOUR, "h"),
        (seconds // _MINUTE, "m"),
    ):
        if count > 0:
            return f"{count}{unit} ago"
    return "just now"


def time_left(end: Any, now: datetime | None = None) -> str:
    """Countdown to end: '1w 2d left', '2d 5h left', '3h 10m left', '5m left', '30s left', 'Expired'."""
    if end is None or end == "":
        return "No end date"
    try:
        end_dt = parse_timestamp(end)
    except ValueError:
        return INVALID
    seconds = _elapsed_seconds(_now(now), end_dt)
    if seconds < 0:
        return "Expired"
    minutes = seconds // _MINUTE
    hours = seconds // _HOUR
    days = seconds // _DAY
    if days > 7:
        return f"{days // 7}w {days % 7}d left"
    if days > 0:
        return f"{days}d {hours % 24}h left"
    if hours > 0:
        return f"{hours}h {minutes % 60}m left"
    if minutes > 0:
        return f"{minutes}m left"
    if seconds > 0:
        return f"{seconds}s left"
    return "Ending soon"


def format_date(timestamp: Any) -> str:
    """'Jan 15, 2026'."""
    if timestamp is None or timestamp == "":
        return UNKNOWN
    try:
        dt = parse_timestamp(timestamp)
    except ValueError:
        return INVALID
    return f"{dt:%b} {dt.day}, {dt.year}"


def format_datetime(timestamp: Any) -> str:
    """'Jan 15, 2026 at 3:45 PM'."""
    if timestamp is None or timestamp == "":
        return UNKNOWN
    try:
        dt = parse_timestamp(timestamp)
    except ValueError:
        return INVALID
    hour = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    return f"{dt:%b} {dt.day}, {dt.year} at {hour}:{dt.minute:02d} {meridiem}"


def is_past(timestamp: Any, now: datetime | None = None) -> bool:
    try:
        return parse_timestamp(timestamp) < _now(now)
    except ValueError:
        return False


def is_future(timestamp: Any, now: datetime | None = None) -> bool:
    try:
        return parse_timestamp(timestamp) > _now(now)
    except ValueError:
        return False


def smart_timestamp(timestamp: Any, now: datetime | None = None) -> str:
    """Relative time for the last 24 hours, calendar date beyond that."""
    if timestamp is None or timestamp == "":
        return UNKNOWN
    try:
        when = parse_timestamp(timestamp)
    except ValueError:
        return INVALID
    if _elapsed_seconds(when, _now(now)) < _DAY:
        return time_ago(when, now)
    return format_date(when)
