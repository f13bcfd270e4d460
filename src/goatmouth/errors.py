"""Package exceptions."""

from __future__ import annotations


class GoatMouthError(Exception):
    """Base for errors raised by goatmouth."""


class MalformedActivityRow(GoatMouthError, ValueError):
    """Row handed to the activity aggregator is not a mapping or has no usable created_at."""

    def __init__(self, kind: str, row: object, reason: str = "no usable created_at") -> None:
        super().__init__(f"malformed {kind} row ({reason}): {row!r}")
        self.kind = kind
        self.row = row
