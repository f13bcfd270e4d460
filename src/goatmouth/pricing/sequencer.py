"""Last-request-wins sequencing for quote requests issued while a stake is being typed."""

from __future__ import annotations

import asyncio
import inspect
from typing import TYPE_CHECKING, Any, Awaitable, Callable, TypeVar

import structlog

if TYPE_CHECKING:
    from goatmouth.config.settings import Settings

log = structlog.get_logger(__name__)

T = TypeVar("T")


class QuoteSequencer:
    """Monotonic ticket counter. Only the newest ticket's result is delivered."""

    def __init__(self, debounce_sec: float = 0.0) -> None:
        self.debounce_sec = debounce_sec
        self._issued = 0

    @classmethod
    def from_settings(cls, settings: Settings) -> QuoteSequencer:
        return cls(debounce_sec=settings.quote_debounce_sec)

    @property
    def latest(self) -> int:
        return self._issued

    def issue(self) -> int:
        """Start a new request; every earlier ticket becomes stale."""
        self._issued += 1
        return self._issued

    def is_current(self, ticket: int) -> bool:
        return ticket == self._issued

    async def run(self, fn: Callable[..., T | Awaitable[T]], *args: Any, **kwargs: Any) -> T | None:
        """Run fn under a fresh ticket. Returns None if a newer request superseded it."""
        ticket = self.issue()
        if self.debounce_sec > 0:
            await asyncio.sleep(self.debounce_sec)
            if not self.is_current(ticket):
                log.debug("quote_skipped", ticket=ticket, latest=self._issued)
                return None
        try:
            result = fn(*args, **kwargs)
            if inspect.isawaitable(result):
                result = await result
        except Exception as e:
            if self.is_current(ticket):
                raise
            log.debug("quote_superseded", ticket=ticket, latest=self._issued, error=str(e))
            return None
        if not self.is_current(ticket):
            log.debug("quote_superseded", ticket=ticket, latest=self._issued)
            return None
        return result
