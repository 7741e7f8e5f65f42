"""
Habit Tracker — Observable value container.

A single current value with synchronous updates and fan-out to any number
of subscribers. New subscribers receive the current value immediately.
Equal values are dropped, so subscribers only hear about real changes.

Two ways to listen:
  * subscribe(callback) — synchronous callbacks, fired inside set().
  * stream()            — async iterator; latest value wins, intermediate
                          values may be skipped if the consumer is slow.
"""

from __future__ import annotations

import asyncio
import logging
from typing import AsyncIterator, Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Unsubscribe = Callable[[], None]


class ObservableValue(Generic[T]):
    """Current-value holder with replay-on-subscribe semantics."""

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._version = 0
        self._callbacks: list[Callable[[T], None]] = []
        self._waiters: set[asyncio.Event] = set()
        self._notifying = False

    @property
    def value(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        """Replace the value and notify subscribers if it changed.

        A set() issued by a subscriber during fan-out only records the new
        value; the running pass stops and restarts with it, so every
        subscriber ends on the latest value.
        """
        if value == self._value:
            return
        self._value = value
        self._version += 1

        for event in self._waiters:
            event.set()

        if self._notifying:
            return
        self._notifying = True
        try:
            delivered = None
            while delivered != self._version:
                delivered = self._version
                current = self._value
                for callback in list(self._callbacks):
                    if self._version != delivered:
                        break
                    self._deliver(callback, current)
        finally:
            self._notifying = False

    def _deliver(self, callback: Callable[[T], None], value: T) -> bool:
        try:
            callback(value)
        except Exception as exc:
            logger.error("Subscriber %r failed: %s", callback, exc)
            return False
        return True

    def update(self, fn: Callable[[T], T]) -> None:
        self.set(fn(self._value))

    def subscribe(self, callback: Callable[[T], None]) -> Unsubscribe:
        """Call `callback` with the current value, then register it.

        A callback that fails on the replay is logged and left unregistered.
        """
        if not self._deliver(callback, self._value):
            return lambda: None
        self._callbacks.append(callback)

        def _unsubscribe() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return _unsubscribe

    async def stream(self) -> AsyncIterator[T]:
        """Yield the current value, then the latest value after each change."""
        event = asyncio.Event()
        self._waiters.add(event)
        try:
            seen = self._version
            yield self._value
            while True:
                await event.wait()
                event.clear()
                if self._version != seen:
                    seen = self._version
                    yield self._value
        finally:
            self._waiters.discard(event)

    @property
    def subscriber_count(self) -> int:
        return len(self._callbacks)
