"""Timer abstractions that drive the guidance sequence without blocking callers.

A scheduler is anything with ``call_later(delay, callback, *args)`` that
returns a handle exposing ``cancel()``. Both classes below follow that shape,
and so does an :mod:`asyncio` event loop, which can be passed in directly.
"""

from __future__ import annotations

import heapq
import itertools
import threading
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Tuple


class ScheduledCall:
    """Handle for a callback registered with a scheduler."""

    def __init__(self, callback: Callable[..., Any], args: Tuple[Any, ...]) -> None:
        self._callback = callback
        self._args = args
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    def cancelled(self) -> bool:
        return self._cancelled

    def _run(self) -> None:
        if not self._cancelled:
            self._callback(*self._args)


class AbstractScheduler(ABC):
    @abstractmethod
    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> ScheduledCall:
        """Run ``callback(*args)`` once after ``delay`` seconds."""


class ManualScheduler(AbstractScheduler):
    """Virtual-clock scheduler advanced explicitly by the host loop.

    A game loop calls :meth:`advance` once per frame with the elapsed time;
    callbacks due within the window fire in due-time order, including ones
    scheduled by earlier callbacks in the same window.
    """

    def __init__(self) -> None:
        self.now = 0.0
        self._queue: List[Tuple[float, int, ScheduledCall]] = []
        self._counter = itertools.count()

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> ScheduledCall:
        handle = ScheduledCall(callback, args)
        heapq.heappush(self._queue, (self.now + max(0.0, delay), next(self._counter), handle))
        return handle

    def pending(self) -> int:
        return sum(1 for _, _, handle in self._queue if not handle.cancelled())

    def next_due(self) -> float:
        self._drop_cancelled()
        if not self._queue:
            raise LookupError("No scheduled calls")
        return self._queue[0][0]

    def advance(self, seconds: float) -> int:
        """Move the clock forward, firing due callbacks. Returns how many ran."""

        if seconds < 0:
            raise ValueError("Cannot move the clock backwards")
        deadline = self.now + seconds
        fired = 0
        while self._queue and self._queue[0][0] <= deadline:
            due, _, handle = heapq.heappop(self._queue)
            if handle.cancelled():
                continue
            self.now = due
            handle._run()
            fired += 1
        self.now = deadline
        return fired

    def run_until_idle(self, limit: int = 10_000) -> int:
        fired = 0
        while fired < limit:
            self._drop_cancelled()
            if not self._queue:
                break
            fired += self.advance(self._queue[0][0] - self.now)
        return fired

    def _drop_cancelled(self) -> None:
        while self._queue and self._queue[0][2].cancelled():
            heapq.heappop(self._queue)


class _TimerCall(ScheduledCall):
    def __init__(self, callback: Callable[..., Any], args: Tuple[Any, ...]) -> None:
        super().__init__(callback, args)
        self.timer: threading.Timer

    def cancel(self) -> None:
        super().cancel()
        self.timer.cancel()


class ThreadingScheduler(AbstractScheduler):
    """Wall-clock scheduler backed by daemon :class:`threading.Timer` threads."""

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> ScheduledCall:
        handle = _TimerCall(callback, args)
        handle.timer = threading.Timer(max(0.0, delay), handle._run)
        handle.timer.daemon = True
        handle.timer.start()
        return handle


__all__ = ["AbstractScheduler", "ScheduledCall", "ManualScheduler", "ThreadingScheduler"]
