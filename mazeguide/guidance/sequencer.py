"""Cancellable charge / pulse / settle sequence that hints at the goal distance."""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Any, Callable, Optional

from ..config import GuidanceTiming
from ..events import (
    ArrivalFlash,
    Cancelled,
    ChargeBegin,
    ChargeRelease,
    EventSink,
    GuidanceEvent,
    Pulse,
    discard,
)
from .scheduler import AbstractScheduler

logger = logging.getLogger(__name__)

ARRIVAL_FLASHES = 2


class GuidanceState(Enum):
    IDLE = "idle"
    CHARGING = "charging"
    PULSING = "pulsing"
    SETTLING = "settling"


class GuidanceSequencer:
    """Emit a distance-dependent run of pulses while guidance is active.

    ``activate`` starts charging. Once the charge completes the current graph
    distance ``n`` is read from ``distance_fn`` and ``n`` pulses follow, each
    spaced ``pulse_growth`` times further apart than the previous one. Two
    arrival flashes close the run. ``deactivate`` stops everything at once and
    emits a single ``Cancelled`` event.

    Every scheduled step carries the run number it was scheduled for and is
    ignored once that run has been cancelled, so nothing from a cancelled run
    reaches the sink even if its timer was already in flight.
    """

    def __init__(
        self,
        scheduler: AbstractScheduler,
        distance_fn: Callable[[], Optional[int]],
        sink: EventSink = discard,
        timing: Optional[GuidanceTiming] = None,
    ) -> None:
        self._scheduler = scheduler
        self._distance_fn = distance_fn
        self._sink = sink
        self.timing = timing or GuidanceTiming()
        self._lock = threading.RLock()
        self._state = GuidanceState.IDLE
        self._run = 0
        self._pending: Any = None
        self._pulse_total = 0

    @property
    def state(self) -> GuidanceState:
        return self._state

    @property
    def active(self) -> bool:
        return self._state is not GuidanceState.IDLE

    def activate(self) -> bool:
        """Start a fresh charge. Returns ``False`` if a run is already active."""

        with self._lock:
            if self.active:
                return False
            self._run += 1
            run = self._run
            self._transition(GuidanceState.CHARGING)
            if self._emit(run, ChargeBegin()):
                self._schedule(self.timing.charge_duration, self._release, run)
            return True

    def deactivate(self) -> bool:
        """Cancel the active run. Returns ``False`` if nothing was running."""

        with self._lock:
            if not self.active:
                return False
            self._run += 1
            if self._pending is not None:
                self._pending.cancel()
                self._pending = None
            self._transition(GuidanceState.IDLE)
            self._sink(Cancelled())
            return True

    # ------------------------------------------------------------------

    def _schedule(self, delay: float, step: Callable[..., None], run: int, *args: Any) -> None:
        self._pending = self._scheduler.call_later(delay, step, run, *args)

    def _emit(self, run: int, event: GuidanceEvent) -> bool:
        """Deliver ``event``; report whether ``run`` survived the sink callback."""

        self._sink(event)
        return run == self._run

    def _transition(self, state: GuidanceState) -> None:
        logger.debug("Guidance %s -> %s", self._state.value, state.value)
        self._state = state

    def _release(self, run: int) -> None:
        with self._lock:
            if run != self._run:
                return
            self._pending = None
            distance = self._distance_fn()
            self._pulse_total = max(0, distance or 0)
            if self._pulse_total:
                self._transition(GuidanceState.PULSING)
            else:
                self._transition(GuidanceState.SETTLING)
            if not self._emit(run, ChargeRelease(self._pulse_total)):
                return
            if self._pulse_total:
                self._schedule(self.timing.pulse_delay(0), self._pulse, run, 0)
            else:
                self._schedule(self.timing.settle_delay, self._arrival, run, 0)

    def _pulse(self, run: int, index: int) -> None:
        with self._lock:
            if run != self._run:
                return
            self._pending = None
            event = Pulse(index, self.timing.pulse_delay(index), self.timing.pulse_intensity)
            if not self._emit(run, event):
                return
            if index + 1 < self._pulse_total:
                self._schedule(self.timing.pulse_delay(index + 1), self._pulse, run, index + 1)
            else:
                self._settle(run)

    def _settle(self, run: int) -> None:
        self._transition(GuidanceState.SETTLING)
        self._schedule(self.timing.settle_delay, self._arrival, run, 0)

    def _arrival(self, run: int, index: int) -> None:
        with self._lock:
            if run != self._run:
                return
            self._pending = None
            if not self._emit(run, ArrivalFlash(index)):
                return
            if index + 1 < ARRIVAL_FLASHES:
                self._schedule(self.timing.settle_delay, self._arrival, run, index + 1)
            else:
                self._transition(GuidanceState.IDLE)


__all__ = ["GuidanceState", "GuidanceSequencer", "ARRIVAL_FLASHES"]
