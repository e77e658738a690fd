from __future__ import annotations

import itertools
import logging
from typing import Callable

from booking_service.application.ports.scheduler import SchedulerPort, TimerHandle


class ManualTimer(TimerHandle):
    def __init__(self, scheduler: ManualScheduler, delay_seconds: float) -> None:
        self._scheduler = scheduler
        self._delay_seconds = delay_seconds
        self._callback: Callable[[], None] | None = None
        self._cancelled = False
        self.deadline: float | None = None
        self.fired = False

    def start(self, callback: Callable[[], None]) -> None:
        if self._callback is not None:
            raise RuntimeError("Timer already started")
        self._callback = callback
        self.deadline = self._scheduler.now() + self._delay_seconds
        self._scheduler._register(self)

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def armed(self) -> bool:
        return self._callback is not None and not self.fired and not self._cancelled

    def run(self) -> None:
        """Invoke the callback now, even if the timer was cancelled."""
        if self._callback is None:
            raise RuntimeError("Timer was never started")
        self.fired = True
        self._callback()


class ManualScheduler(SchedulerPort):
    """
    Virtual clock for tests and local runs.
    Nothing fires until advance() moves the clock past a timer's deadline.
    """

    def __init__(self, start: float = 0.0) -> None:
        self._now = start
        self._timers: list[tuple[float, int, ManualTimer]] = []
        self._sequence = itertools.count()
        self._logger = logging.getLogger(__name__)

    def now(self) -> float:
        return self._now

    def create_timer(self, delay_seconds: float) -> ManualTimer:
        return ManualTimer(self, delay_seconds)

    def pending_timers(self) -> list[ManualTimer]:
        return [timer for _, _, timer in sorted(self._timers) if timer.armed]

    def advance(self, seconds: float) -> int:
        """Move the clock forward and fire due timers in deadline order. Returns how many fired."""
        if seconds < 0:
            raise ValueError("Cannot move the clock backwards")
        target = self._now + seconds
        fired = 0
        while True:
            due = [entry for entry in sorted(self._timers) if entry[0] <= target]
            if not due:
                break
            entry = due[0]
            self._timers.remove(entry)
            deadline, _, timer = entry
            self._now = max(self._now, deadline)
            if timer.cancelled or timer.fired:
                self._logger.debug(
                    "Skipping timer", extra={"reason": "cancelled" if timer.cancelled else "already fired"}
                )
                continue
            timer.run()
            fired += 1
        self._now = target
        return fired

    def _register(self, timer: ManualTimer) -> None:
        self._timers.append((timer.deadline, next(self._sequence), timer))
