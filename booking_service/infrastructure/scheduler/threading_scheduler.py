from __future__ import annotations

import logging
import threading
import time
from typing import Callable

from booking_service.application.ports.scheduler import SchedulerPort, TimerHandle


class ThreadingTimer(TimerHandle):
    def __init__(self, delay_seconds: float) -> None:
        self._delay_seconds = delay_seconds
        self._timer: threading.Timer | None = None
        self._cancelled = False
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def start(self, callback: Callable[[], None]) -> None:
        with self._lock:
            if self._timer is not None:
                raise RuntimeError("Timer already started")
            if self._cancelled:
                return
            self._timer = threading.Timer(self._delay_seconds, self._run, args=(callback,))
            self._timer.daemon = True
            self._timer.start()

    def cancel(self) -> None:
        with self._lock:
            self._cancelled = True
            if self._timer is not None:
                self._timer.cancel()

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def _run(self, callback: Callable[[], None]) -> None:
        try:
            callback()
        except Exception as e:
            self._logger.exception("Scheduled callback failed", extra={"reason": str(e)})


class ThreadingScheduler(SchedulerPort):
    """Runs each timer on its own daemon thread against the wall clock."""

    def now(self) -> float:
        return time.time()

    def create_timer(self, delay_seconds: float) -> TimerHandle:
        return ThreadingTimer(delay_seconds)
