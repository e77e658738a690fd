from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable


class TimerHandle(ABC):
    """One-shot timer created unarmed; armed once with start()."""

    @abstractmethod
    def start(self, callback: Callable[[], None]) -> None:
        raise NotImplementedError

    @abstractmethod
    def cancel(self) -> None:
        """Stop the timer. Cancelling a fired or cancelled timer is a no-op."""
        raise NotImplementedError

    @property
    @abstractmethod
    def cancelled(self) -> bool:
        raise NotImplementedError


class SchedulerPort(ABC):
    @abstractmethod
    def now(self) -> float:
        """Current time in seconds on the scheduler's clock."""
        raise NotImplementedError

    @abstractmethod
    def create_timer(self, delay_seconds: float) -> TimerHandle:
        raise NotImplementedError
