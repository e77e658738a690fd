from __future__ import annotations

import itertools
import threading
import uuid

from booking_service.application.ports.booking_ids import BookingIdGeneratorPort


class UuidBookingIdGenerator(BookingIdGeneratorPort):
    def new_id(self) -> str:
        return uuid.uuid4().hex


class SequentialBookingIdGenerator(BookingIdGeneratorPort):
    def __init__(self, prefix: str = "booking_", start: int = 1) -> None:
        self._prefix = prefix
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def new_id(self) -> str:
        with self._lock:
            return f"{self._prefix}{next(self._counter)}"
