from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from functools import partial

from booking_service.application.exceptions import ConfigurationError, UnknownStateError
from booking_service.application.ports.booking_ids import BookingIdGeneratorPort
from booking_service.application.ports.scheduler import SchedulerPort
from booking_service.domain.entities.booking_state import (
    BookedState,
    CancelledState,
    OpenState,
    PendingState,
    WorkflowState,
)

NOTHING_BOOKED = "You haven't booked anything yet"
PLEASE_WAIT = "Please wait for booking to load before performing an action!"
ALREADY_BOOKED = "You've already booked this event!"
EVENT_CANCELLED = "Event cancelled"
ALREADY_CANCELLED = "You've already cancelled this!"


def booked_message(booking_id: str) -> str:
    return f"Event booked with id: {booking_id}"


def rebooked_message(booking_id: str) -> str:
    return f"Rebooked using old ID: {booking_id}"


@dataclass(frozen=True)
class Transition:
    message: str
    next_state: WorkflowState | None = None


@dataclass(frozen=True)
class WorkflowSnapshot:
    status: str
    booking_id: str | None
    pending_since: float | None


@dataclass(frozen=True)
class ActionOutcome:
    message: str
    snapshot: WorkflowSnapshot


class BookingWorkflow:
    def __init__(
        self,
        scheduler: SchedulerPort,
        id_generator: BookingIdGeneratorPort,
        delay_seconds: float = 10.0,
    ) -> None:
        if delay_seconds < 0:
            raise ConfigurationError(f"delay_seconds must be >= 0, got {delay_seconds}")
        self._scheduler = scheduler
        self._id_generator = id_generator
        self._delay_seconds = delay_seconds
        self._lock = threading.RLock()
        self._state: WorkflowState = OpenState()
        self._logger = logging.getLogger(__name__)

    @property
    def state(self) -> WorkflowState:
        with self._lock:
            return self._state

    @property
    def delay_seconds(self) -> float:
        return self._delay_seconds

    def request_action(self) -> str:
        with self._lock:
            return self._apply(self._book(self._state))

    def request_cancel(self) -> str:
        with self._lock:
            return self._apply(self._cancel(self._state))

    def request_action_with_snapshot(self) -> ActionOutcome:
        """Book and report the state left by that call, read under the same lock."""
        with self._lock:
            message = self._apply(self._book(self._state))
            return ActionOutcome(message=message, snapshot=self.snapshot())

    def request_cancel_with_snapshot(self) -> ActionOutcome:
        with self._lock:
            message = self._apply(self._cancel(self._state))
            return ActionOutcome(message=message, snapshot=self.snapshot())

    def set_state(self, state: WorkflowState) -> None:
        """
        Install a new current state.
        Leaving a pending state cancels its timer; entering one arms the new timer.
        """
        with self._lock:
            previous = self._state
            if previous is state:
                return
            self._state = state
            if isinstance(previous, PendingState):
                previous.timer.cancel()
            if isinstance(state, PendingState):
                state.timer.start(partial(self._complete_pending, state))
            self._logger.info(
                "Booking state changed",
                extra={
                    "from_status": previous.status,
                    "to_status": state.status,
                    "booking_id": getattr(state, "booking_id", None),
                },
            )

    def snapshot(self) -> WorkflowSnapshot:
        with self._lock:
            state = self._state
        return WorkflowSnapshot(
            status=state.status,
            booking_id=getattr(state, "booking_id", None),
            pending_since=state.pending_since if isinstance(state, PendingState) else None,
        )

    def close(self) -> None:
        """Cancel an outstanding pending timer. The current state is left as is."""
        with self._lock:
            if isinstance(self._state, PendingState):
                self._state.timer.cancel()

    def _apply(self, transition: Transition) -> str:
        if transition.next_state is None:
            self._logger.debug(
                "Booking action rejected",
                extra={"status": self._state.status, "reason": transition.message},
            )
        else:
            self.set_state(transition.next_state)
        return transition.message

    def _book(self, state: WorkflowState) -> Transition:
        if isinstance(state, OpenState):
            booking_id = self._id_generator.new_id()
            return Transition(booked_message(booking_id), self._enter_pending(booking_id))

        if isinstance(state, PendingState):
            return Transition(PLEASE_WAIT)

        if isinstance(state, BookedState):
            return Transition(ALREADY_BOOKED)

        if isinstance(state, CancelledState):
            return Transition(
                rebooked_message(state.booking_id),
                self._enter_pending(state.booking_id),
            )

        raise UnknownStateError(f"Cannot book from state {state!r}")

    def _cancel(self, state: WorkflowState) -> Transition:
        if isinstance(state, OpenState):
            return Transition(NOTHING_BOOKED)

        if isinstance(state, PendingState):
            return Transition(PLEASE_WAIT)

        if isinstance(state, BookedState):
            return Transition(EVENT_CANCELLED, CancelledState(booking_id=state.booking_id))

        if isinstance(state, CancelledState):
            return Transition(ALREADY_CANCELLED)

        raise UnknownStateError(f"Cannot cancel from state {state!r}")

    def _enter_pending(self, booking_id: str) -> PendingState:
        # The timer is armed by set_state once this state is installed.
        return PendingState(
            booking_id=booking_id,
            pending_since=self._scheduler.now(),
            timer=self._scheduler.create_timer(self._delay_seconds),
        )

    def _complete_pending(self, pending: PendingState) -> None:
        with self._lock:
            if self._state is not pending:
                self._logger.debug(
                    "Dropping stale booking completion",
                    extra={"booking_id": pending.booking_id, "status": self._state.status},
                )
                return
            self._logger.info(
                "Booking confirmed",
                extra={"booking_id": pending.booking_id, "delay_seconds": self._delay_seconds},
            )
            self.set_state(BookedState(booking_id=pending.booking_id))
