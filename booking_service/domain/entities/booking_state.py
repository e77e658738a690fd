from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from booking_service.application.ports.scheduler import TimerHandle


@dataclass(frozen=True)
class OpenState:
    status: str = field(default="open", init=False)


@dataclass(frozen=True, eq=False)
class PendingState:
    booking_id: str
    pending_since: float
    # Handle of the scheduled pending -> booked completion
    timer: "TimerHandle" = field(repr=False)
    status: str = field(default="pending", init=False)


@dataclass(frozen=True)
class BookedState:
    booking_id: str
    status: str = field(default="booked", init=False)


@dataclass(frozen=True)
class CancelledState:
    booking_id: str  # id of the booking it was cancelled from
    status: str = field(default="cancelled", init=False)


WorkflowState = Union[OpenState, PendingState, BookedState, CancelledState]
