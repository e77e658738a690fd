from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from booking_service.api.schemas import ActionResponseSchema, WorkflowStateSchema
from booking_service.application.exceptions import WorkflowError
from booking_service.application.use_cases.booking_workflow import BookingWorkflow, WorkflowSnapshot
from booking_service.wiring.dependencies import get_booking_workflow


router = APIRouter(prefix="/bookings")
logger = logging.getLogger(__name__)


def _state_schema(snapshot: WorkflowSnapshot) -> WorkflowStateSchema:
    return WorkflowStateSchema(
        status=snapshot.status,
        booking_id=snapshot.booking_id,
        pending_since=snapshot.pending_since,
    )


@router.post("/book", response_model=ActionResponseSchema)
def book(workflow: BookingWorkflow = Depends(get_booking_workflow)):
    try:
        outcome = workflow.request_action_with_snapshot()
    except WorkflowError as e:
        logger.exception("Booking request failed", extra={"reason": str(e)})
        raise HTTPException(status_code=500, detail="Booking workflow error")
    return ActionResponseSchema(message=outcome.message, state=_state_schema(outcome.snapshot))


@router.post("/cancel", response_model=ActionResponseSchema)
def cancel(workflow: BookingWorkflow = Depends(get_booking_workflow)):
    try:
        outcome = workflow.request_cancel_with_snapshot()
    except WorkflowError as e:
        logger.exception("Cancel request failed", extra={"reason": str(e)})
        raise HTTPException(status_code=500, detail="Booking workflow error")
    return ActionResponseSchema(message=outcome.message, state=_state_schema(outcome.snapshot))


@router.get("/state", response_model=WorkflowStateSchema)
def state(workflow: BookingWorkflow = Depends(get_booking_workflow)):
    return _state_schema(workflow.snapshot())
