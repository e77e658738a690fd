from pydantic import BaseModel


class WorkflowStateSchema(BaseModel):
    status: str
    booking_id: str | None = None
    pending_since: float | None = None


class ActionResponseSchema(BaseModel):
    message: str
    state: WorkflowStateSchema
