"""Sweep trigger API schemas."""

from pydantic import BaseModel, ConfigDict


class VotingDeadlineSweepResponse(BaseModel):
    """Response for POST /sweeps/voting-deadlines."""

    model_config = ConfigDict(from_attributes=True)

    events_processed: int
    processed_count: int
    approved_count: int
    rejected_count: int
    error_count: int


class EventStatusSweepResponse(BaseModel):
    """Response for POST /sweeps/event-statuses."""

    model_config = ConfigDict(from_attributes=True)

    updated_count: int
