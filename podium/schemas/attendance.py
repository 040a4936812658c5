"""Attendance API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class AttendanceResponse(BaseModel):
    """One attendance row."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    event_id: str
    user_id: str
    created_at: datetime


class AttendanceStatusResponse(BaseModel):
    """Response for GET /events/{event_id}/attendance."""

    model_config = ConfigDict(from_attributes=True)

    event_id: str
    is_attending: bool = Field(..., description="False for anonymous callers")
    attendee_count: int


class UnregisterResponse(BaseModel):
    """Response for DELETE /events/{event_id}/attendance."""

    id: str = Field(..., description="Removed attendance id")
