"""Presentation API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from podium.domain.enums import PresentationStatus, VoteChoice
from podium.schemas.vote import VoteTallyResponse


class PresentationCreateRequest(BaseModel):
    """Request body for submitting a presentation. Blank fields are rejected with 400."""

    title: str = Field(..., max_length=500)
    description: str
    speaker_name: str = Field(..., max_length=255)
    speaker_bio: str | None = None
    duration: int = Field(..., description="Minutes; must be positive")
    target_audience: str = Field(..., max_length=255)


class PresentationUpdateRequest(BaseModel):
    """Request body for editing a pending presentation (partial)."""

    title: str | None = Field(default=None, max_length=500)
    description: str | None = None
    speaker_name: str | None = Field(default=None, max_length=255)
    speaker_bio: str | None = None
    duration: int | None = None
    target_audience: str | None = Field(default=None, max_length=255)


class RecordingUrlRequest(BaseModel):
    """Request body for PUT /presentations/{id}/recording-url. Null clears the link."""

    recording_url: str | None = Field(default=None, max_length=2048)


class PresentationResponse(BaseModel):
    """Presentation response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    event_id: str
    submitted_by: str
    title: str
    description: str
    speaker_name: str
    speaker_bio: str | None = None
    duration: int
    target_audience: str
    status: PresentationStatus
    admin_approved: bool
    admin_approved_by: str | None = None
    recording_url: str | None = None
    created_at: datetime
    updated_at: datetime


class PresentationDetailResponse(BaseModel):
    """Response for GET /presentations/{id}: presentation, tally and quorum."""

    model_config = ConfigDict(from_attributes=True)

    presentation: PresentationResponse
    tally: VoteTallyResponse
    attendee_count: int
    min_votes_required: int


class PresentationListItem(BaseModel):
    """Item of GET /events/{event_id}/presentations."""

    model_config = ConfigDict(from_attributes=True)

    presentation: PresentationResponse
    tally: VoteTallyResponse
    user_vote: VoteChoice | None = None
