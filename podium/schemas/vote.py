"""Vote API schemas."""

from pydantic import BaseModel, ConfigDict, Field

from podium.domain.enums import VoteChoice


class VoteCastRequest(BaseModel):
    """Request body for PUT /presentations/{id}/vote."""

    vote: VoteChoice


class VoteTallyResponse(BaseModel):
    """Approve/reject/total counts."""

    model_config = ConfigDict(from_attributes=True)

    approve: int
    reject: int
    total: int


class VoteSummaryResponse(BaseModel):
    """Response for GET /presentations/{id}/votes: tally plus the caller's vote."""

    presentation_id: str
    tally: VoteTallyResponse
    user_vote: VoteChoice | None = Field(
        default=None, description="None for anonymous callers or when not voted"
    )
