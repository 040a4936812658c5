"""DTOs for votes (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from podium.domain.enums import VoteChoice


@dataclass(frozen=True)
class VoteResult:
    """One vote row. created_at is set on first cast and kept on flips."""

    id: str
    presentation_id: str
    user_id: str
    vote: VoteChoice
    created_at: datetime
