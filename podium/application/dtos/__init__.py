"""Application DTOs (no ORM dependency)."""

from podium.application.dtos.attendance import AttendanceResult, AttendanceStatus
from podium.application.dtos.event import EventResult
from podium.application.dtos.notification import OutboundNotification, Outcome
from podium.application.dtos.presentation import (
    PresentationCreate,
    PresentationDetail,
    PresentationResult,
    PresentationUpdate,
    PresentationWithVotes,
)
from podium.application.dtos.principal import Principal
from podium.application.dtos.sweep import (
    EventStatusSweepResult,
    VotingDeadlineSweepResult,
)
from podium.application.dtos.vote import VoteResult

__all__ = [
    "AttendanceResult",
    "AttendanceStatus",
    "EventResult",
    "EventStatusSweepResult",
    "OutboundNotification",
    "Outcome",
    "PresentationCreate",
    "PresentationDetail",
    "PresentationResult",
    "PresentationUpdate",
    "PresentationWithVotes",
    "Principal",
    "VoteResult",
    "VotingDeadlineSweepResult",
]
