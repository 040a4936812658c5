"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories, notification sink).
"""

from podium.application.interfaces import (
    Clock,
    IAttendanceRepository,
    IEventRepository,
    INotificationSink,
    IPresentationRepository,
    IVoteRepository,
)
from podium.application.services import PresentationResolver
from podium.application.use_cases import (
    AttendanceRegistry,
    PresentationLifecycle,
    PresentationQueryService,
    RunEventStatusSweepUseCase,
    RunVotingDeadlineSweepUseCase,
    VoteLedger,
)

__all__ = [
    "AttendanceRegistry",
    "Clock",
    "IAttendanceRepository",
    "IEventRepository",
    "INotificationSink",
    "IPresentationRepository",
    "IVoteRepository",
    "PresentationLifecycle",
    "PresentationQueryService",
    "PresentationResolver",
    "RunEventStatusSweepUseCase",
    "RunVotingDeadlineSweepUseCase",
    "VoteLedger",
]
