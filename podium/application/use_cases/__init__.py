"""Application use cases."""

from podium.application.use_cases.attendance import AttendanceRegistry
from podium.application.use_cases.presentations import (
    PresentationLifecycle,
    PresentationQueryService,
)
from podium.application.use_cases.sweeps import (
    RunEventStatusSweepUseCase,
    RunVotingDeadlineSweepUseCase,
)
from podium.application.use_cases.votes import VoteLedger

__all__ = [
    "AttendanceRegistry",
    "PresentationLifecycle",
    "PresentationQueryService",
    "RunEventStatusSweepUseCase",
    "RunVotingDeadlineSweepUseCase",
    "VoteLedger",
]
