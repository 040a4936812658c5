"""Periodic sweeps triggered by the scheduler."""

from podium.application.use_cases.sweeps.run_event_status_sweep import (
    RunEventStatusSweepUseCase,
    expected_event_status,
)
from podium.application.use_cases.sweeps.run_voting_deadline_sweep import (
    RunVotingDeadlineSweepUseCase,
)

__all__ = [
    "RunEventStatusSweepUseCase",
    "RunVotingDeadlineSweepUseCase",
    "expected_event_status",
]
