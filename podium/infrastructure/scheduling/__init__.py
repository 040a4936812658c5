"""Scheduling: periodic sweep loops and their session wiring."""

from podium.infrastructure.scheduling.sweeps import (
    build_event_status_sweep,
    build_voting_deadline_sweep,
    run_event_status_sweep,
    run_periodically,
    run_voting_deadline_sweep,
)

__all__ = [
    "build_event_status_sweep",
    "build_voting_deadline_sweep",
    "run_event_status_sweep",
    "run_periodically",
    "run_voting_deadline_sweep",
]
