"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from podium.infrastructure or podium.api.
"""

from podium.application.interfaces.repositories import (
    IAttendanceRepository,
    IEventRepository,
    IPresentationRepository,
    IVoteRepository,
)
from podium.application.interfaces.services import Clock, INotificationSink

__all__ = [
    "Clock",
    "IAttendanceRepository",
    "IEventRepository",
    "INotificationSink",
    "IPresentationRepository",
    "IVoteRepository",
]
