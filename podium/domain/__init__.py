"""Domain layer: value objects, enums, resolution policy, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from podium.domain.enums import (
    EventStatus,
    NotificationKind,
    PresentationStatus,
    UserRole,
    VoteChoice,
)
from podium.domain.exceptions import (
    AlreadyRegisteredException,
    AuthenticationException,
    AuthorizationException,
    InvalidStateException,
    NotEligibleException,
    NotRegisteredException,
    PodiumException,
    PresentationNotVotableException,
    ResourceNotFoundException,
    ValidationException,
    VotingDeadlinePassedException,
)
from podium.domain.resolution import (
    ResolutionOutcome,
    evaluate_resolution,
    min_votes_required,
)
from podium.domain.value_objects import RecordingUrl, TalkDetails, VoteTally

__all__ = [
    # Enums
    "EventStatus",
    "NotificationKind",
    "PresentationStatus",
    "UserRole",
    "VoteChoice",
    # Exceptions
    "AlreadyRegisteredException",
    "AuthenticationException",
    "AuthorizationException",
    "InvalidStateException",
    "NotEligibleException",
    "NotRegisteredException",
    "PodiumException",
    "PresentationNotVotableException",
    "ResourceNotFoundException",
    "ValidationException",
    "VotingDeadlinePassedException",
    # Resolution
    "ResolutionOutcome",
    "evaluate_resolution",
    "min_votes_required",
    # Value objects
    "RecordingUrl",
    "TalkDetails",
    "VoteTally",
]
