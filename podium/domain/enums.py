"""Domain enumerations for Podium.

Enums represent fixed sets of domain values (statuses, roles, vote choices).
"""

from enum import Enum


class EventStatus(str, Enum):
    """Event lifecycle status.

    Only ``upcoming`` events accept submissions and are swept for voting
    deadlines. ``cancelled`` is a manual terminal override.
    """

    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    PAST = "past"
    CANCELLED = "cancelled"


class PresentationStatus(str, Enum):
    """Presentation lifecycle status. ``pending`` is the only non-terminal state."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class VoteChoice(str, Enum):
    """Attendee vote on a presentation."""

    APPROVE = "approve"
    REJECT = "reject"


class UserRole(str, Enum):
    """Platform role carried by the authenticated principal."""

    MEMBER = "member"
    MODERATOR = "moderator"
    ADMIN = "admin"


class NotificationKind(str, Enum):
    """Outbound notification signals emitted on lifecycle transitions."""

    NEW_ATTENDEE = "new_attendee"
    PRESENTATION_SUBMITTED = "presentation_submitted"
    PRESENTATION_RESULT = "presentation_result"
