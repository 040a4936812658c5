"""ORM models. Importing this package registers every table on Base.metadata."""

from podium.infrastructure.persistence.models.attendee import Attendee
from podium.infrastructure.persistence.models.event import Event
from podium.infrastructure.persistence.models.presentation import Presentation
from podium.infrastructure.persistence.models.vote import Vote

__all__ = ["Attendee", "Event", "Presentation", "Vote"]
