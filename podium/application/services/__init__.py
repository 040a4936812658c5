"""Application services shared across use cases."""

from podium.application.services.authorization import (
    ensure_admin,
    ensure_moderator,
    ensure_owner,
)
from podium.application.services.presentation_resolution import (
    PresentationResolver,
    ResolutionResult,
    presentation_result_notification,
)

__all__ = [
    "PresentationResolver",
    "ResolutionResult",
    "ensure_admin",
    "ensure_moderator",
    "ensure_owner",
    "presentation_result_notification",
]
