"""Presentation use cases: lifecycle mutations and read models."""

from podium.application.use_cases.presentations.presentation_lifecycle import (
    PresentationLifecycle,
)
from podium.application.use_cases.presentations.presentation_queries import (
    PresentationQueryService,
)

__all__ = ["PresentationLifecycle", "PresentationQueryService"]
