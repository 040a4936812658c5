"""API dependency injection (composition root).

Provides FastAPI Depends() for the request unit of work, the principal and
application use cases. Routes depend only on these, not on infrastructure.
"""

from podium.api.v1.dependencies.auth import (
    get_current_principal,
    get_current_principal_optional,
    require_cron_secret,
)
from podium.api.v1.dependencies.db import (
    UnitOfWork,
    get_notification_dispatcher,
    get_session,
    get_unit_of_work,
)
from podium.api.v1.dependencies.use_cases import (
    get_attendance_registry,
    get_event_status_sweep,
    get_presentation_lifecycle,
    get_presentation_queries,
    get_vote_ledger,
    get_voting_deadline_sweep,
)

__all__ = [
    "UnitOfWork",
    "get_attendance_registry",
    "get_current_principal",
    "get_current_principal_optional",
    "get_event_status_sweep",
    "get_notification_dispatcher",
    "get_presentation_lifecycle",
    "get_presentation_queries",
    "get_session",
    "get_unit_of_work",
    "get_vote_ledger",
    "get_voting_deadline_sweep",
    "require_cron_secret",
]
