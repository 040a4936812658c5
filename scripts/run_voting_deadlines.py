"""Run the voting deadline sweep once (and optionally the event status sweep).

Usage:
    python -m scripts.run_voting_deadlines [--with-event-statuses]
Schedule every 5 minutes from cron when VOTING_SWEEP_ENABLED=false disables
the in-process loop. Requires Postgres (DATABASE_URL) and SECRET_KEY.
"""

import asyncio
import sys

from podium.infrastructure.persistence import database
from podium.infrastructure.scheduling import (
    run_event_status_sweep,
    run_voting_deadline_sweep,
)
from podium.infrastructure.services import (
    LogOnlyNotificationSink,
    NotificationDispatcher,
)
from podium.shared.telemetry.logging import setup_logging


async def main() -> None:
    """Force-resolve overdue presentations; print a summary line."""
    setup_logging()
    dispatcher = NotificationDispatcher(LogOnlyNotificationSink())
    try:
        if "--with-event-statuses" in sys.argv[1:]:
            statuses = await run_event_status_sweep()
            print(f"Event statuses updated: {statuses.updated_count}")
        result = await run_voting_deadline_sweep(dispatcher)
    finally:
        await database.dispose_engine()
    print(
        f"Done. Events: {result.events_processed}, processed: {result.processed_count} "
        f"(approved {result.approved_count}, rejected {result.rejected_count}), "
        f"errors: {result.error_count}"
    )
    if result.error_count:
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
