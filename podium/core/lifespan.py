"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py; no business
logic here, only wiring of infrastructure (notification dispatcher,
periodic sweeps, DB engine dispose).
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from podium.core.config import get_settings
from podium.infrastructure.scheduling import (
    run_event_status_sweep,
    run_periodically,
    run_voting_deadline_sweep,
)
from podium.infrastructure.services import (
    LogOnlyNotificationSink,
    NotificationDispatcher,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: notification dispatcher, then the voting deadline and event
    status sweep loops (when enabled). Shutdown: cancel the loops, dispose
    the SQL engine.
    """
    settings = get_settings()

    # ---- Startup ----
    dispatcher = NotificationDispatcher(LogOnlyNotificationSink())
    app.state.notification_dispatcher = dispatcher

    tasks: list[asyncio.Task[None]] = []
    if settings.voting_sweep_enabled:
        tasks.append(
            asyncio.create_task(
                run_periodically(
                    "voting deadline sweep",
                    settings.sweep_interval_seconds,
                    lambda: run_voting_deadline_sweep(dispatcher),
                )
            )
        )
    if settings.event_status_sweep_enabled:
        tasks.append(
            asyncio.create_task(
                run_periodically(
                    "event status sweep",
                    settings.sweep_interval_seconds,
                    run_event_status_sweep,
                )
            )
        )
    app.state.sweep_tasks = tasks

    yield

    # ---- Shutdown ----
    for task in tasks:
        task.cancel()
    for task in tasks:
        try:
            await task
        except asyncio.CancelledError:
            pass
    if tasks:
        logger.info("Sweep tasks stopped")

    from podium.infrastructure.persistence import database

    if database.engine is not None:
        await database.dispose_engine()
        logger.info("Database engine disposed")
