"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from podium.api.v1.dependencies (no manual repo/use case construction).
"""

from fastapi import APIRouter

from podium.api.v1.endpoints import attendance, events, health, presentations, sweeps

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(events.router, prefix="/events", tags=["events"])
api_router.include_router(attendance.router, prefix="/attendance", tags=["attendance"])
api_router.include_router(
    presentations.router, prefix="/presentations", tags=["presentations"]
)
api_router.include_router(sweeps.router, prefix="/sweeps", tags=["sweeps"])
