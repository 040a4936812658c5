"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)

# Single source of truth for rate limit strings and decorators.
WRITE_ENDPOINT_LIMIT = "120/minute"
VOTE_LIMIT = "60/minute"
SWEEP_TRIGGER_LIMIT = "10/minute"

limit_writes = limiter.limit(WRITE_ENDPOINT_LIMIT)
limit_votes = limiter.limit(VOTE_LIMIT)
limit_sweeps = limiter.limit(SWEEP_TRIGGER_LIMIT)
