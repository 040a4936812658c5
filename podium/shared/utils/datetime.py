"""UTC time helpers. Every timestamp Podium compares is timezone-aware UTC."""

from datetime import UTC, datetime, timedelta

# Voting closes this long before an event starts unless the organizer sets a deadline.
DEFAULT_VOTING_WINDOW = timedelta(hours=24)


def utc_now() -> datetime:
    """Default clock of the use cases and sweeps."""
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Normalize a value read from the database to aware UTC.

    Naive values are taken to be UTC already; None passes through. Deadline
    checks compare these against utc_now(), so a naive value must never
    reach them.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def default_voting_deadline(starts_at: datetime) -> datetime:
    """Deadline given to a new event that has none: 24 hours before it starts."""
    return starts_at - DEFAULT_VOTING_WINDOW
