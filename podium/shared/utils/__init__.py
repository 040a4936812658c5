"""Shared utilities: UTC time helpers."""

from podium.shared.utils.datetime import (
    DEFAULT_VOTING_WINDOW,
    default_voting_deadline,
    ensure_utc,
    utc_now,
)

__all__ = [
    "DEFAULT_VOTING_WINDOW",
    "default_voting_deadline",
    "ensure_utc",
    "utc_now",
]
