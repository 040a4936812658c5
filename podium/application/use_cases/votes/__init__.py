"""Vote use cases."""

from podium.application.use_cases.votes.vote_ledger import VoteLedger

__all__ = ["VoteLedger"]
