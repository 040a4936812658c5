"""Domain value objects and shared value types."""

from podium.domain.value_objects.core import RecordingUrl, TalkDetails, VoteTally

__all__ = [
    "RecordingUrl",
    "TalkDetails",
    "VoteTally",
]
