"""Domain value objects for Podium.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

import re
from dataclasses import dataclass
from typing import ClassVar

_YOUTUBE_RE = re.compile(
    r"^(https?://)?(www\.)?(youtube\.com/(watch\?v=|embed/)|youtu\.be/)"
)
_VIMEO_RE = re.compile(r"^(https?://)?(www\.)?vimeo\.com/")


def _require_text(value: str, field_name: str) -> None:
    if not value or not value.strip():
        raise ValueError(f"{field_name} must be a non-empty string")


@dataclass(frozen=True)
class RecordingUrl:
    """Value object for a presentation recording link.

    Only YouTube (watch, embed, youtu.be) and Vimeo links are accepted.
    Scheme and leading 'www.' are optional.
    """

    value: str

    def __post_init__(self) -> None:
        """Validate the URL against the supported video hosts.

        Raises:
            ValueError: If empty or not a YouTube/Vimeo URL.
        """
        if not self.value:
            raise ValueError("Recording URL must be a non-empty string")
        if not (_YOUTUBE_RE.match(self.value) or _VIMEO_RE.match(self.value)):
            raise ValueError(
                "Invalid video URL. Please provide a YouTube or Vimeo URL."
            )

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Return whether value would construct without error."""
        try:
            cls(value)
        except ValueError:
            return False
        return True


@dataclass(frozen=True)
class TalkDetails:
    """Value object for the talk fields of a presentation submission.

    Title, description, speaker name and target audience are required;
    duration is in minutes and must be positive.
    """

    title: str
    description: str
    speaker_name: str
    duration: int
    target_audience: str
    speaker_bio: str | None = None

    REQUIRED_TEXT_FIELDS: ClassVar[tuple[str, ...]] = (
        "title",
        "description",
        "speaker_name",
        "target_audience",
    )

    def __post_init__(self) -> None:
        """Validate required text fields and duration.

        Raises:
            ValueError: If a required field is blank or duration is not positive.
        """
        for name in self.REQUIRED_TEXT_FIELDS:
            _require_text(getattr(self, name), name)
        if self.duration <= 0:
            raise ValueError("duration must be a positive number of minutes")


@dataclass(frozen=True)
class VoteTally:
    """Aggregated votes for one presentation."""

    approve: int = 0
    reject: int = 0

    def __post_init__(self) -> None:
        if self.approve < 0 or self.reject < 0:
            raise ValueError("Vote counts cannot be negative")

    @property
    def total(self) -> int:
        """Total number of votes cast."""
        return self.approve + self.reject

    @property
    def approval_rate(self) -> float:
        """Share of approve votes; 0 when no votes were cast."""
        return self.approve / self.total if self.total > 0 else 0.0
