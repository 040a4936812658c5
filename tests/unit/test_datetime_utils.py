"""UTC helpers used at persistence boundaries and for event defaults."""

from datetime import UTC, datetime, timedelta, timezone

from podium.shared.utils.datetime import default_voting_deadline, ensure_utc


def test_naive_value_is_taken_as_utc() -> None:
    naive = datetime(2026, 5, 1, 18, 0)
    assert ensure_utc(naive) == datetime(2026, 5, 1, 18, 0, tzinfo=UTC)


def test_aware_value_is_converted_to_utc() -> None:
    kampala = timezone(timedelta(hours=3))
    converted = ensure_utc(datetime(2026, 5, 1, 21, 0, tzinfo=kampala))
    assert converted == datetime(2026, 5, 1, 18, 0, tzinfo=UTC)
    assert converted.tzinfo is UTC


def test_none_passes_through() -> None:
    assert ensure_utc(None) is None


def test_default_voting_deadline_is_a_day_before_start() -> None:
    starts_at = datetime(2026, 5, 1, 18, 0, tzinfo=UTC)
    assert default_voting_deadline(starts_at) == datetime(2026, 4, 30, 18, 0, tzinfo=UTC)
