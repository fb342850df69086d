from datetime import date, datetime, timedelta, timezone

from gymtracker.core.time_utils import (
    date_key,
    ensure_utc,
    minutes_between,
    monday_of,
    resolve_timezone,
    round_half_up,
    week_of_year_label,
)

UTC = timezone.utc


def test_monday_of_handles_sunday():
    assert monday_of(date(2025, 6, 16)) == date(2025, 6, 16)  # Monday
    assert monday_of(date(2025, 6, 18)) == date(2025, 6, 16)  # Wednesday
    # Sunday belongs to the Monday six days earlier
    assert monday_of(date(2025, 6, 22)) == date(2025, 6, 16)


def test_week_label_counts_from_jan_first():
    # 2025-01-01 is a Wednesday
    assert week_of_year_label(datetime(2025, 1, 1, 10, tzinfo=UTC), UTC) == "Week 1"
    assert week_of_year_label(datetime(2025, 1, 3, 10, tzinfo=UTC), UTC) == "Week 1"
    assert week_of_year_label(datetime(2025, 1, 6, 10, tzinfo=UTC), UTC) == "Week 2"


def test_date_key_uses_given_zone():
    late_utc = datetime(2025, 6, 15, 23, 30, tzinfo=UTC)
    plus_two = timezone(timedelta(hours=2))
    assert date_key(late_utc, UTC) == "2025-06-15"
    assert date_key(late_utc, plus_two) == "2025-06-16"


def test_naive_timestamps_are_utc():
    naive = datetime(2025, 6, 15, 8, 0)
    assert ensure_utc(naive) == datetime(2025, 6, 15, 8, 0, tzinfo=UTC)
    shifted = datetime(2025, 6, 15, 10, 0, tzinfo=timezone(timedelta(hours=2)))
    assert ensure_utc(shifted) == datetime(2025, 6, 15, 8, 0, tzinfo=UTC)


def test_minutes_between():
    start = datetime(2025, 6, 15, 8, 0, tzinfo=UTC)
    assert minutes_between(start, start + timedelta(minutes=45, seconds=30)) == 45.5


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(2.49) == 2
    assert round_half_up(-2.5) == -2


def test_resolve_timezone():
    assert resolve_timezone("local") is None
    assert resolve_timezone(None) is None
    assert resolve_timezone("UTC") is UTC
    assert resolve_timezone("Not/AZone") is None


def test_unknown_timezone_is_logged(caplog):
    with caplog.at_level("WARNING", logger="gymtracker.core.time_utils"):
        assert resolve_timezone("Not/AZone") is None
    assert "Not/AZone" in caplog.text
