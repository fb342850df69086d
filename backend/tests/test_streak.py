from datetime import date, datetime, timedelta, timezone

import pytest

from gymtracker.analytics.reports import InvalidWeeklyGoal, build_streak_report, validate_weekly_goal
from gymtracker.analytics.streak import calendar_heatmap, intensity_for, week_buckets

UTC = timezone.utc
THIS_MONDAY = datetime(2025, 6, 16, 7, 0, tzinfo=UTC)


def week_of(make_workout, weeks_ago, count, prefix="w"):
    """`count` finished workouts on consecutive days of the week `weeks_ago` back."""
    monday = THIS_MONDAY - timedelta(weeks=weeks_ago)
    return [
        make_workout(f"{prefix}{weeks_ago}-{i}", monday + timedelta(days=i), minutes=50)
        for i in range(count)
    ]


def test_four_weeks_meeting_goal(now, make_workout):
    workouts = []
    for weeks_ago in (3, 2, 1, 0):
        workouts += week_of(make_workout, weeks_ago, 3)
    report = build_streak_report(workouts, 3, now, UTC)

    assert report.current_streak == 4
    assert report.longest_streak == 4
    assert report.current_week_progress == 3
    assert [w.week_start_date for w in report.weekly_history] == [
        "2025-06-16",
        "2025-06-09",
        "2025-06-02",
        "2025-05-26",
    ]


def test_latest_week_short_of_goal(now, make_workout):
    workouts = week_of(make_workout, 0, 2)
    for weeks_ago in (1, 2, 3):
        workouts += week_of(make_workout, weeks_ago, 3)
    report = build_streak_report(workouts, 3, now, UTC)

    assert report.current_streak == 0
    assert report.longest_streak == 3
    assert report.current_week_progress == 2
    assert report.weekly_history[0].met_goal is False


def test_longest_streak_resets_on_missed_week(now, make_workout):
    workouts = []
    for weeks_ago, count in [(6, 3), (5, 3), (4, 1), (3, 3), (2, 3), (1, 3), (0, 1)]:
        workouts += week_of(make_workout, weeks_ago, count)
    report = build_streak_report(workouts, 3, now, UTC)
    assert report.current_streak == 0
    assert report.longest_streak == 3


def test_weeks_without_workouts_do_not_break_streak(now, make_workout):
    # Nothing logged last week: it is simply absent from the buckets
    workouts = week_of(make_workout, 0, 2) + week_of(make_workout, 2, 2)
    report = build_streak_report(workouts, 2, now, UTC)
    assert report.current_streak == 2
    assert report.longest_streak == 2
    assert len(report.weekly_history) == 2


def test_no_workout_this_week(now, make_workout):
    workouts = week_of(make_workout, 1, 4)
    report = build_streak_report(workouts, 3, now, UTC)
    assert report.current_week_progress == 0
    assert report.current_streak == 1


def test_sunday_counts_toward_previous_monday(make_workout):
    sunday = make_workout("sun", datetime(2025, 6, 15, 9, tzinfo=UTC))
    monday = make_workout("mon", datetime(2025, 6, 16, 9, tzinfo=UTC))
    buckets = week_buckets([sunday, monday], 1, UTC)
    assert [(b.week_start_date, b.workout_count) for b in buckets] == [
        ("2025-06-16", 1),
        ("2025-06-09", 1),
    ]


def test_week_keys_follow_timezone(make_workout):
    late_sunday_utc = make_workout("w", datetime(2025, 6, 15, 23, 30, tzinfo=UTC))
    plus_two = timezone(timedelta(hours=2))
    assert week_buckets([late_sunday_utc], 1, UTC)[0].week_start_date == "2025-06-09"
    assert week_buckets([late_sunday_utc], 1, plus_two)[0].week_start_date == "2025-06-16"


def test_in_progress_workouts_are_ignored(now, make_workout):
    workouts = week_of(make_workout, 0, 2) + [
        make_workout("open", now - timedelta(hours=1), minutes=None)
    ]
    report = build_streak_report(workouts, 2, now, UTC)
    assert report.current_week_progress == 2
    assert sum(d.workout_count for d in report.calendar_data) == 2


def test_weekly_history_keeps_latest_twelve(now, make_workout):
    workouts = []
    for weeks_ago in range(15):
        workouts += week_of(make_workout, weeks_ago, 1)
    report = build_streak_report(workouts, 1, now, UTC)
    assert len(report.weekly_history) == 12
    assert report.weekly_history[0].week_start_date == "2025-06-16"
    assert report.current_streak == 15
    assert report.longest_streak == 15


def test_streak_ignores_input_order(now, make_workout):
    workouts = []
    for weeks_ago, count in [(3, 3), (2, 1), (1, 3), (0, 3)]:
        workouts += week_of(make_workout, weeks_ago, count)
    forward = build_streak_report(workouts, 3, now, UTC)
    backward = build_streak_report(list(reversed(workouts)), 3, now, UTC)
    assert forward == backward
    assert forward.longest_streak >= forward.current_streak


def test_empty_history_still_has_calendar(now, make_workout):
    for workouts in ([], [make_workout("open", now, minutes=None)]):
        report = build_streak_report(workouts, 4, now, UTC)
        assert report.current_streak == 0
        assert report.longest_streak == 0
        assert report.current_week_progress == 0
        assert report.weekly_goal == 4
        assert report.weekly_history == []
        assert len(report.calendar_data) == 84
        assert all(d.workout_count == 0 and d.intensity == 0 for d in report.calendar_data)


def test_calendar_grid_ends_today(make_workout):
    today = date(2025, 6, 18)
    days = calendar_heatmap([], today, UTC)
    assert len(days) == 84
    assert days[0].date == "2025-03-27"
    assert days[-1].date == "2025-06-18"
    parsed = [date.fromisoformat(d.date) for d in days]
    assert all(b - a == timedelta(days=1) for a, b in zip(parsed, parsed[1:]))


def test_calendar_counts_and_intensity(make_workout):
    today = date(2025, 6, 18)
    busy_day = datetime(2025, 6, 10, 6, tzinfo=UTC)
    workouts = [make_workout(f"b{i}", busy_day + timedelta(hours=i)) for i in range(5)]
    workouts += [
        make_workout("t1", datetime(2025, 6, 18, 6, tzinfo=UTC)),
        make_workout("t2", datetime(2025, 6, 18, 18, tzinfo=UTC)),
        make_workout("old", datetime(2025, 1, 2, 6, tzinfo=UTC)),  # outside the grid
    ]
    days = {d.date: d for d in calendar_heatmap(workouts, today, UTC)}
    assert (days["2025-06-10"].workout_count, days["2025-06-10"].intensity) == (5, 4)
    assert (days["2025-06-18"].workout_count, days["2025-06-18"].intensity) == (2, 2)
    assert days["2025-06-11"].intensity == 0
    assert sum(d.workout_count for d in days.values()) == 7


@pytest.mark.parametrize("count,expected", [(0, 0), (1, 1), (2, 2), (3, 3), (4, 4), (9, 4)])
def test_intensity_table(count, expected):
    assert intensity_for(count) == expected


@pytest.mark.parametrize("value,expected", [(1, 1), (7, 7), ("3", 3), (" 5 ", 5), (4.0, 4)])
def test_valid_weekly_goals(value, expected):
    assert validate_weekly_goal(value) == expected


@pytest.mark.parametrize("value", [0, 8, -1, "0", "8", "abc", "2.5", "", None, True, 2.5, "²", "9" * 5000])
def test_invalid_weekly_goals(value):
    with pytest.raises(InvalidWeeklyGoal) as exc:
        validate_weekly_goal(value)
    assert str(exc.value) == "Weekly goal must be between 1 and 7"
