from datetime import date, datetime, timedelta

import pytest

from worktime import InvalidTimezoneError, split_by_calendar_day
from worktime.schemas import DaySegment

from tests.helpers import HOUR_MS, IST, session, utc


def test_same_day_session_returns_single_segment():
    # 10:00 -> 14:00 IST
    result = split_by_calendar_day(session(utc(2026, 2, 14, 4, 30), utc(2026, 2, 14, 8, 30)), IST)
    assert result == [DaySegment(date="2026-02-14", duration_ms=4 * HOUR_MS)]


def test_overnight_session_splits_at_local_midnight():
    # 23:00 IST Feb 14 -> 02:00 IST Feb 15
    result = split_by_calendar_day(session(utc(2026, 2, 14, 17, 30), utc(2026, 2, 14, 20, 30)), IST)
    assert result == [
        DaySegment(date="2026-02-14", duration_ms=1 * HOUR_MS),
        DaySegment(date="2026-02-15", duration_ms=2 * HOUR_MS),
    ]


def test_multi_day_session_splits_at_each_midnight():
    # 22:00 IST Feb 13 -> 03:00 IST Feb 16
    result = split_by_calendar_day(session(utc(2026, 2, 13, 16, 30), utc(2026, 2, 15, 21, 30)), IST)
    assert [s.date for s in result] == ["2026-02-13", "2026-02-14", "2026-02-15", "2026-02-16"]
    assert [s.duration_ms for s in result] == [2 * HOUR_MS, 24 * HOUR_MS, 24 * HOUR_MS, 3 * HOUR_MS]


def test_same_instants_split_differently_per_timezone():
    work = session(utc(2026, 2, 14, 17, 30), utc(2026, 2, 14, 20, 30))
    assert split_by_calendar_day(work, "UTC") == [DaySegment(date="2026-02-14", duration_ms=3 * HOUR_MS)]


@pytest.mark.parametrize(
    "start, end",
    [
        (utc(2026, 2, 14, 10), utc(2026, 2, 14, 10)),
        (utc(2026, 2, 14, 10), utc(2026, 2, 14, 9)),
    ],
)
def test_empty_or_inverted_session_yields_nothing(start, end):
    assert split_by_calendar_day(session(start, end), IST) == []


def test_open_session_matches_closed_session_ending_now():
    start = utc(2026, 2, 14, 4, 30)
    now = start + timedelta(minutes=90)
    open_result = split_by_calendar_day(session(start), IST, now=now)
    closed_result = split_by_calendar_day(session(start, now), IST)
    assert open_result == closed_result == [DaySegment(date="2026-02-14", duration_ms=90 * 60_000)]


def test_open_session_started_after_now_is_empty():
    assert split_by_calendar_day(session(utc(2026, 2, 14, 12)), IST, now=utc(2026, 2, 14, 11)) == []


def test_spring_forward_day_is_23_hours():
    # noon EST Mar 7 -> noon EDT Mar 9
    result = split_by_calendar_day(
        session(utc(2026, 3, 7, 17), utc(2026, 3, 9, 16)),
        "America/New_York",
    )
    assert [(s.date, s.duration_ms) for s in result] == [
        ("2026-03-07", 12 * HOUR_MS),
        ("2026-03-08", 23 * HOUR_MS),
        ("2026-03-09", 12 * HOUR_MS),
    ]


def test_fall_back_day_is_25_hours():
    result = split_by_calendar_day(
        session(utc(2026, 10, 31, 16), utc(2026, 11, 2, 17)),
        "America/New_York",
    )
    assert [(s.date, s.duration_ms) for s in result] == [
        ("2026-10-31", 12 * HOUR_MS),
        ("2026-11-01", 25 * HOUR_MS),
        ("2026-11-02", 12 * HOUR_MS),
    ]


def test_naive_datetimes_are_treated_as_utc():
    naive = session(datetime(2026, 2, 14, 17, 30), datetime(2026, 2, 14, 20, 30))
    aware = session(utc(2026, 2, 14, 17, 30), utc(2026, 2, 14, 20, 30))
    assert split_by_calendar_day(naive, IST) == split_by_calendar_day(aware, IST)


def test_segments_preserve_total_duration_with_sub_millisecond_edges():
    start = utc(2026, 2, 14, 17, 30, 0, 700)
    end = utc(2026, 2, 14, 20, 30, 0, 200)
    result = split_by_calendar_day(session(start, end), IST)
    assert sum(s.duration_ms for s in result) == (end - start) // timedelta(milliseconds=1)
    assert result[1].duration_ms == 2 * HOUR_MS


@pytest.mark.parametrize("tz", [IST, "UTC", "America/New_York", "Europe/London", "Australia/Lord_Howe"])
def test_long_session_is_duration_preserving_and_gapless(tz):
    start = utc(2026, 2, 20, 13, 17)
    end = utc(2026, 4, 11, 2, 41)
    result = split_by_calendar_day(session(start, end), tz)

    assert sum(s.duration_ms for s in result) == (end - start) // timedelta(milliseconds=1)
    days = [date.fromisoformat(s.date) for s in result]
    assert all(later - earlier == timedelta(days=1) for earlier, later in zip(days, days[1:]))
    assert all(s.duration_ms > 0 for s in result)


def test_accepts_any_object_with_session_attributes():
    class Row:
        started_at = utc(2026, 2, 14, 17, 30)
        ended_at = utc(2026, 2, 14, 18, 30)

    assert split_by_calendar_day(Row(), IST) == [DaySegment(date="2026-02-14", duration_ms=HOUR_MS)]


def test_invalid_timezone_fails_fast():
    with pytest.raises(InvalidTimezoneError):
        split_by_calendar_day(session(utc(2026, 2, 14, 1), utc(2026, 2, 14, 2)), "Mars/Olympus_Mons")
