from __future__ import annotations

from datetime import datetime
from typing import Any, Iterable

from .calendar import CalendarDateLike, parse_calendar_date
from .splitting import split_by_calendar_day
from .timezones import TimezoneLike, resolve_timezone, utc_now


def aggregate_for_date(
    sessions: Iterable[Any],
    target: CalendarDateLike,
    tz: TimezoneLike,
    now: datetime | None = None,
) -> int:
    """Milliseconds worked on one local calendar date."""
    return aggregate_for_range(sessions, [target], tz, now=now)


def aggregate_for_range(
    sessions: Iterable[Any],
    dates: Iterable[CalendarDateLike],
    tz: TimezoneLike,
    now: datetime | None = None,
) -> int:
    """Milliseconds worked on any of ``dates``; each segment counts once, on its own date."""
    zone = resolve_timezone(tz)
    now = now or utc_now()
    wanted = {parse_calendar_date(value).isoformat() for value in dates}
    total_ms = 0
    for session in sessions:
        for segment in split_by_calendar_day(session, zone, now=now):
            if segment.date in wanted:
                total_ms += segment.duration_ms
    return total_ms


def daily_totals(
    sessions: Iterable[Any],
    dates: Iterable[CalendarDateLike],
    tz: TimezoneLike,
    now: datetime | None = None,
) -> dict[str, int]:
    zone = resolve_timezone(tz)
    now = now or utc_now()
    totals = {parse_calendar_date(value).isoformat(): 0 for value in dates}
    for session in sessions:
        for segment in split_by_calendar_day(session, zone, now=now):
            if segment.date in totals:
                totals[segment.date] += segment.duration_ms
    return totals
