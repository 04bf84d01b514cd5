"""Day, period, month and per-user summaries built from raw sessions."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Iterable

from ..schemas.report import DaySummary, DayTotal, MonthlyBreakdown, PeriodSummary, UserOverview
from ..schemas.session import WorkSession
from .aggregation import aggregate_for_date, aggregate_for_range, daily_totals
from .calendar import (
    CalendarDateLike,
    CalendarRange,
    calendar_day_bounds,
    month_bounds,
    month_bounds_for,
    parse_calendar_date,
    week_bounds,
)
from .goals import GoalLookup, normalize_goals, resolve_goal_hours, sum_goal_hours
from .overlap import sessions_overlapping
from .progress import format_duration, ms_to_hours, progress_percent, round_half_up
from .timezones import TimezoneLike, resolve_timezone, today_in_timezone, utc_now

logger = logging.getLogger(__name__)


def build_day_summary(
    sessions: Iterable[Any],
    tz: TimezoneLike,
    target: CalendarDateLike | None = None,
    goals: GoalLookup = None,
    default_goal_hours: float | None = None,
    now: datetime | None = None,
) -> DaySummary:
    zone = resolve_timezone(tz)
    now = now or utc_now()
    day = parse_calendar_date(target).isoformat() if target else today_in_timezone(zone, now)
    day_start, day_end = calendar_day_bounds(day, zone)

    records = [WorkSession.model_validate(s) for s in sessions_overlapping(sessions, day_start, day_end)]
    total_ms = aggregate_for_date(records, day, zone, now=now)
    goal_hours, is_default = resolve_goal_hours(goals, day, default_goal_hours)
    open_sessions = _open_sessions(records)

    return DaySummary(
        date=day,
        total_ms=total_ms,
        total_formatted=format_duration(total_ms),
        goal_hours=goal_hours,
        is_default_goal=is_default,
        progress_percent=round_half_up(progress_percent(total_ms, goal_hours), 2),
        active_session=open_sessions[0] if open_sessions else None,
        sessions=records,
    )


def build_period_summary(
    sessions: Iterable[Any],
    calendar_range: CalendarRange,
    tz: TimezoneLike,
    goals: GoalLookup = None,
    default_goal_hours: float | None = None,
    now: datetime | None = None,
) -> PeriodSummary:
    zone = resolve_timezone(tz)
    now = now or utc_now()
    relevant = sessions_overlapping(sessions, calendar_range.range_start, calendar_range.range_end)
    total_ms = aggregate_for_range(relevant, calendar_range.dates, zone, now=now)
    goal_hours = sum_goal_hours(goals, calendar_range.dates, default_goal_hours)
    return PeriodSummary(
        range_start=calendar_range.range_start,
        range_end=calendar_range.range_end,
        dates=list(calendar_range.dates),
        total_ms=total_ms,
        total_formatted=format_duration(total_ms),
        total_hours=ms_to_hours(total_ms),
        goal_hours=round_half_up(goal_hours, 1),
        progress_percent=round_half_up(progress_percent(total_ms, goal_hours), 2),
    )


def build_monthly_breakdown(
    sessions: Iterable[Any],
    tz: TimezoneLike,
    month: str | None = None,
    now: datetime | None = None,
) -> MonthlyBreakdown:
    """Per-day totals for every date of a month (``YYYY-MM``, default: the current one)."""
    zone = resolve_timezone(tz)
    now = now or utc_now()
    calendar_range = month_bounds_for(month, zone) if month else month_bounds(zone, now)
    relevant = sessions_overlapping(sessions, calendar_range.range_start, calendar_range.range_end)
    totals = daily_totals(relevant, calendar_range.dates, zone, now=now)
    return MonthlyBreakdown(
        month=calendar_range.dates[0][:7],
        days={day: DayTotal(total_ms=ms, total_formatted=format_duration(ms)) for day, ms in totals.items()},
    )


def build_user_overview(
    sessions: Iterable[Any],
    tz: TimezoneLike,
    target: CalendarDateLike | None = None,
    goals: GoalLookup = None,
    default_goal_hours: float | None = None,
    now: datetime | None = None,
) -> UserOverview:
    """Day figures for ``target`` plus totals for the week and month containing ``now``."""
    zone = resolve_timezone(tz)
    now = now or utc_now()
    sessions = list(sessions)
    goals = normalize_goals(goals)
    day = build_day_summary(sessions, zone, target, goals, default_goal_hours, now)
    week = build_period_summary(sessions, week_bounds(zone, now), zone, goals, default_goal_hours, now)
    month = build_period_summary(sessions, month_bounds(zone, now), zone, goals, default_goal_hours, now)
    return UserOverview(
        date=day.date,
        total_ms=day.total_ms,
        total_formatted=day.total_formatted,
        goal_hours=day.goal_hours,
        progress_percent=day.progress_percent,
        is_online=day.active_session is not None,
        week=week,
        month=month,
    )


def _open_sessions(records: list[WorkSession]) -> list[WorkSession]:
    open_sessions = [record for record in records if record.is_open]
    if len(open_sessions) > 1:
        logger.warning("Found %d open sessions in one summary; counting all of them", len(open_sessions))
    return open_sessions
