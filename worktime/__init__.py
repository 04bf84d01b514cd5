"""Timezone-aware time accounting for work sessions."""

from .exceptions import InvalidCalendarDateError, InvalidTimezoneError, WorktimeError
from .schemas import DaySegment, DaySummary, DayTotal, Goal, MonthlyBreakdown, PeriodSummary, UserOverview, WorkSession
from .services.aggregation import aggregate_for_date, aggregate_for_range, daily_totals
from .services.calendar import CalendarRange, calendar_day_bounds, month_bounds, month_bounds_for, week_bounds
from .services.goals import normalize_goals, resolve_goal_hours, sum_goal_hours
from .services.overlap import overlap_clause, session_overlaps, sessions_overlapping
from .services.progress import format_duration, ms_to_hours, progress_percent, round_half_up
from .services.reporting import build_day_summary, build_monthly_breakdown, build_period_summary, build_user_overview
from .services.splitting import split_by_calendar_day
from .services.timezones import resolve_timezone, today_in_timezone

__all__ = [
    "CalendarRange",
    "DaySegment",
    "DaySummary",
    "DayTotal",
    "Goal",
    "InvalidCalendarDateError",
    "InvalidTimezoneError",
    "MonthlyBreakdown",
    "PeriodSummary",
    "UserOverview",
    "WorkSession",
    "WorktimeError",
    "aggregate_for_date",
    "aggregate_for_range",
    "build_day_summary",
    "build_monthly_breakdown",
    "build_period_summary",
    "build_user_overview",
    "calendar_day_bounds",
    "daily_totals",
    "format_duration",
    "month_bounds",
    "month_bounds_for",
    "ms_to_hours",
    "normalize_goals",
    "overlap_clause",
    "progress_percent",
    "resolve_goal_hours",
    "resolve_timezone",
    "round_half_up",
    "session_overlaps",
    "sessions_overlapping",
    "split_by_calendar_day",
    "sum_goal_hours",
    "today_in_timezone",
    "week_bounds",
]
