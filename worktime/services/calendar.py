"""Local calendar boundaries (day, week, month) expressed as UTC instants."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from zoneinfo import ZoneInfo

from ..constants import DAYS_PER_WEEK
from ..exceptions import InvalidCalendarDateError
from .timezones import TimezoneLike, local_date, resolve_timezone, utc_now

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_MONTH_PATTERN = re.compile(r"^\d{4}-\d{2}$")

CalendarDateLike = str | date


@dataclass(frozen=True)
class CalendarRange:
    range_start: datetime
    range_end: datetime
    dates: tuple[str, ...]

    def contains(self, instant: datetime) -> bool:
        return self.range_start <= instant < self.range_end


def parse_calendar_date(value: CalendarDateLike) -> date:
    if isinstance(value, datetime):
        raise InvalidCalendarDateError(value)
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not _DATE_PATTERN.match(value):
        raise InvalidCalendarDateError(value)
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise InvalidCalendarDateError(value) from exc


def parse_month(value: str) -> date:
    """Parse a ``YYYY-MM`` key into the first day of that month."""
    if not isinstance(value, str) or not _MONTH_PATTERN.match(value):
        raise InvalidCalendarDateError(value, expected="YYYY-MM")
    year, month = (int(part) for part in value.split("-"))
    try:
        return date(year, month, 1)
    except ValueError as exc:
        raise InvalidCalendarDateError(value, expected="YYYY-MM") from exc


def local_midnight(target: date, tz: ZoneInfo) -> datetime:
    """First instant of ``target`` in ``tz`` as an aware UTC datetime.

    When midnight falls inside a DST gap, the pre-transition offset applies,
    which lands exactly on the transition instant.
    """
    return datetime.combine(target, time.min, tzinfo=tz).astimezone(timezone.utc)


def calendar_day_bounds(target: CalendarDateLike, tz: TimezoneLike) -> tuple[datetime, datetime]:
    zone = resolve_timezone(tz)
    day = parse_calendar_date(target)
    return local_midnight(day, zone), local_midnight(day + timedelta(days=1), zone)


def week_bounds(tz: TimezoneLike, reference: datetime | None = None) -> CalendarRange:
    """Monday-to-Monday local week containing ``reference``."""
    zone = resolve_timezone(tz)
    today = local_date(reference or utc_now(), zone)
    monday = today - timedelta(days=today.weekday())
    return _build_range(monday, monday + timedelta(days=DAYS_PER_WEEK), zone)


def month_bounds(tz: TimezoneLike, reference: datetime | None = None) -> CalendarRange:
    zone = resolve_timezone(tz)
    today = local_date(reference or utc_now(), zone)
    first = today.replace(day=1)
    return _build_range(first, _next_month(first), zone)


def month_bounds_for(month: str, tz: TimezoneLike) -> CalendarRange:
    zone = resolve_timezone(tz)
    first = parse_month(month)
    return _build_range(first, _next_month(first), zone)


def _next_month(first: date) -> date:
    if first.month == 12:
        return date(first.year + 1, 1, 1)
    return date(first.year, first.month + 1, 1)


def _build_range(first: date, stop: date, zone: ZoneInfo) -> CalendarRange:
    dates: list[str] = []
    current = first
    while current < stop:
        dates.append(current.isoformat())
        current += timedelta(days=1)
    return CalendarRange(
        range_start=local_midnight(first, zone),
        range_end=local_midnight(stop, zone),
        dates=tuple(dates),
    )
