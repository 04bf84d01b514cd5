from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Any

from ..schemas.session import DaySegment
from .calendar import local_midnight
from .timezones import TimezoneLike, as_utc, local_date, resolve_timezone, utc_now

logger = logging.getLogger(__name__)

_ONE_MS = timedelta(milliseconds=1)


def effective_end(session: Any, now: datetime | None = None) -> datetime:
    """End instant of a session, or ``now`` while it is still open."""
    if session.ended_at is not None:
        return as_utc(session.ended_at)
    return as_utc(now or utc_now())


def split_by_calendar_day(session: Any, tz: TimezoneLike, now: datetime | None = None) -> list[DaySegment]:
    """Split a session at every local midnight it crosses.

    ``session`` only needs ``started_at`` and ``ended_at`` attributes. Open
    sessions run until ``now``. Inverted or zero-length sessions yield no
    segments. Segment lengths follow the zone's real midnights, so a full
    day on a DST transition is 23 or 25 hours long.
    """
    zone = resolve_timezone(tz)
    start = as_utc(session.started_at)
    end = effective_end(session, now)
    if end <= start:
        logger.debug("Skipping empty session %s -> %s", start.isoformat(), end.isoformat())
        return []

    segments: list[DaySegment] = []
    day = local_date(start, zone)
    cursor = start
    # Each duration is a difference of whole milliseconds elapsed since start;
    # the segments sum to the truncated session length.
    elapsed_ms = 0
    while cursor < end:
        boundary = local_midnight(day + timedelta(days=1), zone)
        segment_end = min(boundary, end)
        if segment_end > cursor:
            segment_elapsed_ms = (segment_end - start) // _ONE_MS
            duration_ms = segment_elapsed_ms - elapsed_ms
            if duration_ms > 0:
                segments.append(DaySegment(date=day.isoformat(), duration_ms=duration_ms))
            elapsed_ms = segment_elapsed_ms
            cursor = segment_end
        day += timedelta(days=1)
    return segments
