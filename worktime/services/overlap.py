from __future__ import annotations

from datetime import datetime
from typing import Any, Iterable

from sqlalchemy import and_, or_
from sqlalchemy.sql.elements import ColumnElement

from .timezones import as_utc


def session_overlaps(session: Any, range_start: datetime, range_end: datetime) -> bool:
    """True when the session could contribute time to ``[range_start, range_end)``.

    An open session overlaps every range that ends after it started.
    """
    if as_utc(session.started_at) >= as_utc(range_end):
        return False
    if session.ended_at is None:
        return True
    return as_utc(session.ended_at) >= as_utc(range_start)


def sessions_overlapping(sessions: Iterable[Any], range_start: datetime, range_end: datetime) -> list[Any]:
    matched = [s for s in sessions if session_overlaps(s, range_start, range_end)]
    matched.sort(key=lambda s: as_utc(s.started_at))
    return matched


def overlap_clause(started_column: Any, ended_column: Any, range_start: datetime, range_end: datetime) -> ColumnElement:
    """SQLAlchemy filter matching the rows ``session_overlaps`` accepts.

    Bounds are converted to naive UTC, matching ``DateTime`` columns that
    store UTC without tzinfo.
    """
    start_utc = as_utc(range_start).replace(tzinfo=None)
    end_utc = as_utc(range_end).replace(tzinfo=None)
    return and_(
        started_column < end_utc,
        or_(ended_column >= start_utc, ended_column.is_(None)),
    )
