from datetime import datetime, timezone

from worktime.schemas import WorkSession

IST = "Asia/Kolkata"
HOUR_MS = 3_600_000


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def session(start: datetime, end: datetime | None = None) -> WorkSession:
    return WorkSession(started_at=start, ended_at=end)
