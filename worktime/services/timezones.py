from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..config import get_settings
from ..exceptions import InvalidTimezoneError

logger = logging.getLogger(__name__)

TimezoneLike = str | ZoneInfo | None


def resolve_timezone(value: TimezoneLike) -> ZoneInfo:
    """Return the ZoneInfo for an IANA identifier.

    ``None`` and the empty string fall back to the configured default zone.
    Anything else that is not a known zone raises InvalidTimezoneError.
    """
    if isinstance(value, ZoneInfo):
        return value
    if value is None or value == "":
        value = get_settings().default_timezone
    if not isinstance(value, str):
        raise InvalidTimezoneError(value)
    return _load_zone(value)


@lru_cache(maxsize=256)
def _load_zone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        logger.warning("Rejected timezone %r: %s", name, exc)
        raise InvalidTimezoneError(name) from exc


def as_utc(value: datetime) -> datetime:
    if value.tzinfo:
        return value.astimezone(timezone.utc)
    return value.replace(tzinfo=timezone.utc)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def local_date(instant: datetime, tz: ZoneInfo) -> date:
    return as_utc(instant).astimezone(tz).date()


def today_in_timezone(tz: TimezoneLike, reference: datetime | None = None) -> str:
    """Calendar date of ``reference`` (default: now) in the given zone, as YYYY-MM-DD."""
    zone = resolve_timezone(tz)
    return local_date(reference or utc_now(), zone).isoformat()
