from __future__ import annotations

from typing import Iterable, Mapping

from ..config import get_settings
from ..schemas.goal import Goal
from .calendar import CalendarDateLike, parse_calendar_date

GoalLookup = Mapping[str, Goal | float | None] | Iterable[Goal] | None


def normalize_goals(goals: GoalLookup) -> dict[str, float | None]:
    """Collapse any goal lookup into a ``{YYYY-MM-DD: hours}`` dict.

    Non-mapping inputs may be one-shot iterators of Goal records or of
    objects with ``date`` and ``goal_hours`` attributes.
    """
    if not goals:
        return {}
    if isinstance(goals, Mapping):
        mapped: dict[str, float | None] = {}
        for key, value in goals.items():
            hours = value.goal_hours if isinstance(value, Goal) else value
            mapped[parse_calendar_date(key).isoformat()] = hours
        return mapped
    records = [Goal.model_validate(item) for item in goals]
    return {goal.date: goal.goal_hours for goal in records}


def resolve_goal_hours(
    goals: GoalLookup,
    target: CalendarDateLike,
    default_hours: float | None = None,
) -> tuple[float, bool]:
    """Return ``(goal_hours, is_default)`` for a date, falling back to the default goal."""
    key = parse_calendar_date(target).isoformat()
    hours = normalize_goals(goals).get(key)
    if hours is None:
        return _default(default_hours), True
    return float(hours), False


def sum_goal_hours(
    goals: GoalLookup,
    dates: Iterable[CalendarDateLike],
    default_hours: float | None = None,
) -> float:
    mapped = normalize_goals(goals)
    fallback = _default(default_hours)
    total = 0.0
    for value in dates:
        hours = mapped.get(parse_calendar_date(value).isoformat())
        total += fallback if hours is None else float(hours)
    return total


def _default(default_hours: float | None) -> float:
    if default_hours is None:
        return get_settings().default_daily_goal_hours
    return float(default_hours)
