import math

from ..constants import MS_PER_HOUR, MS_PER_MINUTE


def progress_percent(worked_ms: float, goal_hours: float) -> float:
    """Share of the goal reached, capped at 100.

    A goal of zero or less counts as already met.
    """
    if goal_hours <= 0:
        return 100.0
    goal_ms = goal_hours * MS_PER_HOUR
    return min(100.0, worked_ms / goal_ms * 100)


def format_duration(ms: float) -> str:
    total_minutes = int(ms // MS_PER_MINUTE)
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours:02d}:{minutes:02d}"


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round with exact halves going up (5.25 -> 5.3), unlike ``round``."""
    scale = 10 ** ndigits
    return math.floor(value * scale + 0.5) / scale


def ms_to_hours(ms: float, ndigits: int = 1) -> float:
    return round_half_up(ms / MS_PER_HOUR, ndigits)
