from datetime import datetime

from pydantic import BaseModel

from .session import WorkSession


class DaySummary(BaseModel):
    date: str
    total_ms: int = 0
    total_formatted: str = "00:00"
    goal_hours: float
    is_default_goal: bool = True
    progress_percent: float = 0.0
    active_session: WorkSession | None = None
    sessions: list[WorkSession] = []


class PeriodSummary(BaseModel):
    range_start: datetime
    range_end: datetime
    dates: list[str]
    total_ms: int = 0
    total_formatted: str = "00:00"
    total_hours: float = 0.0
    goal_hours: float = 0.0
    progress_percent: float = 0.0


class DayTotal(BaseModel):
    total_ms: int = 0
    total_formatted: str = "00:00"


class MonthlyBreakdown(BaseModel):
    month: str
    days: dict[str, DayTotal]


class UserOverview(BaseModel):
    date: str
    total_ms: int
    total_formatted: str
    goal_hours: float
    progress_percent: float
    is_online: bool
    week: PeriodSummary
    month: PeriodSummary
