from .goal import Goal  # noqa: F401
from .report import DaySummary, DayTotal, MonthlyBreakdown, PeriodSummary, UserOverview  # noqa: F401
from .session import DaySegment, WorkSession  # noqa: F401
