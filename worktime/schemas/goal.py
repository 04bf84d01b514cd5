from datetime import date as date_type

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..services.calendar import parse_calendar_date


class Goal(BaseModel):
    """Daily hour goal for one calendar date; ``goal_hours=None`` means use the default."""

    date: str
    goal_hours: float | None = Field(default=None, gt=0)

    model_config = ConfigDict(from_attributes=True, frozen=True)

    @field_validator("date", mode="before")
    @classmethod
    def _normalize_date(cls, value: str | date_type) -> str:
        return parse_calendar_date(value).isoformat()
