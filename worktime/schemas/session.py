from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, ConfigDict


class WorkSession(BaseModel):
    started_at: datetime
    ended_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True, frozen=True)

    @property
    def is_open(self) -> bool:
        return self.ended_at is None


@dataclass(frozen=True)
class DaySegment:
    date: str
    duration_ms: int
