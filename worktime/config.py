from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    default_timezone: str = "UTC"
    default_daily_goal_hours: float = Field(default=8.0, gt=0, le=24)

    model_config = SettingsConfigDict(env_prefix="WORKTIME_", env_file=".env", case_sensitive=False)


@lru_cache
def get_settings() -> Settings:
    return Settings()
