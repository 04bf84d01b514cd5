import pytest

from worktime.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    monkeypatch.delenv("WORKTIME_DEFAULT_TIMEZONE", raising=False)
    monkeypatch.delenv("WORKTIME_DEFAULT_DAILY_GOAL_HOURS", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
