class WorktimeError(Exception):
    """Base class for errors raised by the accounting engine."""


class InvalidTimezoneError(WorktimeError, ValueError):
    def __init__(self, timezone_name: object):
        self.timezone_name = timezone_name
        super().__init__(f"Invalid timezone: {timezone_name!r}")


class InvalidCalendarDateError(WorktimeError, ValueError):
    def __init__(self, value: object, expected: str = "YYYY-MM-DD"):
        self.value = value
        super().__init__(f"Invalid calendar date {value!r}; expected {expected}")
