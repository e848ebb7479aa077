"""
Error taxonomy for schedule handling.
"""

from typing import Optional


class ScheduleError(ValueError):
    """Base class for every schedule-related failure."""


class ScheduleFormatError(ScheduleError):
    """Persisted or submitted schedule does not have the expected 7xH shape."""


class ScheduleRangeError(ScheduleError, IndexError):
    """A day or hour falls outside the schedule grid."""

    def __init__(self, message: str, day: Optional[int] = None, hour: Optional[int] = None):
        super().__init__(message)
        self.day = day
        self.hour = hour
