"""
Configuration for the schedule grid and the conflict projector.

Both sides must agree on the hour range, so it is defined once here.
"""

import os
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, model_validator

ENV_PREFIX = "NOTARY_SCHEDULE_"


class ScheduleSettings(BaseModel):
    """Grid bounds and calendar conventions."""

    min_hour: int = Field(default=9, ge=0, le=23, description="First bookable start hour (MIN_HOUR)")
    hours_per_day: int = Field(default=8, ge=1, le=24, description="Number of hour columns per day (H)")
    timezone: str = Field(default="UTC", description="IANA zone used to read consultation times")
    strict_projection: bool = Field(
        default=True,
        description="Raise on orders outside the grid instead of skipping them"
    )

    model_config = ConfigDict(frozen=True)

    @model_validator(mode='after')
    def validate_bounds(self):
        if self.min_hour + self.hours_per_day > 24:
            raise ValueError("min_hour + hours_per_day must not run past midnight")
        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown time zone: {self.timezone}") from exc
        return self

    @property
    def tz(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    @property
    def end_hour(self) -> int:
        return self.min_hour + self.hours_per_day

    @classmethod
    def from_env(cls, environ=None) -> "ScheduleSettings":
        """Build settings from NOTARY_SCHEDULE_* variables, defaulting anything unset."""
        environ = os.environ if environ is None else environ
        values = {}
        for field in ("min_hour", "hours_per_day", "timezone", "strict_projection"):
            raw = environ.get(ENV_PREFIX + field.upper())
            if raw is not None:
                values[field] = raw
        return cls(**values)
