"""
Encoding and decoding of persisted schedules.

Storage keeps a schedule as a JSON array of 7 arrays of integer codes.
Decoding is strict: anything that is not exactly 7 x H storable codes is a
ScheduleFormatError, never an empty schedule.
"""

import json
from typing import Any, Iterable, List

from pydantic import ValidationError

from models import DAYS_PER_WEEK, HourState, Schedule, ScheduleFormatError
from models.hour_state import STORABLE_CODES

from .config import ScheduleSettings


def load_rows(raw: Any) -> List[Any]:
    """Parse a JSON string (or pass through an already-parsed list) and check the 7-row shape."""
    if isinstance(raw, (str, bytes, bytearray)):
        try:
            raw = json.loads(raw)
        except ValueError as exc:
            raise ScheduleFormatError(f"Schedule is not valid JSON: {exc}") from exc
    if not isinstance(raw, (list, tuple)):
        raise ScheduleFormatError(f"Schedule must be a list of days, got {type(raw).__name__}")
    if len(raw) != DAYS_PER_WEEK:
        raise ScheduleFormatError(f"Schedule must have {DAYS_PER_WEEK} days, got {len(raw)}")
    return list(raw)


def check_codes(rows: Iterable[Any], hours_per_day: int, allowed: frozenset) -> List[List[int]]:
    """Validate row widths and cell codes; returns plain integer rows."""
    result = []
    for day, row in enumerate(rows):
        if not isinstance(row, (list, tuple)) or len(row) != hours_per_day:
            raise ScheduleFormatError(f"Day {day} must have {hours_per_day} hour-cells")
        codes = []
        for col, value in enumerate(row):
            # bool is an int subclass; True/False are not valid codes
            if isinstance(value, bool) or not isinstance(value, int) or value not in allowed:
                raise ScheduleFormatError(f"Invalid hour state {value!r} at day {day}, column {col}")
            codes.append(int(value))
        result.append(codes)
    return result


def decode(raw: Any, settings: ScheduleSettings) -> Schedule:
    """Persisted form -> Schedule. Fails with ScheduleFormatError on any shape or code problem."""
    rows = check_codes(load_rows(raw), settings.hours_per_day, STORABLE_CODES)
    try:
        return Schedule(min_hour=settings.min_hour, days=rows)
    except ValidationError as exc:
        raise ScheduleFormatError(str(exc)) from exc


def encode(schedule: Schedule) -> str:
    """Schedule -> persisted form. Refuses anything but storable states."""
    for day, row in enumerate(schedule.days):
        for col, state in enumerate(row):
            if not isinstance(state, HourState):
                raise ScheduleFormatError(f"Refusing to store {state!r} at day {day}, column {col}")
    return json.dumps(schedule.codes(), separators=(",", ":"))
