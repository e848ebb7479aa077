"""
Schedule data models for the Notary Schedule engine.

This module defines:
1. Schedule - the recurring weekly availability grid that gets persisted.
2. EditableSchedule - a Schedule plus the hours currently held by live orders,
   which is what an editor is shown and what it submits back.
"""

from datetime import datetime
from typing import FrozenSet, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .errors import ScheduleRangeError
from .hour_state import EditorHourState, HourState

DAYS_PER_WEEK = 7
DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

Cell = Tuple[int, int]  # (day index, wall-clock hour)


class Schedule(BaseModel):
    """
    Weekly availability of one notary.
    Rows are ISO days (0=Monday, 6=Sunday); columns are start hours from min_hour upward.
    """

    min_hour: int = Field(ge=0, le=23, description="Wall-clock hour of the first column")
    days: Tuple[Tuple[HourState, ...], ...] = Field(description="7 rows of hour-cells")

    model_config = ConfigDict(frozen=True, json_schema_extra={
        "example": {
            "min_hour": 9,
            "days": [[1, 1, 1, 1, 1, 1, 1, 1]] * 5 + [[0] * 8] * 2
        }
    })

    @model_validator(mode='after')
    def validate_shape(self):
        if len(self.days) != DAYS_PER_WEEK:
            raise ValueError(f"Schedule must have {DAYS_PER_WEEK} days, got {len(self.days)}")
        widths = {len(row) for row in self.days}
        if len(widths) != 1:
            raise ValueError(f"Schedule rows have differing lengths: {sorted(widths)}")
        width = widths.pop()
        if width == 0:
            raise ValueError("Schedule rows must not be empty")
        if self.min_hour + width > 24:
            raise ValueError("Schedule hours run past midnight")
        return self

    # --- Factories ---

    @classmethod
    def filled(cls, min_hour: int, hours_per_day: int, state: HourState = HourState.INACTIVE) -> "Schedule":
        return cls(min_hour=min_hour, days=[[state] * hours_per_day for _ in range(DAYS_PER_WEEK)])

    @classmethod
    def empty(cls, min_hour: int, hours_per_day: int) -> "Schedule":
        """A schedule with nothing offered."""
        return cls.filled(min_hour, hours_per_day, HourState.INACTIVE)

    # --- Bounds ---

    @property
    def hours_per_day(self) -> int:
        return len(self.days[0])

    @property
    def end_hour(self) -> int:
        """First wall-clock hour past the last column."""
        return self.min_hour + self.hours_per_day

    def hour_index(self, hour: int) -> int:
        """Column of a wall-clock hour. Out-of-range hours are an error, never clamped."""
        if not self.min_hour <= hour < self.end_hour:
            raise ScheduleRangeError(
                f"Hour {hour} outside schedule range [{self.min_hour}, {self.end_hour})",
                hour=hour
            )
        return hour - self.min_hour

    def check_day(self, day: int) -> int:
        if not 0 <= day < DAYS_PER_WEEK:
            raise ScheduleRangeError(f"Day {day} outside [0, {DAYS_PER_WEEK})", day=day)
        return day

    # --- Access ---

    def cell(self, day: int, hour: int) -> HourState:
        """State of the cell for ISO day index `day` and wall-clock `hour`."""
        return self.days[self.check_day(day)][self.hour_index(hour)]

    def with_cell(self, day: int, hour: int, state: HourState) -> "Schedule":
        """Copy of this schedule with a single cell replaced."""
        col = self.hour_index(hour)
        rows = [list(row) for row in self.days]
        rows[self.check_day(day)][col] = HourState(state)
        return Schedule(min_hour=self.min_hour, days=rows)

    def active_cells(self) -> List[Cell]:
        return [
            (day, self.min_hour + col)
            for day, row in enumerate(self.days)
            for col, state in enumerate(row)
            if state is HourState.ACTIVE
        ]

    def codes(self) -> List[List[int]]:
        """Plain integer rows, the shape that gets persisted."""
        return [[state.value for state in row] for row in self.days]


class EditableSchedule(BaseModel):
    """
    A stored Schedule overlaid with the hours booked by live orders.
    The forced set is advisory: it is recomputed on every read and never persisted.
    """

    schedule: Schedule
    forced: FrozenSet[Cell] = Field(default_factory=frozenset, description="(day, hour) cells held by live orders")
    computed_at: Optional[datetime] = Field(default=None, description="'now' used when the overlay was built")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode='after')
    def validate_forced_cells(self):
        for day, hour in self.forced:
            self.schedule.check_day(day)
            self.schedule.hour_index(hour)
        return self

    def is_forced(self, day: int, hour: int) -> bool:
        self.schedule.check_day(day)
        self.schedule.hour_index(hour)
        return (day, hour) in self.forced

    def cell_state(self, day: int, hour: int) -> EditorHourState:
        """What the editor shows for one cell."""
        if self.is_forced(day, hour):
            return EditorHourState.FORCE_ACTIVE
        return EditorHourState(self.schedule.cell(day, hour).value)

    def to_editor_grid(self) -> List[List[int]]:
        """Integer rows with FORCE_ACTIVE codes in booked cells."""
        grid = self.schedule.codes()
        for day, hour in self.forced:
            grid[day][hour - self.schedule.min_hour] = EditorHourState.FORCE_ACTIVE.value
        return grid
