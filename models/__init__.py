"""
Data models package for the Notary Schedule engine.

This package exports the three groups of records the engine works with:
1. Availability (HourState, Schedule, EditableSchedule)
2. Demand (OrderFact, OrderStatus)
3. Notaries (Notary, Qualification and their view models)
"""

from .errors import (
    ScheduleError,
    ScheduleFormatError,
    ScheduleRangeError
)

from .hour_state import (
    HourState,
    EditorHourState
)

from .schedule import (
    DAYS_PER_WEEK,
    Schedule,
    EditableSchedule
)

from .order import (
    OrderFact,
    OrderStatus
)

from .notary import (
    Notary,
    NotaryDraft,
    Qualification,
    NotarySummary,
    NotarySelectItem,
    NotaryEditorView
)

__all__ = [
    # --- Errors ---
    "ScheduleError",
    "ScheduleFormatError",
    "ScheduleRangeError",

    # --- Availability Models ---
    "HourState",
    "EditorHourState",
    "DAYS_PER_WEEK",
    "Schedule",
    "EditableSchedule",

    # --- Order Models ---
    "OrderFact",
    "OrderStatus",

    # --- Notary Models ---
    "Notary",
    "NotaryDraft",
    "Qualification",
    "NotarySummary",
    "NotarySelectItem",
    "NotaryEditorView",
]
