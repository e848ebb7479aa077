"""
Schedule availability & conflict engine.
"""

from .calendar import calendar_cell, localize
from .clock import Clock, FixedClock, SystemClock
from .config import ScheduleSettings
from .grid import decode, encode
from .projector import (
    for_editing,
    for_storage,
    is_live,
    live_facts,
    overlay_booked_slots,
    strip_force_markers
)
from .repository import (
    InMemoryNotaryRepository,
    InMemoryOrderRepository,
    InMemoryQualificationRepository,
    NotaryNotFoundError,
    QualificationNotFoundError
)
from .service import NotaryScheduleService

__all__ = [
    "calendar_cell",
    "localize",
    "Clock",
    "FixedClock",
    "SystemClock",
    "ScheduleSettings",
    "decode",
    "encode",
    "for_editing",
    "for_storage",
    "is_live",
    "live_facts",
    "overlay_booked_slots",
    "strip_force_markers",
    "InMemoryNotaryRepository",
    "InMemoryOrderRepository",
    "InMemoryQualificationRepository",
    "NotaryNotFoundError",
    "QualificationNotFoundError",
    "NotaryScheduleService",
]
