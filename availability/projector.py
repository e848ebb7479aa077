"""
Conflict Projector.

Keeps two independently stored facts consistent for an editor:
1. Read path  - overlay the hours held by live orders onto a stored schedule.
2. Write path - collapse those locked hours back to plain ACTIVE before storage.

The two paths never talk to each other. Locked hours are advisory and are
recomputed from the order store on every read.
"""

import logging
from datetime import datetime, tzinfo
from typing import Any, Iterable, List, Optional, Set, Union

from models import (
    EditableSchedule,
    EditorHourState,
    HourState,
    OrderFact,
    OrderStatus,
    Schedule,
    ScheduleFormatError,
    ScheduleRangeError,
)
from models.hour_state import EDITOR_CODES
from models.schedule import Cell

from .calendar import calendar_cell, localize
from .clock import Clock
from .config import ScheduleSettings
from .grid import check_codes, load_rows

logger = logging.getLogger(__name__)


def is_live(fact: OrderFact, now: datetime, tz: tzinfo) -> bool:
    """An order holds its hour while it is PROCESSING and not yet in the past."""
    if fact.status is not OrderStatus.PROCESSING:
        return False
    return localize(fact.consultation_at, tz) >= localize(now, tz)


def live_facts(
    facts: Iterable[OrderFact],
    now: datetime,
    tz: tzinfo,
    notary_id: Optional[int] = None
) -> List[OrderFact]:
    """Filter an unfiltered order collection down to the facts that lock hours."""
    return [
        f for f in facts
        if (notary_id is None or f.notary_id == notary_id) and is_live(f, now, tz)
    ]


def overlay_booked_slots(
    schedule: Union[Schedule, EditableSchedule],
    facts: Iterable[OrderFact],
    now: datetime,
    tz: tzinfo,
    notary_id: Optional[int] = None,
    strict: bool = True
) -> EditableSchedule:
    """
    Mark every hour held by a live order as forced.

    The stored cells are never modified. The forced set is rebuilt from `facts`
    and `now` on every call, so re-overlaying an EditableSchedule drops locks whose
    orders were cancelled or have passed. Orders are projected even onto INACTIVE
    cells.

    Raises ScheduleRangeError when an order's hour falls outside the grid,
    unless `strict` is False, in which case the order is skipped with a warning.
    """
    # Locked hours are never carried over from an earlier overlay
    base = schedule.schedule if isinstance(schedule, EditableSchedule) else schedule
    forced: Set[Cell] = set()

    for fact in live_facts(facts, now, tz, notary_id):
        day, hour = calendar_cell(fact.consultation_at, tz)
        try:
            base.check_day(day)
            base.hour_index(hour)
        except ScheduleRangeError as exc:
            if strict:
                raise ScheduleRangeError(
                    f"Order {fact.order_id} at {fact.consultation_at.isoformat()} is outside the schedule: {exc}",
                    day=day, hour=hour
                ) from exc
            logger.warning(f"Skipping order {fact.order_id} for notary {fact.notary_id}: {exc}")
            continue

        if base.cell(day, hour) is HourState.INACTIVE:
            logger.warning(
                f"Order {fact.order_id} holds day {day} hour {hour}, which notary {fact.notary_id} marked inactive"
            )
        logger.debug(f"Locking day {day} hour {hour} for order {fact.order_id}")
        forced.add((day, hour))

    return EditableSchedule(schedule=base, forced=frozenset(forced), computed_at=now)


def strip_force_markers(
    submitted: Union[Schedule, EditableSchedule, Any],
    settings: Optional[ScheduleSettings] = None
) -> Schedule:
    """
    Turn whatever the editor sends back into a storable Schedule.

    Locked cells become ACTIVE, every other cell passes through. Live orders are
    not consulted. A raw editor grid (codes 0/1/2, list or JSON string) needs
    `settings` for its bounds and may raise ScheduleFormatError.
    """
    if isinstance(submitted, Schedule):
        return submitted

    if isinstance(submitted, EditableSchedule):
        base = submitted.schedule
        rows = [list(row) for row in base.days]
        for day, hour in submitted.forced:
            rows[day][hour - base.min_hour] = HourState.ACTIVE
        return Schedule(min_hour=base.min_hour, days=rows)

    if settings is None:
        raise TypeError("settings are required to strip a raw editor grid")
    codes = check_codes(load_rows(submitted), settings.hours_per_day, EDITOR_CODES)
    rows = [[EditorHourState(code).to_storable() for code in row] for row in codes]
    return Schedule(min_hour=settings.min_hour, days=rows)


# --- Public entry points ---

def for_editing(
    schedule: Schedule,
    facts: Iterable[OrderFact],
    notary_id: int,
    clock: Clock,
    settings: ScheduleSettings
) -> EditableSchedule:
    """Read path: stored schedule + order store -> schedule with booked hours locked."""
    return overlay_booked_slots(
        schedule,
        facts,
        now=clock.now(),
        tz=settings.tz,
        notary_id=notary_id,
        strict=settings.strict_projection
    )


def for_storage(submitted: Union[Schedule, EditableSchedule, Any], settings: ScheduleSettings) -> Schedule:
    """Write path: editor submission -> schedule safe to persist."""
    schedule = strip_force_markers(submitted, settings)
    if (schedule.min_hour, schedule.hours_per_day) != (settings.min_hour, settings.hours_per_day):
        raise ScheduleFormatError(
            f"Schedule covers [{schedule.min_hour}, {schedule.end_hour}), "
            f"expected [{settings.min_hour}, {settings.end_hour})"
        )
    return schedule
