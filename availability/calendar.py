"""
Calendar decomposition: instant -> (ISO day index, local hour).

Everything that turns a timestamp into a grid coordinate goes through here, so
the day/hour arithmetic can be tested without a schedule or an order store.
"""

from datetime import datetime, tzinfo
from typing import Tuple


def localize(instant: datetime, tz: tzinfo) -> datetime:
    """
    Express `instant` as wall time in `tz`.
    Naive datetimes are taken to already be wall time in `tz`.
    """
    if instant.tzinfo is None:
        return instant.replace(tzinfo=tz)
    return instant.astimezone(tz)


def calendar_cell(instant: datetime, tz: tzinfo) -> Tuple[int, int]:
    """Return (day, hour) with day 0=Monday .. 6=Sunday and hour 0..23 in `tz`."""
    local = localize(instant, tz)
    return local.isoweekday() - 1, local.hour
