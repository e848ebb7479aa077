from datetime import datetime, timezone

import pytest

from availability import FixedClock, ScheduleSettings
from models import HourState, OrderFact, OrderStatus, Schedule

# Monday 2026-10-19 08:00 UTC
NOW = datetime(2026, 10, 19, 8, 0, tzinfo=timezone.utc)
# Wednesday of the same week, 11:00 UTC
WEDNESDAY_11 = datetime(2026, 10, 21, 11, 0, tzinfo=timezone.utc)


@pytest.fixture
def settings() -> ScheduleSettings:
    # 09:00-16:59 start hours
    return ScheduleSettings(min_hour=9, hours_per_day=8, timezone="UTC")


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture
def all_active(settings) -> Schedule:
    return Schedule.filled(settings.min_hour, settings.hours_per_day, HourState.ACTIVE)


@pytest.fixture
def weekdays_only(settings) -> Schedule:
    rows = [[1] * settings.hours_per_day] * 5 + [[0] * settings.hours_per_day] * 2
    return Schedule(min_hour=settings.min_hour, days=rows)


def order(order_id=1, notary_id=1, at=WEDNESDAY_11, status=OrderStatus.PROCESSING) -> OrderFact:
    return OrderFact(order_id=order_id, notary_id=notary_id, consultation_at=at, status=status)
