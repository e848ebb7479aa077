"""
Clock abstractions.

The conflict predicate compares order times against "now"; reading it through
an injected clock keeps projection deterministic under test.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Protocol implemented by sources of the current instant."""

    def now(self) -> datetime:
        """Return the current instant as a timezone-aware datetime."""


class SystemClock:
    """Wall clock, UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


@dataclass
class FixedClock:
    """Deterministic clock used for tests; time moves only via advance()."""

    instant: datetime

    def __post_init__(self) -> None:
        if self.instant.tzinfo is None:
            raise ValueError("FixedClock needs a timezone-aware instant")

    def now(self) -> datetime:
        return self.instant

    def advance(self, delta: timedelta) -> datetime:
        if delta < timedelta(0):
            raise ValueError("FixedClock cannot move backwards")
        self.instant = self.instant + delta
        return self.instant
