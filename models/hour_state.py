"""
Hour-cell state enumerations for the Notary Schedule engine.

Two enums live here on purpose:
1. HourState - the only values a persisted schedule may hold.
2. EditorHourState - what an editor UI sees, which adds FORCE_ACTIVE for booked hours.
"""

from enum import Enum


class HourState(int, Enum):
    """Storable status of one hour-cell."""
    INACTIVE = 0  # Not offered
    ACTIVE = 1    # Offered, bookable


class EditorHourState(int, Enum):
    """Status of one hour-cell as rendered for an editor."""
    INACTIVE = 0
    ACTIVE = 1
    FORCE_ACTIVE = 2  # Booked by a live order, must not be toggled off

    def to_storable(self) -> HourState:
        """Collapse the presentation state back to what storage accepts."""
        if self is EditorHourState.INACTIVE:
            return HourState.INACTIVE
        return HourState.ACTIVE


STORABLE_CODES = frozenset(state.value for state in HourState)
EDITOR_CODES = frozenset(state.value for state in EditorHourState)
