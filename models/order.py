"""
Order facts consumed from the order store.

Only the fields the schedule engine needs are modelled: who the order is with,
when the consultation happens and where it is in its lifecycle.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class OrderStatus(str, Enum):
    """Lifecycle of a consultation order."""
    PROCESSING = "Processing"  # Confirmed, consultation not yet held
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class OrderFact(BaseModel):
    """Read-only projection of one order."""

    order_id: int = Field(description="Order identifier in the order store")
    notary_id: int = Field(description="Notary the consultation is booked with")
    consultation_at: datetime = Field(description="Start of the consultation; naive values are local wall time")
    status: OrderStatus = Field(default=OrderStatus.PROCESSING)

    model_config = ConfigDict(frozen=True, json_schema_extra={
        "example": {
            "order_id": 42,
            "notary_id": 7,
            "consultation_at": "2026-10-21T11:00:00",
            "status": "Processing"
        }
    })
