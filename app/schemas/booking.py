"""
Booking schema.

A booking references an event by id.  The referenced event may no longer
exist, so the booking keeps a denormalised snapshot of the event's name,
date, time and location which is used as a fallback.

``status`` is free text ("Confirmed", "Attended", "Completed",
"Cancelled", "No-show", ...) and is interpreted by keyword match.
"""

from pydantic import BaseModel, ConfigDict, Field


class Booking(BaseModel):
    """A user's reservation against one event."""

    model_config = ConfigDict(frozen=True)

    booking_id: str = Field("", description="Unique key used for deduplication")
    booking_date: str = ""
    event_id: str = ""
    customer_email: str = ""
    amount_paid: str = Field("", description="Currency text, parsed with parse_price")
    status: str = "Confirmed"
    skill_level: str = ""

    # Snapshot of the event at booking time
    event_name: str = ""
    event_date: str = ""
    event_time: str = ""
    event_location: str = ""
