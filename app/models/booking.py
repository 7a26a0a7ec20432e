"""
Booking database model.

Bookings carry a snapshot of the event at booking time so that cards can
still be rendered after the event row is gone.  ``event_id`` is therefore
not a foreign key.
"""

from typing import Optional

from sqlmodel import Field, SQLModel


class BookingRow(SQLModel, table=True):
    """A player's reservation against one event."""

    __tablename__ = "bookings"

    id: Optional[int] = Field(default=None, primary_key=True)
    booking_id: str = Field(default="", max_length=64, index=True)
    booking_date: str = Field(default="", max_length=50)
    event_id: str = Field(default="", max_length=64, index=True)
    customer_email: str = Field(nullable=False, max_length=255, index=True)
    amount_paid: str = Field(default="", max_length=50)
    status: str = Field(default="", max_length=50)
    skill_level: str = Field(default="", max_length=100)

    # Event snapshot
    event_name: str = Field(default="", max_length=255)
    event_date: str = Field(default="", max_length=50)
    event_time: str = Field(default="", max_length=50)
    event_location: str = Field(default="", max_length=500)
