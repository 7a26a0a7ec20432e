"""
Event and session template database models.

Events keep date, time and price as text: the source is a shared
spreadsheet and values are normalised only when mapped into the
domain schemas.
"""

from typing import Optional

from sqlmodel import Field, SQLModel


class SessionTemplateRow(SQLModel, table=True):
    """Recurring activity definition."""

    __tablename__ = "session_templates"

    session_template_id: str = Field(primary_key=True, max_length=64)
    title: str = Field(default="", max_length=255)
    sport: str = Field(default="", max_length=100)
    difficulty: str = Field(default="", max_length=100)
    default_duration_minutes: Optional[int] = Field(default=None)
    tags: str = Field(default="", description="Comma-separated")
    description: str = Field(default="")


class EventRow(SQLModel, table=True):
    """A scheduled, bookable event instance."""

    __tablename__ = "events"

    id: Optional[int] = Field(default=None, primary_key=True)
    event_id: str = Field(nullable=False, max_length=64, index=True)
    session_template_id: str = Field(default="", max_length=64, index=True)
    event_name: str = Field(default="", max_length=255)
    category: str = Field(default="", max_length=100)

    # Schedule (text as entered)
    date: str = Field(default="", max_length=50, index=True)
    time: str = Field(default="", max_length=50)
    end_time: str = Field(default="", max_length=50)
    duration_minutes: Optional[int] = Field(default=None)

    # Place
    location: str = Field(default="", max_length=500)
    borough: str = Field(default="", max_length=100)

    # Commercial
    base_price: str = Field(default="", max_length=50)
    spots_remaining: Optional[int] = Field(default=None)
    active: str = Field(default="", max_length=20)

    # Targeting
    gender_target: str = Field(default="", max_length=50)
    motivation_tags: str = Field(default="", description="Comma-separated")
    session_format: str = Field(default="", max_length=100)

    # Links
    booking_url: str = Field(default="", max_length=500)
    attendee_list_url: str = Field(default="", max_length=500)
    image_url: str = Field(default="", max_length=500)
