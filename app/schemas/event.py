"""
Event and session template schemas.

An :class:`Event` is one concrete, bookable occurrence.  Recurring
occurrences of the same activity share a ``session_template_id`` which
points at a :class:`SessionTemplate`.

Dates and times are kept as the text the data source supplied.  They are
parsed lazily by :mod:`app.dashboard.normalize`; an unparseable date
never raises, it simply fails every time-relative comparison.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SessionTemplate(BaseModel):
    """Recurring activity definition shared by several events."""

    model_config = ConfigDict(frozen=True)

    session_template_id: str
    title: str = ""
    sport: str = ""
    difficulty: str = ""
    default_duration_minutes: Optional[int] = Field(None, ge=0)
    tags: list[str] = Field(default_factory=list)
    description: str = ""


class Event(BaseModel):
    """One scheduled, bookable event instance."""

    model_config = ConfigDict(frozen=True)

    event_id: str
    session_template_id: str = Field("", description="Groups recurring instances; may be empty")
    event_name: str = ""
    category: str = Field("", description="Sport / category")
    date: str = Field("", description="Calendar date as supplied, ideally YYYY-MM-DD")
    start_time: str = ""
    end_time: str = ""
    location: str = Field("", description="Free-text venue string")
    borough: str = Field("", description="Explicit borough; derived from location when empty")
    price: float = Field(0.0, ge=0.0)
    spots_remaining: int = 0
    duration_minutes: int = Field(60, ge=0)
    active: str = Field("TRUE", description="'true' / 'yes' (any case) means bookable")
    gender_target: str = Field("", description="Empty / mixed, 'women only', 'men', 'men only'")
    motivation_tags: list[str] = Field(default_factory=list)
    session_format: str = ""
    booking_url: str = ""
    attendee_list_url: str = ""
    image_url: str = ""

    @property
    def template_key(self) -> str:
        """Deduplication key: template id, falling back to the event id."""
        return self.session_template_id or self.event_id
