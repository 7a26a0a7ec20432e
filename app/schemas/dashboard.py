"""
Dashboard schemas.

Display-ready projections returned to the client:

- :class:`SessionCard` — a booking joined with its event
- :class:`RecommendationCard` — an unbooked future event with its score
- :class:`UserStats` — participation aggregate, recomputed per request
"""

from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.event import Event
from app.schemas.profile import UserProfile


class SessionCard(BaseModel):
    """A booked session, upcoming or past."""

    event_id: str
    title: str
    sport: str
    date: str
    time: str
    venue: str
    borough: str
    price: float
    badge: Optional[str] = Field(None, description="Today / Tomorrow / This week / Next week "
                                                   "(upcoming only)", )
    difficulty: str = ""
    booking_id: str
    attendance_status: Optional[str] = Field(None, description="Booking status text (past only)")


class ScoredEvent(BaseModel):
    """Intermediate scorer output: an eligible event with its score."""

    event: Event
    score: int = Field(..., ge=0)
    reasons: list[str] = Field(default_factory=list)
    sport_matched: bool = False
    reason: str


class RecommendationCard(BaseModel):
    """A recommended, not yet booked, future event."""

    event_id: str
    session_template_id: str = ""
    title: str
    sport: str
    date: str
    time: str
    end_time: str = ""
    venue: str
    borough: str
    price: float
    spots_remaining: int = 0
    difficulty: str = ""
    booking_url: str = ""
    image_url: str = ""
    score: int
    display_percentage: int = Field(..., ge=0, le=100)
    reason: str


class UserStats(BaseModel):
    """Aggregate participation statistics."""

    total_booked: int = 0
    total_attended: int = 0
    total_hours_played: float = 0.0
    total_spent: float = 0.0
    most_played_sport: Optional[str] = None
    most_common_day: Optional[str] = None


class DashboardResult(BaseModel):
    """Output of the pure dashboard computation."""

    upcoming_sessions: list[SessionCard]
    past_sessions: list[SessionCard]
    past_sessions_total: int
    stats: UserStats
    recommendations: list[RecommendationCard]


class DashboardResponse(DashboardResult):
    """Dashboard as served over HTTP, with the profile it was computed for."""

    profile: UserProfile
