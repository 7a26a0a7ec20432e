"""Pydantic schemas for the domain and the dashboard response."""

from app.schemas.booking import Booking
from app.schemas.dashboard import (
    DashboardResponse,
    DashboardResult,
    RecommendationCard,
    ScoredEvent,
    SessionCard,
    UserStats,
)
from app.schemas.event import Event, SessionTemplate
from app.schemas.profile import UserProfile

__all__ = [
    "UserProfile",
    "SessionTemplate",
    "Event",
    "Booking",
    "SessionCard",
    "ScoredEvent",
    "RecommendationCard",
    "UserStats",
    "DashboardResult",
    "DashboardResponse",
]
