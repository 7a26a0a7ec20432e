"""Database repositories."""

from app.db.repositories.booking import BookingRepository
from app.db.repositories.event import EventRepository, SessionTemplateRepository
from app.db.repositories.user_profile import UserProfileRepository

__all__ = [
    "UserProfileRepository",
    "EventRepository",
    "SessionTemplateRepository",
    "BookingRepository",
]
