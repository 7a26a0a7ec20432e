"""SQLModel database models."""

from app.models.booking import BookingRow
from app.models.event import EventRow, SessionTemplateRow
from app.models.user_profile import UserProfileRow

__all__ = [
    "UserProfileRow",
    "SessionTemplateRow",
    "EventRow",
    "BookingRow",
]
