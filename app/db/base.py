"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.user_profile import UserProfileRow  # noqa: F401
from app.models.event import EventRow, SessionTemplateRow  # noqa: F401
from app.models.booking import BookingRow  # noqa: F401
