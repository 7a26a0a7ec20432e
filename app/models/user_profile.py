"""
User profile database model.

One row per onboarded player.  List-valued preferences are stored as
comma-separated text, the way the onboarding form collects them.
"""

from typing import Optional

from sqlmodel import Field, SQLModel


class UserProfileRow(SQLModel, table=True):
    """Onboarding record of a player."""

    __tablename__ = "user_profiles"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255, nullable=False)
    full_name: str = Field(default="", max_length=255)
    home_borough: str = Field(default="", max_length=255)

    # Preferences
    favourite_activity: str = Field(default="", max_length=255)
    other_activities: str = Field(default="", description="Comma-separated")
    preferred_days: str = Field(default="", description="Comma-separated weekday names")
    preferred_times: str = Field(default="", description="Comma-separated Morning / Afternoon / Evening")
    experience_level: str = Field(default="", max_length=100)
    motivations: str = Field(default="", description="Comma-separated")
    session_format: str = Field(default="", max_length=100)
    gender: str = Field(default="", max_length=50)
