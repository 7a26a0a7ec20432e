"""
User profile schema.

The profile is the preference record the recommendation engine scores
events against.  It is a read-only snapshot for the duration of one
request.
"""

from pydantic import BaseModel, ConfigDict, Field


class UserProfile(BaseModel):
    """Identity and preference record for a single platform user."""

    model_config = ConfigDict(frozen=True)

    email: str = Field(..., description="Unique key, matched case/whitespace-insensitively")
    first_name: str = ""
    last_name: str = ""
    home_borough: str = Field("", description="Free-text home borough")
    preferred_sports: list[str] = Field(default_factory=list,
                                        description="Ordered, may contain duplicates")
    preferred_days: list[str] = Field(default_factory=list, description="English weekday names")
    preferred_times: list[str] = Field(default_factory=list,
                                       description="Coarse buckets: Morning / Afternoon / Evening")
    fitness_level: str = ""
    motivations: list[str] = Field(default_factory=list)
    session_format: str = ""
    gender: str = ""
