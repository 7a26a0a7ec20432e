"""
Recommendation tuning — encapsulated, not hard-coded.

Every weight, threshold and cap used by the scorer and the ranker lives
in :class:`RecommendationConfig` so that alternative configurations can
be injected in tests without touching the algorithms.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# Additive points per matched factor.
_DEFAULT_WEIGHTS: dict[str, int] = {
    "sport": 80,
    "borough": 35,
    "region": 25,  # only when the exact borough match fails
    "gender": 30,
    "motivation": 25,
    "skill": 25,
    "format": 20,
    "day": 20,
    "time": 15,
    "price": 10,
}


class RecommendationConfig(BaseModel):
    """Configuration for candidate scoring and ranking."""

    weights: dict[str, int] = Field(default_factory=lambda: dict(_DEFAULT_WEIGHTS))

    # Applied once, after all additive factors, when the user has
    # preferred sports and none of them matched.
    no_sport_match_factor: float = Field(0.4, ge=0.0, le=1.0)

    min_score: int = Field(60, ge=0, description="Quality floor for the final list")
    max_results: int = Field(5, ge=1, le=20)

    price_bonus_max: float = Field(10.0, ge=0.0)
    budget_friendly_max: float = Field(5.0, ge=0.0)

    def weight(self, factor: str) -> int:
        return self.weights.get(factor, 0)


# Singleton default config
DEFAULT_CONFIG = RecommendationConfig()

# Substituted for bookings whose event can no longer be resolved.
DEFAULT_SESSION_MINUTES = 90
