"""
Affinity scorer — how well a candidate event fits a user.

Each candidate starts at 0 and accumulates additive points for every
matched factor, in a fixed evaluation order:

    sport (80) → borough (35) | region (25) → gender (30) →
    motivation (25) → skill (25) → format (20) → day (20) →
    time of day (15) → price (10)

Every matched factor also contributes a short reason phrase; the phrases
are joined in the same order into the human-readable reason.

If the user has recorded at least one preferred sport and none of them
matched, the whole accumulated score is dampened once, after all
factors, to ``floor(score * no_sport_match_factor)``.

Weights and the dampening factor come from
:class:`~app.dashboard.config.RecommendationConfig`.
"""

from __future__ import annotations

import math
from typing import Iterable, Optional

from app.dashboard.config import DEFAULT_CONFIG, RecommendationConfig
from app.dashboard.eligibility import gender_compatibility
from app.dashboard.normalize import borough_region, day_of_week, extract_borough
from app.schemas.dashboard import ScoredEvent
from app.schemas.event import Event
from app.schemas.profile import UserProfile
from app.sports import SportMatcherRegistry

# Order matters: the first keyword found in the event name wins.
SKILL_KEYWORDS: list[str] = ["all levels", "mixed ability", "beginner", "intermediate", "advanced"]
_OPEN_SKILL_KEYWORDS = {"all levels", "mixed ability"}

DEFAULT_REASON = "New session in your area"
REASON_SEPARATOR = ", "


# ======================================================================
# Helpers
# ======================================================================


def event_borough(event: Event) -> str:
    """Explicit borough, or the one derived from the venue text."""
    return event.borough.strip() or extract_borough(event.location)


def detect_skill_keyword(event_name: str) -> Optional[str]:
    """First skill keyword contained in *event_name* (lowercase), if any."""
    lowered = (event_name or "").lower()
    for keyword in SKILL_KEYWORDS:
        if keyword in lowered:
            return keyword
    return None


def _lowered(values: Iterable[str]) -> list[str]:
    return [v.strip().lower() for v in values if v and v.strip()]


def _build_reason(reasons: list[str]) -> str:
    if not reasons:
        return DEFAULT_REASON
    text = REASON_SEPARATOR.join(reasons)
    return text[0].upper() + text[1:]


# ======================================================================
# Per-factor matching
# ======================================================================


def _match_sport(profile: UserProfile, event: Event) -> Optional[str]:
    """Return the first preferred sport matching *event*, if any."""
    for sport in profile.preferred_sports:
        if SportMatcherRegistry.matches(sport, event):
            return sport
    return None


def _match_geography(profile: UserProfile, borough: str) -> tuple[Optional[str], Optional[str]]:
    """Return ``(factor, reason)`` for the borough / region signal."""
    home = profile.home_borough.strip()
    if not home:
        return None, None

    if home.lower() in borough.lower():
        return "borough", "near your home borough"

    home_region = borough_region(home)
    if home_region is not None and home_region == borough_region(borough):
        return "region", f"in {home_region} London, close to home"

    return None, None


def _match_motivation(profile: UserProfile, event: Event) -> Optional[str]:
    event_tags = set(_lowered(event.motivation_tags))
    for motivation in profile.motivations:
        if motivation.strip().lower() in event_tags:
            return motivation.strip()
    return None


def _match_skill(profile: UserProfile, event: Event) -> Optional[str]:
    keyword = detect_skill_keyword(event.event_name)
    if keyword is None:
        return None
    if keyword in _OPEN_SKILL_KEYWORDS:
        return keyword

    fitness = profile.fitness_level.strip().lower()
    if fitness and (keyword == fitness or keyword in fitness):
        return keyword
    return None


def _match_day(profile: UserProfile, event: Event) -> Optional[str]:
    day = day_of_week(event.date)
    if day is None:
        return None
    if day.lower() in _lowered(profile.preferred_days):
        return day
    return None


def _match_time(profile: UserProfile, event: Event) -> Optional[str]:
    time_text = (event.start_time or "").lower()
    for bucket in profile.preferred_times:
        if bucket.strip() and bucket.strip().lower() in time_text:
            return bucket.strip()
    return None


# ======================================================================
# Main entry points
# ======================================================================


def score_event(event: Event, profile: UserProfile, config: Optional[RecommendationConfig] = None) -> ScoredEvent:
    """Compute the affinity score and reason of one candidate event.

    The caller is responsible for eligibility; this function never
    excludes, it only scores.
    """
    cfg = config or DEFAULT_CONFIG
    score = 0
    reasons: list[str] = []

    # --- Sport ---
    matched_sport = _match_sport(profile, event)
    if matched_sport is not None:
        score += cfg.weight("sport")
        reasons.append(f"matches your interest in {event.category or matched_sport}")

    # --- Geography ---
    factor, phrase = _match_geography(profile, event_borough(event))
    if factor is not None:
        score += cfg.weight(factor)
        reasons.append(phrase)

    # --- Gender demographic ---
    if gender_compatibility(event.gender_target, profile.gender).bonus:
        score += cfg.weight("gender")
        label = "women-only" if "women only" in event.gender_target.lower() else "men-only"
        reasons.append(f"{label} session")

    # --- Motivation ---
    motivation = _match_motivation(profile, event)
    if motivation is not None:
        score += cfg.weight("motivation")
        reasons.append(f"fits your goal: {motivation.lower()}")

    # --- Skill level ---
    skill = _match_skill(profile, event)
    if skill is not None:
        score += cfg.weight("skill")
        if skill in _OPEN_SKILL_KEYWORDS:
            reasons.append(f"open to {skill}")
        else:
            reasons.append(f"right for your {skill} level")

    # --- Session format ---
    user_format = profile.session_format.strip().lower()
    if user_format and user_format == event.session_format.strip().lower():
        score += cfg.weight("format")
        reasons.append(f"your preferred {event.session_format.strip().lower()} format")

    # --- Day ---
    day = _match_day(profile, event)
    if day is not None:
        score += cfg.weight("day")
        reasons.append(f"on a {day}")

    # --- Time of day ---
    bucket = _match_time(profile, event)
    if bucket is not None:
        score += cfg.weight("time")
        reasons.append(f"in the {bucket.lower()}")

    # --- Price ---
    if event.price <= cfg.price_bonus_max:
        score += cfg.weight("price")
        reasons.append("budget-friendly" if event.price <= cfg.budget_friendly_max else "good value")

    # --- No-sport-match dampening ---
    has_sports = any(s.strip() for s in profile.preferred_sports)
    if has_sports and matched_sport is None:
        score = math.floor(round(score * cfg.no_sport_match_factor, 6))

    return ScoredEvent(event=event, score=score, reasons=reasons, sport_matched=matched_sport is not None,
                       reason=_build_reason(reasons), )


def score_candidates(candidates: Iterable[Event], profile: UserProfile,
                     config: Optional[RecommendationConfig] = None, ) -> list[ScoredEvent]:
    """Score every candidate, preserving input order."""
    return [score_event(event, profile, config) for event in candidates]
