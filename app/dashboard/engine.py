"""
Dashboard engine — the single aggregate call behind the dashboard.

Two independent flows over the same inputs:

    bookings + catalog ──► session partitioner ──► upcoming / past page
                      └──► stats aggregator    ──► stats

    profile + catalog + bookings ──► eligibility ──► scorer ──► ranker
                                                        ──► recommendations

Nothing is read from the clock: ``now`` is injected, so the result is
fully determined by the arguments.
"""

from __future__ import annotations

import datetime
import logging
from typing import Iterable, Optional

from app.dashboard.config import RecommendationConfig
from app.dashboard.eligibility import filter_candidates
from app.dashboard.ranking import rank_recommendations
from app.dashboard.scoring import score_candidates
from app.dashboard.sessions import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, partition_sessions
from app.dashboard.stats import compute_stats
from app.schemas.booking import Booking
from app.schemas.dashboard import DashboardResult, RecommendationCard
from app.schemas.event import Event, SessionTemplate
from app.schemas.profile import UserProfile

logger = logging.getLogger(__name__)


def compute_recommendations(profile: Optional[UserProfile], bookings: Iterable[Booking], events: Iterable[Event],
                            now: datetime.datetime, config: Optional[RecommendationConfig] = None, ) -> list[
    RecommendationCard]:
    """Eligibility → scoring → ranking for one user.

    Returns an empty list when there is no profile to score against.
    """
    if profile is None:
        return []

    booked_ids = {b.event_id for b in bookings if b.event_id}
    candidates = filter_candidates(events, booked_ids, now, profile)
    scored = score_candidates(candidates, profile, config)
    recommendations = rank_recommendations(scored, config)

    logger.debug("Recommendations for %s: %d candidates, %d recommended", profile.email, len(candidates),
                 len(recommendations))
    return recommendations


def compute_dashboard(profile: Optional[UserProfile], bookings: Iterable[Booking], all_events: Iterable[Event],
                      now: datetime.datetime, page: int = DEFAULT_PAGE, page_size: int = DEFAULT_PAGE_SIZE,
                      templates: Optional[Iterable[SessionTemplate]] = None,
                      config: Optional[RecommendationConfig] = None, ) -> DashboardResult:
    """Compute the full dashboard for one user.

    Args:
        profile: The user's profile (``None`` yields no recommendations).
        bookings: The user's bookings, in source order.
        all_events: Full event catalog.
        now: Reference moment; time-of-day is ignored.
        page: 1-indexed page of past sessions.
        page_size: Past sessions per page.
        templates: Optional session templates, used for card difficulty.
        config: Optional :class:`RecommendationConfig` override.

    Returns:
        :class:`DashboardResult` with upcoming sessions, the requested
        page of past sessions, the past total, stats and
        recommendations.
    """
    bookings = list(bookings)
    events = list(all_events)
    today = now.date() if isinstance(now, datetime.datetime) else now

    events_by_id: dict[str, Event] = {}
    for event in events:
        # First row wins on duplicate ids.
        events_by_id.setdefault(event.event_id, event)
    templates_by_id = {t.session_template_id: t for t in (templates or [])}

    sessions = partition_sessions(bookings, events_by_id, today, page, page_size, templates_by_id)
    stats = compute_stats(bookings, events_by_id, today)
    recommendations = compute_recommendations(profile, bookings, events, now, config)

    logger.debug("Dashboard: %d upcoming, %d/%d past, %d recommendations", len(sessions.upcoming),
                 len(sessions.past), sessions.past_total, len(recommendations))

    return DashboardResult(upcoming_sessions=sessions.upcoming, past_sessions=sessions.past,
                           past_sessions_total=sessions.past_total, stats=stats,
                           recommendations=recommendations, )
