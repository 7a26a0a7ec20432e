"""
Ranker & deduplicator — from scored candidates to recommendation cards.

1. Stable sort by score, descending (ties keep catalog order).
2. Drop everything under the quality floor.
3. Keep only the best-ranked event per session template.
4. Cap the list.
5. Attach a display percentage.
"""

from __future__ import annotations

from typing import Iterable, Optional

from app.dashboard.config import DEFAULT_CONFIG, RecommendationConfig
from app.dashboard.normalize import round_half_up
from app.dashboard.scoring import detect_skill_keyword, event_borough
from app.schemas.dashboard import RecommendationCard, ScoredEvent

# ======================================================================
# Display percentage
# ======================================================================

# (min_score, score_low, score_high, pct_low, pct_high), highest band first.
_DISPLAY_BANDS: list[tuple[int, float, float, int, int]] = [(120, 120, 260, 80, 100), (90, 90, 119, 60, 79),
                                                            (60, 60, 89, 40, 59), (40, 40, 59, 25, 39),
                                                            (0, 0, 39, 10, 24), ]


def display_percentage(score: float) -> int:
    """Map a raw score onto the 10–100 user-facing percentage.

    Piecewise linear per band; the fraction within a band is clamped to
    [0, 1] and the result rounded half-up.
    """
    for min_score, low, high, pct_low, pct_high in _DISPLAY_BANDS:
        if score >= min_score:
            fraction = min(max((score - low) / (high - low), 0.0), 1.0)
            return int(round_half_up(pct_low + fraction * (pct_high - pct_low)))
    # Negative scores do not occur; treat as the floor.
    return _DISPLAY_BANDS[-1][3]


# ======================================================================
# Ranking
# ======================================================================


def _to_card(scored: ScoredEvent) -> RecommendationCard:
    event = scored.event
    skill = detect_skill_keyword(event.event_name)
    return RecommendationCard(event_id=event.event_id, session_template_id=event.session_template_id,
                              title=event.event_name, sport=event.category, date=event.date, time=event.start_time,
                              end_time=event.end_time, venue=event.location, borough=event_borough(event),
                              price=event.price, spots_remaining=event.spots_remaining,
                              difficulty=skill.title() if skill else "", booking_url=event.booking_url,
                              image_url=event.image_url, score=scored.score,
                              display_percentage=display_percentage(scored.score), reason=scored.reason, )


def select_top(scored: Iterable[ScoredEvent], config: Optional[RecommendationConfig] = None) -> list[ScoredEvent]:
    """Sort, threshold, deduplicate by template and cap."""
    cfg = config or DEFAULT_CONFIG

    ranked = sorted(scored, key=lambda s: s.score, reverse=True)

    selected: list[ScoredEvent] = []
    seen_templates: set[str] = set()
    for item in ranked:
        if item.score < cfg.min_score:
            continue
        key = item.event.template_key
        if key in seen_templates:
            continue
        seen_templates.add(key)
        selected.append(item)
        if len(selected) >= cfg.max_results:
            break
    return selected


def rank_recommendations(scored: Iterable[ScoredEvent],
                         config: Optional[RecommendationConfig] = None, ) -> list[RecommendationCard]:
    """Turn scored candidates into the final recommendation cards."""
    return [_to_card(item) for item in select_top(scored, config)]
