"""End-to-end tests for the pure dashboard computation."""

import datetime

from app.dashboard.config import RecommendationConfig
from app.dashboard.engine import compute_dashboard, compute_recommendations
from app.schemas.booking import Booking
from app.schemas.event import Event, SessionTemplate
from app.schemas.profile import UserProfile

NOW = datetime.datetime(2026, 10, 18, 9, 0)


# ======================================================================
# Helpers
# ======================================================================


def _make_profile(**overrides) -> UserProfile:
    defaults = {
        "email": "sam@example.com",
        "first_name": "Sam",
        "home_borough": "Hackney",
        "preferred_sports": ["Football"],
        "gender": "Male",
    }
    defaults.update(overrides)
    return UserProfile(**defaults)


def _make_event(event_id: str, **overrides) -> Event:
    defaults = {
        "event_id": event_id,
        "session_template_id": f"T-{event_id}",
        "event_name": "Sunday League",
        "category": "Football",
        "date": "2026-10-25",
        "start_time": "10:00",
        "borough": "Hackney",
        "price": 8.0,
    }
    defaults.update(overrides)
    return Event(**defaults)


def _catalog() -> list[Event]:
    return [
        _make_event("F1"),
        _make_event("F2", session_template_id="T-F1", date="2026-11-01"),
        _make_event("W1", gender_target="Women only", category="Football", event_name="Women's Football"),
        _make_event("K1", event_name="Kids Football"),
        _make_event("OLD", date="2026-10-01"),
        _make_event("OFF", active="FALSE"),
        _make_event("N1", category="Netball", event_name="Netball Social", borough="Croydon", price=12.0),
        _make_event("BOOKED"),
    ]


def _bookings() -> list[Booking]:
    return [
        Booking(booking_id="B1", event_id="OLD", customer_email="sam@example.com", amount_paid="£8.00"),
        Booking(booking_id="B2", event_id="BOOKED", customer_email="sam@example.com", amount_paid="£8.00"),
    ]


# ======================================================================
# Recommendations
# ======================================================================


class TestComputeRecommendations:
    def test_no_profile(self):
        assert compute_recommendations(None, _bookings(), _catalog(), NOW) == []

    def test_eligibility_dedupe_and_floor(self):
        cards = compute_recommendations(_make_profile(), _bookings(), _catalog(), NOW)
        # F2 shares F1's template; W1 is women-only; K1 is a kids session;
        # OLD is past; OFF inactive; BOOKED booked; N1 scores under the floor.
        assert [c.event_id for c in cards] == ["F1"]
        assert cards[0].score == 125
        assert cards[0].display_percentage == 81

    def test_women_only_for_female_user(self):
        cards = compute_recommendations(_make_profile(gender="Female"), _bookings(), _catalog(), NOW)
        ids = [c.event_id for c in cards]
        assert "W1" in ids
        # The women-only bonus ranks it first.
        assert ids[0] == "W1"

    def test_every_recommendation_clears_the_floor(self):
        cards = compute_recommendations(_make_profile(), [], _catalog(), NOW)
        assert cards
        assert all(c.score >= 60 for c in cards)

    def test_config_override(self):
        config = RecommendationConfig(min_score=0, max_results=10)
        cards = compute_recommendations(_make_profile(), _bookings(), _catalog(), NOW, config)
        assert "N1" in [c.event_id for c in cards]


# ======================================================================
# Full dashboard
# ======================================================================


class TestComputeDashboard:
    def test_sections(self):
        result = compute_dashboard(_make_profile(), _bookings(), _catalog(), NOW)
        assert [c.booking_id for c in result.upcoming_sessions] == ["B2"]
        assert [c.booking_id for c in result.past_sessions] == ["B1"]
        assert result.past_sessions_total == 1
        assert result.stats.total_booked == 2
        assert result.stats.total_attended == 1
        assert result.stats.total_spent == 16.0
        assert [c.event_id for c in result.recommendations] == ["F1"]

    def test_idempotent(self):
        first = compute_dashboard(_make_profile(), _bookings(), _catalog(), NOW)
        second = compute_dashboard(_make_profile(), _bookings(), _catalog(), NOW)
        assert first.model_dump() == second.model_dump()

    def test_no_profile_still_lists_sessions(self):
        result = compute_dashboard(None, _bookings(), _catalog(), NOW)
        assert result.recommendations == []
        assert len(result.upcoming_sessions) == 1

    def test_first_event_row_wins_on_duplicate_ids(self):
        events = [_make_event("E1", event_name="First"), _make_event("E1", event_name="Second")]
        bookings = [Booking(booking_id="B1", event_id="E1")]
        result = compute_dashboard(None, bookings, events, NOW)
        assert result.upcoming_sessions[0].title == "First"

    def test_templates_supply_difficulty(self):
        templates = [SessionTemplate(session_template_id="T-E1", difficulty="Beginner")]
        bookings = [Booking(booking_id="B1", event_id="E1")]
        result = compute_dashboard(None, bookings, [_make_event("E1")], NOW, templates=templates)
        assert result.upcoming_sessions[0].difficulty == "Beginner"

    def test_pagination_passthrough(self):
        events = [_make_event(f"P{i}", date="2026-09-%02d" % (i + 1)) for i in range(12)]
        bookings = [Booking(booking_id=f"B{i}", event_id=f"P{i}") for i in range(12)]
        result = compute_dashboard(None, bookings, events, NOW, page=2, page_size=5)
        assert result.past_sessions_total == 12
        assert [c.booking_id for c in result.past_sessions] == ["B6", "B5", "B4", "B3", "B2"]

    def test_empty_inputs(self):
        result = compute_dashboard(_make_profile(), [], [], NOW)
        assert result.upcoming_sessions == []
        assert result.past_sessions == []
        assert result.past_sessions_total == 0
        assert result.stats.total_booked == 0
        assert result.recommendations == []
