"""Tests for the eligibility filter."""

import datetime

import pytest

from app.dashboard.eligibility import (
    filter_candidates,
    gender_compatibility,
    is_active,
    is_children_session,
    is_future_or_today,
)
from app.schemas.event import Event
from app.schemas.profile import UserProfile

NOW = datetime.datetime(2026, 10, 18, 21, 45)
TODAY = NOW.date()


# ======================================================================
# Helpers
# ======================================================================


def _make_event(event_id: str = "E1", **overrides) -> Event:
    defaults = {
        "event_id": event_id,
        "event_name": "Social Netball",
        "category": "Netball",
        "date": "2026-10-20",
        "active": "TRUE",
    }
    defaults.update(overrides)
    return Event(**defaults)


def _make_profile(**overrides) -> UserProfile:
    defaults = {"email": "player@example.com", "gender": "Female"}
    defaults.update(overrides)
    return UserProfile(**defaults)


def _ids(events: list[Event]) -> list[str]:
    return [e.event_id for e in events]


# ======================================================================
# Individual rules
# ======================================================================


class TestIsActive:
    @pytest.mark.parametrize("value", ["TRUE", "true", "Yes", " yes "])
    def test_active_values(self, value):
        assert is_active(_make_event(active=value))

    @pytest.mark.parametrize("value", ["FALSE", "no", "", "1", "active"])
    def test_inactive_values(self, value):
        assert not is_active(_make_event(active=value))


class TestIsFutureOrToday:
    def test_today_is_eligible_regardless_of_time(self):
        # NOW is late in the evening; an event earlier today still counts.
        assert is_future_or_today(_make_event(date="2026-10-18"), TODAY)

    def test_future(self):
        assert is_future_or_today(_make_event(date="2026-12-01"), TODAY)

    def test_yesterday(self):
        assert not is_future_or_today(_make_event(date="2026-10-17"), TODAY)

    def test_uk_date_with_time(self):
        assert is_future_or_today(_make_event(date="19/10/2026 18:00"), TODAY)

    def test_unparseable_date(self):
        assert not is_future_or_today(_make_event(date="TBC"), TODAY)
        assert not is_future_or_today(_make_event(date=""), TODAY)


class TestIsChildrenSession:
    def test_keyword_in_name(self):
        assert is_children_session(_make_event(event_name="Kids Boxing Club", category="Boxing"))

    def test_keyword_in_category(self):
        assert is_children_session(_make_event(event_name="Saturday Session", category="Junior Football"))

    def test_adult_session(self):
        assert not is_children_session(_make_event())


class TestGenderCompatibility:
    def test_empty_target(self):
        assert gender_compatibility("", "Male") == (True, False)

    def test_empty_user_gender(self):
        assert gender_compatibility("Women only", "") == (True, False)

    def test_women_only_for_women(self):
        assert gender_compatibility("Women only", "Female") == (True, True)
        assert gender_compatibility("women only session", "woman") == (True, True)

    def test_women_only_for_men(self):
        assert gender_compatibility("Women only", "Male") == (False, False)
        assert gender_compatibility("Women Only", "m") == (False, False)

    def test_women_only_not_mistaken_for_men_only(self):
        # "women only" contains the substring "men only".
        assert gender_compatibility("Women only", "Female").compatible

    def test_men_only(self):
        assert gender_compatibility("Men only", "Male") == (True, True)
        assert gender_compatibility("Men", "man") == (True, True)
        assert gender_compatibility("Men only", "Female") == (False, False)

    def test_mixed_or_unrecognised(self):
        assert gender_compatibility("Mixed", "Male") == (True, False)
        assert gender_compatibility("Open to all", "Female") == (True, False)

    def test_unrecognised_user_gender(self):
        assert gender_compatibility("Women only", "Non-binary") == (True, False)
        assert gender_compatibility("Men only", "Prefer not to say") == (True, False)


# ======================================================================
# filter_candidates
# ======================================================================


class TestFilterCandidates:
    def test_keeps_catalog_order(self):
        events = [_make_event("E3"), _make_event("E1"), _make_event("E2")]
        assert _ids(filter_candidates(events, set(), NOW, _make_profile())) == ["E3", "E1", "E2"]

    def test_accepts_a_plain_date(self):
        events = [_make_event("E1", date="2026-10-18")]
        assert _ids(filter_candidates(events, set(), TODAY, _make_profile())) == ["E1"]

    def test_excludes_each_rule(self):
        events = [
            _make_event("ok"),
            _make_event("past", date="2026-10-01"),
            _make_event("bad-date", date="someday"),
            _make_event("inactive", active="FALSE"),
            _make_event("booked"),
            _make_event("kids", event_name="Under 12s Netball"),
            _make_event("men", gender_target="Men only"),
        ]
        result = filter_candidates(events, {"booked"}, NOW, _make_profile(gender="Female"))
        assert _ids(result) == ["ok"]

    def test_women_only_never_offered_to_men(self):
        events = [_make_event("W", gender_target="Women only"), _make_event("M")]
        result = filter_candidates(events, set(), NOW, _make_profile(gender="Male"))
        assert _ids(result) == ["M"]

    def test_no_profile_skips_gender_rule(self):
        events = [_make_event("W", gender_target="Women only")]
        assert _ids(filter_candidates(events, set(), NOW, None)) == ["W"]

    def test_empty_catalog(self):
        assert filter_candidates([], set(), NOW, _make_profile()) == []
