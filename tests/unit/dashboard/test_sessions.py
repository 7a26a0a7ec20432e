"""Tests for the session partitioner."""

import datetime

import pytest

from app.dashboard.sessions import date_badge, dedupe_bookings, paginate, partition_sessions
from app.schemas.booking import Booking
from app.schemas.event import Event, SessionTemplate

TODAY = datetime.date(2026, 10, 18)


# ======================================================================
# Helpers
# ======================================================================


def _make_event(event_id: str, date: str, **overrides) -> Event:
    defaults = {
        "event_id": event_id,
        "event_name": f"Session {event_id}",
        "category": "Netball",
        "date": date,
        "start_time": "19:00",
        "location": "Mabley Green, Hackney",
        "price": 6.0,
    }
    defaults.update(overrides)
    return Event(**defaults)


def _make_booking(booking_id: str, event_id: str, **overrides) -> Booking:
    defaults = {
        "booking_id": booking_id,
        "event_id": event_id,
        "customer_email": "player@example.com",
        "amount_paid": "£6.00",
    }
    defaults.update(overrides)
    return Booking(**defaults)


def _by_id(*events: Event) -> dict[str, Event]:
    return {e.event_id: e for e in events}


def _ids(cards) -> list[str]:
    return [c.booking_id for c in cards]


# ======================================================================
# Badges
# ======================================================================


class TestDateBadge:
    @pytest.mark.parametrize(
        "days, expected",
        [
            (0, "Today"),
            (1, "Tomorrow"),
            (2, "This week"),
            (7, "This week"),
            (8, "Next week"),
            (14, "Next week"),
            (15, None),
            (-1, None),
        ],
    )
    def test_ranges(self, days, expected):
        assert date_badge(TODAY + datetime.timedelta(days=days), TODAY) == expected

    def test_unknown_date(self):
        assert date_badge(None, TODAY) is None


# ======================================================================
# Helpers under test
# ======================================================================


class TestDedupeBookings:
    def test_first_occurrence_wins(self):
        first = _make_booking("B1", "E1", status="Confirmed")
        again = _make_booking("B1", "E1", status="Cancelled")
        assert dedupe_bookings([first, again, _make_booking("B2", "E2")]) == [first, _make_booking("B2", "E2")]

    def test_bookings_without_id_are_kept(self):
        bookings = [_make_booking("", "E1"), _make_booking("", "E2")]
        assert len(dedupe_bookings(bookings)) == 2


class TestPaginate:
    def test_pages(self):
        items = list(range(25))
        assert paginate(items, 1, 10) == list(range(10))
        assert paginate(items, 3, 10) == list(range(20, 25))

    def test_beyond_last_page(self):
        assert paginate(list(range(5)), 4, 10) == []

    def test_non_positive_values_are_clamped(self):
        assert paginate([1, 2, 3], 0, 0) == [1]


# ======================================================================
# partition_sessions
# ======================================================================


class TestPartitionSessions:
    def test_split_around_today(self):
        events = _by_id(_make_event("E1", "2026-10-17"), _make_event("E2", "2026-10-18"),
                        _make_event("E3", "2026-10-25"))
        bookings = [_make_booking("B1", "E1"), _make_booking("B2", "E2"), _make_booking("B3", "E3")]
        result = partition_sessions(bookings, events, TODAY)
        assert _ids(result.upcoming) == ["B2", "B3"]
        assert _ids(result.past) == ["B1"]
        assert result.past_total == 1

    def test_sort_orders(self):
        events = _by_id(_make_event("U2", "2026-11-01"), _make_event("U1", "2026-10-19"),
                        _make_event("P1", "2026-10-01"), _make_event("P2", "2026-09-01"),
                        _make_event("P3", "2026-10-10"))
        bookings = [_make_booking(f"B-{e}", e) for e in ["U2", "P2", "U1", "P1", "P3"]]
        result = partition_sessions(bookings, events, TODAY)
        assert _ids(result.upcoming) == ["B-U1", "B-U2"]
        assert _ids(result.past) == ["B-P3", "B-P1", "B-P2"]

    def test_upcoming_card(self):
        events = _by_id(_make_event("E1", "2026-10-19"))
        card = partition_sessions([_make_booking("B1", "E1")], events, TODAY).upcoming[0]
        assert card.title == "Session E1"
        assert card.sport == "Netball"
        assert card.date == "2026-10-19"
        assert card.time == "19:00"
        assert card.venue == "Mabley Green, Hackney"
        assert card.borough == "Hackney"
        assert card.price == 6.0
        assert card.badge == "Tomorrow"
        assert card.attendance_status is None

    def test_past_card_carries_status(self):
        events = _by_id(_make_event("E1", "2026-10-01"))
        booking = _make_booking("B1", "E1", status="No-show")
        card = partition_sessions([booking], events, TODAY).past[0]
        assert card.attendance_status == "No-show"
        assert card.badge is None

    def test_missing_event_uses_booking_snapshot(self):
        booking = _make_booking("B1", "GONE", event_name="Old Session", event_date="2026-09-01",
                                event_time="10:00", event_location="Victoria Park, Tower Hamlets",
                                amount_paid="£7.50")
        result = partition_sessions([booking], {}, TODAY)
        card = result.past[0]
        assert card.title == "Old Session"
        assert card.date == "2026-09-01"
        assert card.time == "10:00"
        assert card.venue == "Victoria Park, Tower Hamlets"
        assert card.borough == "Tower Hamlets"
        assert card.price == 7.5
        assert card.sport == ""

    def test_difficulty_from_booking_then_template(self):
        templates = {"T1": SessionTemplate(session_template_id="T1", difficulty="Intermediate")}
        events = _by_id(_make_event("E1", "2026-10-20", session_template_id="T1"),
                        _make_event("E2", "2026-10-21", session_template_id="T1"))
        bookings = [_make_booking("B1", "E1", skill_level="Beginner"), _make_booking("B2", "E2")]
        result = partition_sessions(bookings, events, TODAY, templates_by_id=templates)
        assert [c.difficulty for c in result.upcoming] == ["Beginner", "Intermediate"]

    def test_unparseable_date_is_upcoming_and_last(self):
        events = _by_id(_make_event("E1", "TBC"), _make_event("E2", "2026-12-01"))
        bookings = [_make_booking("B1", "E1"), _make_booking("B2", "E2")]
        result = partition_sessions(bookings, events, TODAY)
        assert _ids(result.upcoming) == ["B2", "B1"]
        assert result.upcoming[1].badge is None
        assert result.past_total == 0

    def test_duplicates_counted_once(self):
        events = _by_id(_make_event("E1", "2026-10-01"))
        bookings = [_make_booking("B1", "E1"), _make_booking("B1", "E1")]
        result = partition_sessions(bookings, events, TODAY)
        assert result.past_total == 1

    def test_every_unique_booking_lands_somewhere(self):
        dates = ["2026-10-%02d" % d for d in range(1, 31)]
        events = _by_id(*[_make_event(f"E{i}", d) for i, d in enumerate(dates)])
        bookings = [_make_booking(f"B{i}", f"E{i}") for i in range(len(dates))]
        bookings.append(_make_booking("B0", "E0"))
        result = partition_sessions(bookings, events, TODAY, page=1, page_size=5)
        assert len(result.upcoming) + result.past_total == len(dates)

    def test_pagination(self):
        events = _by_id(*[_make_event(f"E{i}", "2026-09-%02d" % (i + 1)) for i in range(25)])
        bookings = [_make_booking(f"B{i}", f"E{i}") for i in range(25)]

        page_one = partition_sessions(bookings, events, TODAY, page=1, page_size=10)
        page_three = partition_sessions(bookings, events, TODAY, page=3, page_size=10)

        assert page_one.past_total == page_three.past_total == 25
        assert len(page_one.past) == 10
        assert _ids(page_one.past)[0] == "B24"
        assert _ids(page_three.past) == ["B4", "B3", "B2", "B1", "B0"]

    def test_no_bookings(self):
        result = partition_sessions([], {}, TODAY)
        assert result.upcoming == []
        assert result.past == []
        assert result.past_total == 0
