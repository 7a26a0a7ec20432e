"""
Session partitioner — a user's bookings as upcoming and past cards.

Bookings are deduplicated by booking id (first occurrence wins), joined
with their event and split around *today*:

- **upcoming** — event date today or later, sorted ascending, carries a
  relative badge;
- **past** — event date strictly before today, sorted descending,
  carries the booking status as attendance label, paginated.

When the referenced event no longer exists the booking's own snapshot
fields stand in.  A booking whose date cannot be parsed is treated as
upcoming with no badge and sorts after every dated upcoming card.
"""

from __future__ import annotations

import datetime
from typing import Iterable, Mapping, NamedTuple, Optional

from app.dashboard.normalize import extract_borough, parse_date, parse_price
from app.schemas.booking import Booking
from app.schemas.dashboard import SessionCard
from app.schemas.event import Event, SessionTemplate

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10


class PartitionedSessions(NamedTuple):
    upcoming: list[SessionCard]
    past: list[SessionCard]
    past_total: int


# ======================================================================
# Badges
# ======================================================================


def date_badge(event_date: Optional[datetime.date], today: datetime.date) -> Optional[str]:
    """Relative label for an upcoming session, ``None`` beyond two weeks."""
    if event_date is None:
        return None
    days = (event_date - today).days
    if days == 0:
        return "Today"
    if days == 1:
        return "Tomorrow"
    if 2 <= days <= 7:
        return "This week"
    if 8 <= days <= 14:
        return "Next week"
    return None


# ======================================================================
# Helpers
# ======================================================================


def dedupe_bookings(bookings: Iterable[Booking]) -> list[Booking]:
    """Keep the first booking per booking id, preserving order.

    Bookings without an id cannot be compared and are all kept.
    """
    seen: set[str] = set()
    unique = []
    for booking in bookings:
        key = booking.booking_id.strip()
        if key:
            if key in seen:
                continue
            seen.add(key)
        unique.append(booking)
    return unique


def resolved_date(booking: Booking, event: Optional[Event]) -> str:
    """Event date text, falling back to the booking snapshot."""
    return (event.date if event is not None else "") or booking.event_date


def build_card(booking: Booking, event: Optional[Event], is_past: bool, today: datetime.date,
               template: Optional[SessionTemplate] = None, ) -> SessionCard:
    """Project a booking (joined with its event, if any) into a card."""
    title = (event.event_name if event else "") or booking.event_name
    date_text = resolved_date(booking, event)
    time_text = (event.start_time if event else "") or booking.event_time
    venue = (event.location if event else "") or booking.event_location
    price = (event.price if event else 0.0) or parse_price(booking.amount_paid)
    sport = event.category if event else ""
    borough = (event.borough.strip() if event else "") or extract_borough(venue)
    difficulty = booking.skill_level or (template.difficulty if template else "")

    return SessionCard(event_id=booking.event_id, title=title, sport=sport, date=date_text, time=time_text,
                       venue=venue, borough=borough, price=price,
                       badge=None if is_past else date_badge(parse_date(date_text), today),
                       difficulty=difficulty, booking_id=booking.booking_id,
                       attendance_status=booking.status if is_past else None, )


def paginate(items: list, page: int, page_size: int) -> list:
    """1-indexed slice ``[(page-1)*page_size, page*page_size)``."""
    page = max(page, 1)
    page_size = max(page_size, 1)
    start = (page - 1) * page_size
    return items[start:start + page_size]


# ======================================================================
# Main entry point
# ======================================================================


def partition_sessions(bookings: Iterable[Booking], events_by_id: Mapping[str, Event], today: datetime.date,
                       page: int = DEFAULT_PAGE, page_size: int = DEFAULT_PAGE_SIZE,
                       templates_by_id: Optional[Mapping[str, SessionTemplate]] = None, ) -> PartitionedSessions:
    """Split bookings into upcoming cards and a page of past cards.

    Returns:
        :class:`PartitionedSessions` — all upcoming cards, the requested
        page of past cards, and the total number of past cards.
    """
    templates_by_id = templates_by_id or {}

    upcoming: list[tuple[Optional[datetime.date], SessionCard]] = []
    past: list[tuple[datetime.date, SessionCard]] = []

    for booking in dedupe_bookings(bookings):
        event = events_by_id.get(booking.event_id)
        template = templates_by_id.get(event.session_template_id) if event else None
        event_date = parse_date(resolved_date(booking, event))
        is_past = event_date is not None and event_date < today

        card = build_card(booking, event, is_past, today, template)
        if is_past:
            past.append((event_date, card))
        else:
            upcoming.append((event_date, card))

    upcoming.sort(key=lambda pair: (pair[0] is None, pair[0] or datetime.date.max))
    past.sort(key=lambda pair: pair[0], reverse=True)

    past_cards = [card for _, card in past]
    return PartitionedSessions(upcoming=[card for _, card in upcoming],
                               past=paginate(past_cards, page, page_size), past_total=len(past_cards), )
