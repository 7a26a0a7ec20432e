"""
Stats aggregator — participation summary over a user's bookings.

Status text has no fixed vocabulary, so it is interpreted by keyword:

- a booking in the past **counts as attended** unless its status
  mentions a cancellation or a no-show ("Confirmed", "Completed",
  "Attended" and unknown values all count);
- spend includes every booking except cancelled ones.
"""

from __future__ import annotations

import datetime
from collections import Counter
from typing import Iterable, Mapping, Optional

from app.dashboard.config import DEFAULT_SESSION_MINUTES
from app.dashboard.normalize import day_of_week, parse_date, parse_price, round_half_up
from app.dashboard.sessions import resolved_date
from app.schemas.booking import Booking
from app.schemas.dashboard import UserStats
from app.schemas.event import Event

CANCELLATION_KEYWORDS: list[str] = ["cancelled", "cancel"]
NO_SHOW_KEYWORDS: list[str] = ["no-show", "no show", "noshow"]


def _status_mentions(status: str, keywords: list[str]) -> bool:
    lowered = (status or "").lower()
    return any(keyword in lowered for keyword in keywords)


def is_cancelled(booking: Booking) -> bool:
    return _status_mentions(booking.status, CANCELLATION_KEYWORDS)


def is_attended(booking: Booking, event: Optional[Event], today: datetime.date) -> bool:
    """Past booking without a cancellation / no-show status."""
    event_date = parse_date(resolved_date(booking, event))
    if event_date is None or event_date >= today:
        return False
    return not _status_mentions(booking.status, CANCELLATION_KEYWORDS + NO_SHOW_KEYWORDS)


def _most_common(counter: Counter) -> Optional[str]:
    # Counter keeps first-encountered order among equal counts.
    if not counter:
        return None
    return counter.most_common(1)[0][0]


def compute_stats(bookings: Iterable[Booking], events_by_id: Mapping[str, Event],
                  today: datetime.date, ) -> UserStats:
    """Compute :class:`UserStats` for the given bookings."""
    bookings = list(bookings)

    attended = []
    for booking in bookings:
        event = events_by_id.get(booking.event_id)
        if is_attended(booking, event, today):
            attended.append((booking, event))

    total_spent = sum(parse_price(b.amount_paid) for b in bookings if not is_cancelled(b))

    total_minutes = sum(event.duration_minutes if event is not None else DEFAULT_SESSION_MINUTES
                        for _, event in attended)

    sport_counts = Counter(event.category.strip() for _, event in attended
                           if event is not None and event.category.strip())
    day_counts = Counter(day for day in (day_of_week(resolved_date(b, e)) for b, e in attended) if day)

    return UserStats(total_booked=len(bookings), total_attended=len(attended),
                     total_hours_played=round_half_up(total_minutes / 60, 1),
                     total_spent=round_half_up(total_spent, 2), most_played_sport=_most_common(sport_counts),
                     most_common_day=_most_common(day_counts), )
