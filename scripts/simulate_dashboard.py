"""What would the dashboard show the demo user TODAY?

Maps the demo rows through the same row → schema step the API uses and
prints the computed dashboard, without touching a database.

Usage:
    python scripts/simulate_dashboard.py
"""

import datetime
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.dashboard.engine import compute_dashboard
from app.models import BookingRow, EventRow, SessionTemplateRow, UserProfileRow
from app.services.dashboard_service import (booking_from_row, event_from_row, profile_from_row,
                                            template_from_row, )
from scripts.demo_data import BOOKINGS, EVENTS, PROFILES, TEMPLATES, TODAY


def main() -> None:
    profile = profile_from_row(UserProfileRow(**PROFILES[0]))
    templates = [template_from_row(SessionTemplateRow(**t)) for t in TEMPLATES]
    by_id = {t.session_template_id: t for t in templates}
    events = [event_from_row(EventRow(**e), by_id.get(e["session_template_id"])) for e in EVENTS]
    bookings = [booking_from_row(BookingRow(**b)) for b in BOOKINGS]

    now = datetime.datetime.combine(TODAY, datetime.time(9, 0))
    result = compute_dashboard(profile, bookings, events, now, templates=templates)

    print("=" * 70)
    print(f"Dashboard for {profile.first_name} {profile.last_name} as of {TODAY}")
    print("=" * 70)

    print("\nUpcoming:")
    for card in result.upcoming_sessions:
        print(f"  {card.date}  {card.title:<35} {card.badge or '':<10} {card.borough}")

    print(f"\nPast ({result.past_sessions_total}):")
    for card in result.past_sessions:
        print(f"  {card.date}  {card.title:<35} {card.attendance_status}")

    s = result.stats
    print("\nStats:")
    print(f"  booked={s.total_booked} attended={s.total_attended} hours={s.total_hours_played} "
          f"spent=£{s.total_spent:.2f}")
    print(f"  most played: {s.most_played_sport}  most common day: {s.most_common_day}")

    print("\nRecommended:")
    for rec in result.recommendations:
        print(f"  {rec.display_percentage:>3}% ({rec.score:>3})  {rec.title:<35} {rec.reason}")


if __name__ == "__main__":
    main()
