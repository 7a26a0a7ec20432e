"""
Seed the configured database with the demo data set.

Usage:
    python scripts/seed_demo.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from sqlmodel import Session

from app.db.init_db import init_db
from app.db.session import engine
from app.models import BookingRow, EventRow, SessionTemplateRow, UserProfileRow
from scripts.demo_data import BOOKINGS, DEMO_EMAIL, EVENTS, PROFILES, TEMPLATES

if __name__ == "__main__":
    init_db()
    with Session(engine) as session:
        session.add_all([UserProfileRow(**p) for p in PROFILES])
        session.add_all([SessionTemplateRow(**t) for t in TEMPLATES])
        session.add_all([EventRow(**e) for e in EVENTS])
        session.add_all([BookingRow(**b) for b in BOOKINGS])
        session.commit()

    print(f"Seeded {len(PROFILES)} profile(s), {len(TEMPLATES)} templates, "
          f"{len(EVENTS)} events, {len(BOOKINGS)} bookings.")
    print(f"Try: /api/v1/dashboard?email={DEMO_EMAIL}")
