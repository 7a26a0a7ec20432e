"""Demo data set shared by ``seed_demo.py`` and ``simulate_dashboard.py``.

Dates are laid out around ``TODAY`` so that the demo always shows
upcoming sessions, a page of history and a handful of recommendations.
"""

import datetime

TODAY = datetime.date(2026, 10, 18)
DEMO_EMAIL = "sam.taylor@example.com"


def _d(offset_days: int) -> str:
    return (TODAY + datetime.timedelta(days=offset_days)).isoformat()


PROFILES = [
    {
        "email": DEMO_EMAIL,
        "full_name": "Sam Taylor",
        "home_borough": "Hackney",
        "favourite_activity": "Football",
        "other_activities": "Netball, Boxing",
        "preferred_days": "Tuesday, Saturday",
        "preferred_times": "Evening",
        "experience_level": "Beginner",
        "motivations": "Meet new people, Get fit",
        "session_format": "Drop-in",
        "gender": "female",
    },
]

TEMPLATES = [
    {"session_template_id": "T-5AS", "title": "5-a-side Football", "sport": "Football",
     "difficulty": "All Levels", "default_duration_minutes": 60},
    {"session_template_id": "T-NET", "title": "Walking Netball", "sport": "Netball",
     "difficulty": "Beginner", "default_duration_minutes": 60},
    {"session_template_id": "T-BOX", "title": "Boxfit", "sport": "Boxing",
     "difficulty": "Intermediate", "default_duration_minutes": 45},
]

EVENTS = [
    # Past sessions the demo user attended
    {"event_id": "E-101", "session_template_id": "T-5AS", "event_name": "5-a-side Football All Levels",
     "category": "Football", "date": _d(-14), "time": "Evening 19:00", "end_time": "20:00",
     "location": "Haggerston Park, Hackney, London", "base_price": "£6", "active": "TRUE",
     "duration_minutes": 60},
    {"event_id": "E-102", "session_template_id": "T-NET", "event_name": "Walking Netball Beginners",
     "category": "Netball", "date": _d(-7), "time": "Morning 10:00", "end_time": "11:00",
     "location": "Mabley Green, Hackney, London", "base_price": "£4", "active": "TRUE",
     "duration_minutes": 60},
    # Upcoming, already booked
    {"event_id": "E-201", "session_template_id": "T-5AS", "event_name": "5-a-side Football All Levels",
     "category": "Football", "date": _d(3), "time": "Evening 19:00", "end_time": "20:00",
     "location": "Haggerston Park, Hackney, London", "base_price": "£6", "active": "TRUE",
     "duration_minutes": 60},
    # Candidates
    {"event_id": "E-301", "session_template_id": "T-5AS", "event_name": "5-a-side Football All Levels",
     "category": "Football", "date": _d(10), "time": "Evening 19:00", "end_time": "20:00",
     "location": "Haggerston Park, Hackney, London", "base_price": "£6", "active": "TRUE",
     "session_format": "Drop-in", "motivation_tags": "Meet new people"},
    {"event_id": "E-302", "session_template_id": "", "event_name": "Women Only Football Beginners",
     "category": "Football", "date": _d(4), "time": "Evening 18:30", "end_time": "19:30",
     "location": "Hackney Marshes Centre, Homerton Road, E9 5PF", "base_price": "£5", "active": "TRUE",
     "gender_target": "Women only", "motivation_tags": "Get fit, Meet new people"},
    {"event_id": "E-303", "session_template_id": "T-BOX", "event_name": "Boxfit Intermediate",
     "category": "Boxing", "date": _d(5), "time": "Evening 20:00", "end_time": "20:45",
     "location": "York Hall, Old Ford Road, Tower Hamlets", "base_price": "£8", "active": "yes"},
    {"event_id": "E-304", "session_template_id": "", "event_name": "American Football Social",
     "category": "American Football", "date": _d(6), "time": "Afternoon 14:00",
     "location": "Victoria Park, Tower Hamlets", "base_price": "£12", "active": "TRUE"},
    {"event_id": "E-305", "session_template_id": "", "event_name": "Junior Football Skills",
     "category": "Football", "date": _d(2), "time": "Morning 09:00",
     "location": "Clapton, Hackney", "base_price": "£3", "active": "TRUE"},
    {"event_id": "E-306", "session_template_id": "T-NET", "event_name": "Walking Netball Beginners",
     "category": "Netball", "date": _d(1), "time": "Morning 10:00", "end_time": "11:00",
     "location": "Mabley Green, Hackney, London", "base_price": "£4", "active": "TRUE"},
    {"event_id": "E-307", "session_template_id": "", "event_name": "Padel Social",
     "category": "Padel", "date": _d(8), "time": "Evening 19:00",
     "location": "Canary Wharf, Tower Hamlets", "base_price": "£15", "active": "FALSE"},
]

BOOKINGS = [
    {"booking_id": "B-1", "booking_date": _d(-20), "event_id": "E-101", "customer_email": DEMO_EMAIL,
     "amount_paid": "£6.00", "status": "Attended", "skill_level": "Beginner",
     "event_name": "5-a-side Football All Levels", "event_date": _d(-14), "event_time": "19:00",
     "event_location": "Haggerston Park, Hackney, London"},
    {"booking_id": "B-2", "booking_date": _d(-10), "event_id": "E-102", "customer_email": DEMO_EMAIL,
     "amount_paid": "£4.00", "status": "Confirmed", "skill_level": "",
     "event_name": "Walking Netball Beginners", "event_date": _d(-7), "event_time": "10:00",
     "event_location": "Mabley Green, Hackney, London"},
    {"booking_id": "B-3", "booking_date": _d(-30), "event_id": "E-099", "customer_email": DEMO_EMAIL,
     "amount_paid": "£5.00", "status": "Cancelled", "skill_level": "",
     "event_name": "Rounders in the Park", "event_date": _d(-25), "event_time": "18:00",
     "event_location": "London Fields, Hackney"},
    {"booking_id": "B-4", "booking_date": _d(-1), "event_id": "E-201", "customer_email": DEMO_EMAIL,
     "amount_paid": "£6.00", "status": "Confirmed", "skill_level": "Beginner",
     "event_name": "5-a-side Football All Levels", "event_date": _d(3), "event_time": "19:00",
     "event_location": "Haggerston Park, Hackney, London"},
]
