"""
Dashboard service.

Loads the user's profile, the event catalog and the user's bookings,
maps the raw rows into the typed domain schemas, and hands them to the
pure :func:`~app.dashboard.engine.compute_dashboard`.

Database failures surface as :class:`DataUnavailableError`; a missing
profile is a 404.
"""

import datetime
import logging
from typing import Callable, Optional, TypeVar

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.core.exceptions import DataUnavailableError
from app.dashboard.engine import compute_dashboard
from app.dashboard.normalize import parse_list, parse_price
from app.db.repositories.booking import BookingRepository
from app.db.repositories.event import EventRepository, SessionTemplateRepository
from app.db.repositories.user_profile import UserProfileRepository
from app.models.booking import BookingRow
from app.models.event import EventRow, SessionTemplateRow
from app.models.user_profile import UserProfileRow
from app.schemas.booking import Booking
from app.schemas.dashboard import DashboardResponse
from app.schemas.event import Event, SessionTemplate
from app.schemas.profile import UserProfile

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_EVENT_MINUTES = 60


# ======================================================================
# Row → schema mapping
# ======================================================================


def profile_from_row(row: UserProfileRow) -> UserProfile:
    """Map an onboarding row to a :class:`UserProfile`.

    The full name is split on the first space; preferred sports are the
    favourite activity followed by the other activities.
    """
    name_parts = (row.full_name or "").split(" ")
    sports = []
    if row.favourite_activity and row.favourite_activity.strip():
        sports.append(row.favourite_activity.strip())
    sports.extend(parse_list(row.other_activities))

    return UserProfile(email=row.email.strip(), first_name=name_parts[0], last_name=" ".join(name_parts[1:]),
                       home_borough=row.home_borough or "", preferred_sports=sports,
                       preferred_days=parse_list(row.preferred_days), preferred_times=parse_list(row.preferred_times),
                       fitness_level=row.experience_level or "", motivations=parse_list(row.motivations),
                       session_format=row.session_format or "", gender=row.gender or "", )


def template_from_row(row: SessionTemplateRow) -> SessionTemplate:
    return SessionTemplate(session_template_id=row.session_template_id, title=row.title or "",
                           sport=row.sport or "", difficulty=row.difficulty or "",
                           default_duration_minutes=row.default_duration_minutes, tags=parse_list(row.tags),
                           description=row.description or "", )


def event_from_row(row: EventRow, template: Optional[SessionTemplate] = None) -> Event:
    """Map an event row, filling blanks from its session template."""
    duration = row.duration_minutes
    if duration is None or duration < 0:
        duration = (template.default_duration_minutes if template else None) or DEFAULT_EVENT_MINUTES

    return Event(event_id=row.event_id, session_template_id=row.session_template_id or "",
                 event_name=row.event_name or (template.title if template else ""),
                 category=row.category or (template.sport if template else ""), date=row.date or "",
                 start_time=row.time or "", end_time=row.end_time or "", location=row.location or "",
                 borough=row.borough or "", price=max(parse_price(row.base_price), 0.0),
                 spots_remaining=row.spots_remaining or 0, duration_minutes=duration, active=row.active or "TRUE",
                 gender_target=row.gender_target or "", motivation_tags=parse_list(row.motivation_tags),
                 session_format=row.session_format or "", booking_url=row.booking_url or "",
                 attendee_list_url=row.attendee_list_url or "", image_url=row.image_url or "", )


def booking_from_row(row: BookingRow) -> Booking:
    return Booking(booking_id=row.booking_id or "", booking_date=row.booking_date or "", event_id=row.event_id or "",
                   customer_email=row.customer_email, amount_paid=row.amount_paid or "",
                   status=row.status or "Confirmed", skill_level=row.skill_level or "",
                   event_name=row.event_name or "", event_date=row.event_date or "",
                   event_time=row.event_time or "", event_location=row.event_location or "", )


# ======================================================================
# Service
# ======================================================================


class DashboardService:
    """Service for the user dashboard."""

    def __init__(self, session: Session):
        self.profiles = UserProfileRepository(session)
        self.events = EventRepository(session)
        self.templates = SessionTemplateRepository(session)
        self.bookings = BookingRepository(session)

    def get_user_profile(self, email: str) -> Optional[UserProfile]:
        row = self._read("user_profiles", lambda: self.profiles.get_by_email(email))
        return profile_from_row(row) if row else None

    def get_session_templates(self) -> list[SessionTemplate]:
        rows = self._read("session_templates", self.templates.get_all)
        return [template_from_row(r) for r in rows]

    def get_all_events(self, templates: Optional[list[SessionTemplate]] = None) -> list[Event]:
        by_id = {t.session_template_id: t for t in (templates or [])}
        rows = self._read("events", self.events.get_all)
        return [event_from_row(r, by_id.get(r.session_template_id)) for r in rows]

    def get_user_bookings(self, email: str) -> list[Booking]:
        rows = self._read("bookings", lambda: self.bookings.get_by_customer_email(email))
        return [booking_from_row(r) for r in rows]

    def get_dashboard(self, email: str, now: datetime.datetime, page: int = 1,
                      page_size: int = 10, ) -> DashboardResponse:
        """Build the dashboard of the user identified by *email*.

        Raises:
            HTTPException: 404 if no profile matches *email*.
            DataUnavailableError: If the data source cannot be read.
        """
        profile = self.get_user_profile(email)
        if profile is None:
            logger.info("Dashboard requested for unknown user %s", email)
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

        templates = self.get_session_templates()
        events = self.get_all_events(templates)
        bookings = self.get_user_bookings(email)

        result = compute_dashboard(profile, bookings, events, now, page, page_size, templates=templates)
        return DashboardResponse(profile=profile, **result.model_dump())

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _read(source: str, query: Callable[[], T]) -> T:
        try:
            return query()
        except SQLAlchemyError as e:
            logger.exception("Failed to read %s", source)
            raise DataUnavailableError(source, str(e)) from e
