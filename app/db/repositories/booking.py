"""
Booking repository.

Handles database operations for :class:`BookingRow`.
"""

from sqlalchemy import func
from sqlmodel import Session, select

from app.models.booking import BookingRow


class BookingRepository:
    """Repository for BookingRow database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: BookingRow) -> BookingRow:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_customer_email(self, email: str) -> list[BookingRow]:
        """All bookings of a customer, in source order.

        Email matching ignores case and surrounding whitespace.
        """
        normalized = email.strip().lower()
        statement = (select(BookingRow).where(func.lower(func.trim(BookingRow.customer_email)) == normalized)
                     .order_by(BookingRow.id))
        return list(self.session.exec(statement).all())
