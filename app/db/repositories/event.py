"""
Event repository.

Handles database operations for :class:`EventRow` and
:class:`SessionTemplateRow`.
"""

from sqlmodel import Session, select

from app.models.event import EventRow, SessionTemplateRow


class EventRepository:
    """Repository for EventRow database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: EventRow) -> EventRow:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_all(self) -> list[EventRow]:
        """Full catalog, in insertion order (rows without an id are skipped)."""
        statement = select(EventRow).where(EventRow.event_id != "").order_by(EventRow.id)
        return list(self.session.exec(statement).all())


class SessionTemplateRepository:
    """Repository for SessionTemplateRow database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: SessionTemplateRow) -> SessionTemplateRow:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_all(self) -> list[SessionTemplateRow]:
        return list(self.session.exec(select(SessionTemplateRow)).all())
