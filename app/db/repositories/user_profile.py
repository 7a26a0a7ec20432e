"""
User profile repository.

Handles database operations for :class:`UserProfileRow`.
"""

from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from app.models.user_profile import UserProfileRow


class UserProfileRepository:
    """Repository for UserProfileRow database operations."""

    def __init__(self, session: Session):
        """
        Initialize repository with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session

    def create(self, profile: UserProfileRow) -> UserProfileRow:
        self.session.add(profile)
        self.session.commit()
        self.session.refresh(profile)
        return profile

    def get_by_email(self, email: str) -> Optional[UserProfileRow]:
        """
        Get a profile by email address.

        Matching ignores case and surrounding whitespace on both sides.

        Args:
            email: User email

        Returns:
            Profile row if found, None otherwise
        """
        normalized = email.strip().lower()
        statement = select(UserProfileRow).where(func.lower(func.trim(UserProfileRow.email)) == normalized)
        return self.session.exec(statement).first()
