"""
Database initialization.

Creates all tables for profiles, session templates, events and bookings.
"""

import logging

from sqlmodel import SQLModel

from app.db.session import engine

logger = logging.getLogger(__name__)


def init_db() -> None:
    """
    Initialize database schema.

    - Creates all SQLModel tables (existing tables are left untouched)
    """

    # Import all models so SQLModel.metadata has them
    import app.db.base  # noqa: F401

    logger.info("Creating database tables...")
    SQLModel.metadata.create_all(engine)
    logger.info("Tables created successfully")


if __name__ == "__main__":
    init_db()
