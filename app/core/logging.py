"""
Logging setup.

Modules log through ``logging.getLogger(__name__)``; this configures the
root logger once, at application start-up.
"""

import logging

from app.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger from ``settings.LOG_LEVEL``."""
    resolved = (level or settings.LOG_LEVEL).upper()
    if settings.DEBUG:
        resolved = "DEBUG"

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved)

    if not root_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(handler)
