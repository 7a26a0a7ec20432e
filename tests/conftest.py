"""Shared test configuration.

The application engine is created at import time from settings; point it
at an in-memory SQLite database before anything under ``app`` is imported.
"""

import os

os.environ.setdefault("DATABASE_URI", "sqlite://")
os.environ.setdefault("LOG_LEVEL", "WARNING")
