"""Business logic services."""

from app.services.dashboard_service import DashboardService

__all__ = [
    "DashboardService",
]
