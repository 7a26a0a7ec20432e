"""
Dashboard endpoint — sessions, stats and recommendations for one user.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from app.core.config import settings
from app.db.session import get_db
from app.schemas.dashboard import DashboardResponse
from app.services.dashboard_service import DashboardService

router = APIRouter()


@router.get(
    "",
    summary="Get a user's dashboard (upcoming / past sessions, stats, recommendations).",
    response_model=DashboardResponse,
)
def get_dashboard(
    email: str = Query(..., min_length=1, description="User email (case-insensitive)"),
    page: int = Query(1, ge=1, description="Page of past sessions (1-indexed)"),
    page_size: int = Query(
        settings.DASHBOARD_DEFAULT_PAGE_SIZE, ge=1, le=settings.DASHBOARD_MAX_PAGE_SIZE,
        description="Past sessions per page",
    ),
    as_of: Optional[datetime.datetime] = Query(
        None, description="Reference datetime (defaults to now)"
    ),
    db: Session = Depends(get_db),
):
    ref_dt = as_of or datetime.datetime.utcnow()
    service = DashboardService(db)
    return service.get_dashboard(email, ref_dt, page, page_size)
