from typing import List

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from tasklist.api.v1.deps import get_current_user
from tasklist.core.constants import RECENT_TASKS_DEFAULT, RECENT_TASKS_MAX
from tasklist.db import dashboard as Dashboard
from tasklist.models.user import User
from tasklist.schemas.dashboard import DashboardSummary, RecentRecord
from tasklist.services.database_service import get_session

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/summary", response_model=DashboardSummary)
async def summary(user: User = Depends(get_current_user), session: Session = Depends(get_session)):
    """Counts per table for the current user."""
    return Dashboard.load_summary(session, user.id)


@router.get("/recent", response_model=List[RecentRecord])
async def recent(
    limit: int = Query(default=RECENT_TASKS_DEFAULT, ge=1, le=RECENT_TASKS_MAX),
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    """The current user's most recently updated tasks."""
    return Dashboard.load_recent(session, user.id, limit)
